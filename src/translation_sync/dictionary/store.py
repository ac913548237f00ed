"""
Loading and saving of the YAML translation dictionary.

The dictionary is read once at start-up and written once after sync. Saving
goes through a temporary file and a rename, so an interrupted run never
leaves a half-written dictionary behind.
"""

from __future__ import annotations

import logging
import re
from pathlib import Path

import yaml
from pydantic import ValidationError

from ..utils.core.exceptions import LoadError, PersistError
from ..utils.io import atomic_write_text
from .models import Dictionary

logger = logging.getLogger(__name__)

_BOOL_TAG = "tag:yaml.org,2002:bool"


class DictionaryLoader(yaml.SafeLoader):
    """
    Safe loader that only reads ``true``/``false`` as booleans.

    PyYAML follows YAML 1.1, where unquoted ``yes``, ``no``, ``on`` and
    ``off`` are booleans too. Those are ordinary words in a translation file,
    so they stay strings here as they do under YAML 1.2.
    """

    yaml_implicit_resolvers = {  # pyright: ignore[reportUnannotatedClassAttribute]
        first: [(tag, regexp) for tag, regexp in resolvers if tag != _BOOL_TAG]
        for first, resolvers in yaml.SafeLoader.yaml_implicit_resolvers.items()
    }


DictionaryLoader.add_implicit_resolver(
    _BOOL_TAG,
    re.compile(r"^(?:true|True|TRUE|false|False|FALSE)$"),
    list("tTfF"),
)


def load_dictionary(path: Path) -> Dictionary:
    """
    Load and validate the translation dictionary from a YAML file.

    Args:
        path: Path to the dictionary file

    Returns:
        Dictionary: Validated dictionary

    Raises:
        LoadError: If the file cannot be read, is not valid YAML, is not a
            mapping, or does not match the dictionary structure
    """
    try:
        with path.open("r", encoding="utf-8") as f:
            raw_data: object = yaml.load(f, Loader=DictionaryLoader)  # pyright: ignore[reportAny]
    except OSError as e:
        raise LoadError(f"Failed to open translation file {path}: {e}") from e
    except yaml.YAMLError as e:
        raise LoadError(f"Invalid YAML syntax in {path}: {e}") from e

    if not isinstance(raw_data, dict):
        raise LoadError(
            f"Translation file must contain a YAML mapping, got {type(raw_data).__name__}"
        )

    try:
        dictionary = Dictionary.model_validate(raw_data)
    except ValidationError as e:
        raise LoadError(f"Invalid translation file structure in {path}: {e}") from e

    logger.debug(
        f"Loaded {len(dictionary.reference.translations)} reference keys and "
        f"{len(dictionary.translations)} target language(s) from {path}"
    )
    return dictionary


def dump_dictionary(dictionary: Dictionary) -> str:
    """
    Serialize a dictionary to YAML text.

    Keys are sorted at every level so repeated runs produce identical files.
    """
    return yaml.safe_dump(
        dictionary.to_document(),
        default_flow_style=False,
        sort_keys=True,
        allow_unicode=True,
        indent=2,
    )


def save_dictionary(path: Path, dictionary: Dictionary) -> None:
    """
    Save the dictionary to a YAML file with an atomic replace.

    Args:
        path: Path of the dictionary file to replace
        dictionary: Dictionary to persist

    Raises:
        PersistError: If serialization or any file operation fails. The
            existing file is left unchanged in that case.
    """
    try:
        content = dump_dictionary(dictionary)
    except yaml.YAMLError as e:
        raise PersistError(f"Failed to encode translation file: {e}") from e

    try:
        atomic_write_text(path, content)
    except OSError as e:
        raise PersistError(f"Failed to save translation file: {e}") from e

    logger.debug(f"Saved translation file to {path}")
