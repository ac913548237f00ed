"""
Rendering of the JavaScript module that embeds every language.

Each language's mapping is serialized to JSON and embedded in a single-quoted
JavaScript string handed to ``JSON.parse``, so the front-end ships the
translations as compact string literals.
"""

from __future__ import annotations

import json
import logging
from collections.abc import Mapping
from pathlib import Path

from ..dictionary.models import Dictionary, LanguageEntry
from ..utils.core.exceptions import RenderError
from ..utils.io import atomic_write_text

logger = logging.getLogger(__name__)

ARTIFACT_HEADER = "// Auto-Generated, do not edit!"


def escape_js_single_quoted(text: str) -> str:
    """Escape text for use inside a single-quoted JavaScript string literal."""
    return text.replace("\\", "\\\\").replace("'", "\\'")


def translations_to_json(translations: Mapping[str, object]) -> str:
    """
    Serialize one language's mapping to compact JSON with sorted keys.

    Raises:
        RenderError: If a value cannot be represented as JSON
    """
    try:
        return json.dumps(
            translations, ensure_ascii=False, sort_keys=True, separators=(",", ":")
        )
    except (TypeError, ValueError) as e:
        raise RenderError(f"Marshalling JSON failed: {e}") from e


def render_artifact(languages: Mapping[str, LanguageEntry]) -> str:
    """
    Render the generated module for the given languages.

    Args:
        languages: Language key to entry; blocks are emitted in key order

    Returns:
        Complete JavaScript source text

    Raises:
        RenderError: If a language's mapping cannot be serialized
    """
    lines = [ARTIFACT_HEADER, "", "export default {"]
    for lang in sorted(languages):
        payload = translations_to_json(languages[lang].translations)
        lines.append(
            f"  '{escape_js_single_quoted(lang)}': "
            f"JSON.parse('{escape_js_single_quoted(payload)}'),"
        )
    lines.append("}")
    return "\n".join(lines) + "\n"


def write_artifact(path: Path, dictionary: Dictionary) -> None:
    """
    Render the dictionary's render view and write it atomically.

    Args:
        path: Output file of the generated module
        dictionary: Synchronized dictionary; the reference is included under
            its own language key

    Raises:
        RenderError: If rendering or writing fails
    """
    content = render_artifact(dictionary.render_view())

    try:
        atomic_write_text(path, content)
    except OSError as e:
        raise RenderError(f"Writing generated translations failed: {e}") from e

    logger.debug(f"Rendered translations to {path}")
