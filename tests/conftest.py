"""
Global test fixtures for translation-sync tests.

Provides a sample dictionary document covering scalar and sequence values,
a target language without a DeepL code, and a partially translated language,
plus fixtures writing it to disk and building a matching configuration.
"""

from __future__ import annotations

from pathlib import Path

import pytest

from src.translation_sync.config.schema import SyncConfig
from src.translation_sync.dictionary.models import Dictionary
from tests.utils.test_helpers import RecordingTranslator, write_dictionary_file


@pytest.fixture
def sample_document() -> dict[str, object]:
    """
    Dictionary document as it appears in the YAML file.

    - ``de`` has one of three keys translated
    - ``fr`` has nothing translated and a stale key the reference lost
    - ``xx`` has no DeepL code and must never be auto-filled
    """
    return {
        "reference": {
            "deeplLanguage": "en",
            "languageKey": "en",
            "translations": {
                "greeting": "Hello",
                "farewell": "Goodbye",
                "steps": ["Open the link", "Copy the secret", "Close the tab"],
            },
        },
        "translations": {
            "de": {
                "deeplLanguage": "de",
                "languageKey": "de",
                "translations": {"greeting": "Hallo"},
            },
            "fr": {
                "deeplLanguage": "fr",
                "translations": {"obsolete": "Ancien texte"},
            },
            "xx": {
                "translations": {"greeting": "???"},
            },
        },
    }


@pytest.fixture
def sample_dictionary(sample_document: dict[str, object]) -> Dictionary:
    """The sample document validated into a Dictionary."""
    return Dictionary.model_validate(sample_document)


@pytest.fixture
def dictionary_file(tmp_path: Path, sample_document: dict[str, object]) -> Path:
    """The sample document written to a temporary YAML file."""
    return write_dictionary_file(tmp_path / "i18n.yaml", sample_document)


@pytest.fixture
def sync_config(tmp_path: Path, dictionary_file: Path) -> SyncConfig:
    """Configuration pointing at the temporary dictionary and output files."""
    return SyncConfig(
        translation_file=dictionary_file,
        output_file=tmp_path / "langs.js",
    )


@pytest.fixture
def recording_translator() -> RecordingTranslator:
    """Translator stub that records calls."""
    return RecordingTranslator()
