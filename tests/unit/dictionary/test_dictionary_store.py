"""Tests for loading and saving the translation dictionary."""

from __future__ import annotations

from pathlib import Path
from unittest.mock import patch

import pytest
import yaml

from src.translation_sync.dictionary.models import Dictionary, LanguageEntry
from src.translation_sync.dictionary.store import (
    dump_dictionary,
    load_dictionary,
    save_dictionary,
)
from src.translation_sync.utils.core.exceptions import LoadError, PersistError
from tests.utils.test_helpers import write_dictionary_file


class TestLoadDictionary:
    """Test cases for load_dictionary."""

    def test_load_success(self, dictionary_file: Path) -> None:
        """Test loading a valid dictionary file."""
        dictionary = load_dictionary(dictionary_file)

        assert dictionary.reference.language_key == "en"
        assert dictionary.reference.deepl_language == "en"
        assert dictionary.reference.translations["steps"] == [
            "Open the link",
            "Copy the secret",
            "Close the tab",
        ]
        assert sorted(dictionary.translations) == ["de", "fr", "xx"]
        assert dictionary.translations["xx"].deepl_language == ""

    def test_load_file_not_found(self, tmp_path: Path) -> None:
        """Test loading a file that does not exist."""
        with pytest.raises(LoadError, match="Failed to open translation file"):
            _ = load_dictionary(tmp_path / "missing.yaml")

    def test_load_invalid_yaml(self, tmp_path: Path) -> None:
        """Test loading a file with broken YAML syntax."""
        path = tmp_path / "i18n.yaml"
        _ = path.write_text("reference: [unclosed\n", encoding="utf-8")

        with pytest.raises(LoadError, match="Invalid YAML syntax"):
            _ = load_dictionary(path)

    def test_load_non_mapping(self, tmp_path: Path) -> None:
        """Test loading a YAML document that is not a mapping."""
        path = tmp_path / "i18n.yaml"
        _ = path.write_text("- just\n- a list\n", encoding="utf-8")

        with pytest.raises(LoadError, match="must contain a YAML mapping, got list"):
            _ = load_dictionary(path)

    def test_load_empty_file(self, tmp_path: Path) -> None:
        """Test loading an empty file."""
        path = tmp_path / "i18n.yaml"
        _ = path.write_text("", encoding="utf-8")

        with pytest.raises(LoadError, match="got NoneType"):
            _ = load_dictionary(path)

    def test_load_missing_reference(self, tmp_path: Path) -> None:
        """Test loading a dictionary without a reference entry."""
        path = write_dictionary_file(
            tmp_path / "i18n.yaml", {"translations": {"de": {"translations": {}}}}
        )

        with pytest.raises(LoadError, match="Invalid translation file structure"):
            _ = load_dictionary(path)

    def test_load_wrong_entry_type(self, tmp_path: Path) -> None:
        """Test loading a dictionary whose language entry is not a mapping."""
        path = write_dictionary_file(
            tmp_path / "i18n.yaml",
            {"reference": {"languageKey": "en"}, "translations": {"de": "oops"}},
        )

        with pytest.raises(LoadError):
            _ = load_dictionary(path)

    def test_load_keeps_unsupported_values(self, tmp_path: Path) -> None:
        """Test that odd value types load and are left for sync to reject."""
        path = write_dictionary_file(
            tmp_path / "i18n.yaml",
            {"reference": {"languageKey": "en", "translations": {"count": 3}}},
        )

        dictionary = load_dictionary(path)

        assert dictionary.reference.translations == {"count": 3}

    def test_load_yes_no_values_as_strings(self, tmp_path: Path) -> None:
        """Test that unquoted yes/no words stay strings."""
        path = tmp_path / "i18n.yaml"
        _ = path.write_text(
            "reference:\n"
            "  languageKey: en\n"
            "  translations:\n"
            "    confirm: Yes\n"
            "    toggle: OFF\n"
            "translations:\n"
            "  de:\n"
            "    deeplLanguage: de\n"
            "    translations:\n"
            "      cancel: No\n",
            encoding="utf-8",
        )

        dictionary = load_dictionary(path)

        assert dictionary.reference.translations == {"confirm": "Yes", "toggle": "OFF"}
        assert dictionary.translations["de"].translations == {"cancel": "No"}

    def test_load_on_key_as_string(self, tmp_path: Path) -> None:
        """Test that a key spelled like a YAML 1.1 boolean is a string key."""
        path = tmp_path / "i18n.yaml"
        _ = path.write_text(
            "reference:\n"
            "  languageKey: en\n"
            "  translations:\n"
            "    on: Enabled\n"
            "    off: Disabled\n",
            encoding="utf-8",
        )

        dictionary = load_dictionary(path)

        assert dictionary.reference.translations == {"on": "Enabled", "off": "Disabled"}

    def test_load_true_false_still_booleans(self, tmp_path: Path) -> None:
        """Test that true/false keep their boolean meaning."""
        path = tmp_path / "i18n.yaml"
        _ = path.write_text(
            "reference:\n"
            "  languageKey: en\n"
            "  translations:\n"
            "    flag: true\n",
            encoding="utf-8",
        )

        dictionary = load_dictionary(path)

        assert dictionary.reference.translations == {"flag": True}

    def test_yes_value_survives_save(self, tmp_path: Path) -> None:
        """Test that a loaded 'Yes' is written back and read again as a string."""
        path = tmp_path / "i18n.yaml"
        _ = path.write_text(
            "reference:\n  languageKey: en\n  translations:\n    confirm: Yes\n",
            encoding="utf-8",
        )

        save_dictionary(path, load_dictionary(path))

        assert load_dictionary(path).reference.translations == {"confirm": "Yes"}


class TestSaveDictionary:
    """Test cases for save_dictionary."""

    def test_round_trip(self, tmp_path: Path, sample_dictionary: Dictionary) -> None:
        """Test that loading a saved dictionary gives an equal dictionary."""
        path = tmp_path / "i18n.yaml"

        save_dictionary(path, sample_dictionary)

        assert load_dictionary(path) == sample_dictionary

    def test_round_trip_without_languages(self, tmp_path: Path) -> None:
        """Test the round trip of a reference-only dictionary."""
        dictionary = Dictionary(
            reference=LanguageEntry(language_key="en", translations={"a": ["x", "y"]})
        )
        path = tmp_path / "i18n.yaml"

        save_dictionary(path, dictionary)

        assert load_dictionary(path) == dictionary

    def test_save_overwrites_existing(
        self, dictionary_file: Path, sample_dictionary: Dictionary
    ) -> None:
        """Test that saving replaces the previous content."""
        sample_dictionary.translations["de"].translations["farewell"] = "Tschüss"

        save_dictionary(dictionary_file, sample_dictionary)

        reloaded = load_dictionary(dictionary_file)
        assert reloaded.translations["de"].translations["farewell"] == "Tschüss"

    def test_output_uses_file_keys_and_sorted_order(
        self, sample_dictionary: Dictionary
    ) -> None:
        """Test that the YAML uses camelCase keys in lexical order."""
        content = dump_dictionary(sample_dictionary)
        data = yaml.safe_load(content)

        assert list(data) == ["reference", "translations"]
        assert list(data["translations"]) == ["de", "fr", "xx"]
        assert list(data["reference"]["translations"]) == ["farewell", "greeting", "steps"]
        assert data["reference"]["languageKey"] == "en"

    def test_output_is_deterministic(self, sample_dictionary: Dictionary) -> None:
        """Test that dumping twice produces identical text."""
        assert dump_dictionary(sample_dictionary) == dump_dictionary(
            sample_dictionary.model_copy(deep=True)
        )

    def test_output_keeps_unicode_readable(self) -> None:
        """Test that non-ASCII text is written literally."""
        dictionary = Dictionary(
            reference=LanguageEntry(language_key="de", translations={"hi": "Grüße"})
        )

        assert "Grüße" in dump_dictionary(dictionary)

    def test_failed_rename_leaves_original(
        self, dictionary_file: Path, sample_dictionary: Dictionary
    ) -> None:
        """Test a crash between temp-file write and rename."""
        original = dictionary_file.read_bytes()
        sample_dictionary.translations["de"].translations["farewell"] = "Tschüss"
        written: list[str] = []

        def crash(self: Path, target: Path) -> Path:
            written.append(self.read_text(encoding="utf-8"))
            raise OSError("simulated crash")

        with patch.object(Path, "replace", crash):
            with pytest.raises(PersistError, match="simulated crash"):
                save_dictionary(dictionary_file, sample_dictionary)

        assert len(written) == 1
        assert "Tschüss" in written[0]
        assert dictionary_file.read_bytes() == original
        assert load_dictionary(dictionary_file).translations["de"].translations == {
            "greeting": "Hallo"
        }
        assert [p for p in dictionary_file.parent.iterdir() if p.suffix == ".tmp"] == []

    def test_save_into_missing_directory(
        self, tmp_path: Path, sample_dictionary: Dictionary
    ) -> None:
        """Test saving into a directory that does not exist."""
        with pytest.raises(PersistError, match="Failed to save translation file"):
            save_dictionary(tmp_path / "missing" / "i18n.yaml", sample_dictionary)

    def test_unserializable_value(self, tmp_path: Path) -> None:
        """Test that a value YAML cannot represent raises PersistError."""
        dictionary = Dictionary(
            reference=LanguageEntry(language_key="en", translations={"bad": object()})
        )

        with pytest.raises(PersistError, match="Failed to encode"):
            save_dictionary(tmp_path / "i18n.yaml", dictionary)
