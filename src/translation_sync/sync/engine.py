"""
Synchronization of target languages against the reference language.

For every target language, every reference key that is unset in that
language is filled by the translator. Sync is additive only: existing values,
including keys the reference no longer has, are never changed or removed.
Languages and keys are visited in lexical order so request order and output
are reproducible.
"""

from __future__ import annotations

import logging
from typing import cast, override

from ..dictionary.models import Dictionary, LanguageEntry, ValueKind, classify_value
from ..translation.deepl_client import Translator

logger = logging.getLogger(__name__)


class SyncResult:
    """Result of a sync operation."""

    def __init__(self) -> None:
        self.filled_keys: list[tuple[str, str]] = []
        self.skipped_languages: list[str] = []
        self.request_count: int = 0

    @property
    def filled_count(self) -> int:
        """Number of (language, key) pairs that were filled."""
        return len(self.filled_keys)

    @property
    def skip_count(self) -> int:
        """Number of languages skipped for lack of a target code."""
        return len(self.skipped_languages)

    @override
    def __str__(self) -> str:
        return (
            f"Sync Results: "
            f"{self.filled_count} key(s) filled, "
            f"{self.skip_count} language(s) skipped, "
            f"{self.request_count} translation request(s)"
        )


def find_missing_keys(dictionary: Dictionary) -> dict[str, list[str]]:
    """
    List the reference keys that are unset in each target language.

    Args:
        dictionary: Dictionary to inspect

    Returns:
        Mapping of language key to sorted missing keys, languages in lexical
        order. Languages without missing keys map to an empty list.
    """
    reference_keys = sorted(dictionary.reference.translations)
    return {
        lang: [key for key in reference_keys if dictionary.translations[lang].is_unset(key)]
        for lang in sorted(dictionary.translations)
    }


class SyncEngine:
    """Fills missing translations using a Translator."""

    def __init__(self, translator: Translator) -> None:
        self.translator: Translator = translator

    def sync(self, dictionary: Dictionary) -> SyncResult:
        """
        Fill every unset reference key in every target language.

        Reference values are classified before anything is requested, so an
        unsupported value fails the sync without touching any entry. This
        holds even when no language is missing the offending key.

        Args:
            dictionary: Dictionary to update in place

        Returns:
            SyncResult describing what was filled and skipped

        Raises:
            UnsupportedValueTypeError: If a reference value is neither a
                string nor a list of strings
            RequestError: If a translation request fails
            ResponseShapeError: If a translation response is malformed
        """
        result = SyncResult()
        reference = dictionary.reference

        kinds = {
            key: classify_value(key, value)
            for key, value in reference.translations.items()
        }

        for lang, missing in find_missing_keys(dictionary).items():
            entry = dictionary.translations[lang]
            if not entry.deepl_language:
                logger.warning(f"Missing DeepL language for {lang}, skipping")
                result.skipped_languages.append(lang)
                continue

            for key in missing:
                entry.translations[key] = self._translate_value(
                    reference, entry, lang, key, kinds[key], result
                )
                result.filled_keys.append((lang, key))

        return result

    def _translate_value(
        self,
        reference: LanguageEntry,
        entry: LanguageEntry,
        lang: str,
        key: str,
        kind: ValueKind,
        result: SyncResult,
    ) -> str | list[str]:
        """Translate one reference value into the entry's language."""
        logger.info(f"Fetching translation for {lang}:{key}")
        source = reference.translations[key]

        match kind:
            case ValueKind.SCALAR:
                result.request_count += 1
                return self.translator.translate(
                    reference.deepl_language, entry.deepl_language, cast(str, source)
                )
            case ValueKind.SEQUENCE:
                translated: list[str] = []
                for item in cast(list[str], source):
                    result.request_count += 1
                    translated.append(
                        self.translator.translate(
                            reference.deepl_language, entry.deepl_language, item
                        )
                    )
                return translated
