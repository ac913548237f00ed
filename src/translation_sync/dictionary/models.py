"""Data model of the translation dictionary file using Pydantic models."""

from __future__ import annotations

from enum import Enum
from typing import ClassVar

from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator

from ..utils.core.exceptions import UnsupportedValueTypeError


class ValueKind(Enum):
    """The two shapes a translation value may take."""

    SCALAR = "scalar"
    SEQUENCE = "sequence"


def classify_value(key: str, value: object) -> ValueKind:
    """
    Determine whether a translation value is a scalar or a sequence.

    Args:
        key: Translation key the value belongs to (used in the error)
        value: Raw value as read from the dictionary file

    Returns:
        ValueKind.SCALAR for a string, ValueKind.SEQUENCE for a list of strings

    Raises:
        UnsupportedValueTypeError: For any other shape, including lists that
            hold anything but strings
    """
    match value:
        case str():
            return ValueKind.SCALAR
        case list() if all(isinstance(item, str) for item in value):  # pyright: ignore[reportUnknownVariableType]
            return ValueKind.SEQUENCE
        case _:
            raise UnsupportedValueTypeError(key, value)


class LanguageEntry(BaseModel):
    """One language of the dictionary: its codes and its key/value mapping."""

    model_config: ClassVar[ConfigDict] = ConfigDict(populate_by_name=True)

    deepl_language: str = Field(
        default="",
        alias="deeplLanguage",
        description="Language code understood by DeepL; empty disables auto-fill",
    )
    language_key: str = Field(
        default="",
        alias="languageKey",
        description="Key the language is exported under in the generated artifact",
    )
    translations: dict[str, object] = Field(
        default_factory=dict,
        description="Translation key to string or list of strings",
    )

    @field_validator("translations", mode="before")
    @classmethod
    def empty_translations(cls, v: object) -> object:
        """Treat an explicit null mapping as an empty one."""
        return {} if v is None else v

    def is_unset(self, key: str) -> bool:
        """Whether the key is missing or explicitly null in this entry."""
        return self.translations.get(key) is None


class Dictionary(BaseModel):
    """The whole dictionary file: the reference plus every target language."""

    reference: LanguageEntry
    translations: dict[str, LanguageEntry] = Field(default_factory=dict)

    @field_validator("translations", mode="before")
    @classmethod
    def empty_languages(cls, v: object) -> object:
        """Treat an explicit null language mapping as an empty one."""
        return {} if v is None else v

    @model_validator(mode="after")
    def reference_has_language_key(self) -> Dictionary:
        """The reference is exported under its own key, so it needs one."""
        if not self.reference.language_key:
            raise ValueError("reference entry must define a languageKey")
        return self

    def to_document(self) -> dict[str, object]:
        """Serialize to the plain mapping written to disk (camelCase keys)."""
        return self.model_dump(by_alias=True, exclude_defaults=True)

    def render_view(self) -> dict[str, LanguageEntry]:
        """
        Build the language mapping used for rendering.

        The reference is added under its own language key. The view is a new
        mapping and is never written back to the dictionary file.
        """
        view = dict(self.translations)
        view[self.reference.language_key] = self.reference
        return view
