"""
Exception classes for translation-sync.

Every failure the pipeline can report is a subclass of TranslationSyncError,
tagged with an ErrorCategory so the entry point can log which stage broke
without inspecting exception types one by one.
"""

from __future__ import annotations

from enum import Enum


class ErrorCategory(Enum):
    """Categories of errors raised by the sync pipeline."""

    STORAGE = "storage"
    NETWORK = "network"
    API = "api"
    VALIDATION = "validation"
    RENDER = "render"
    CONFIGURATION = "configuration"


class TranslationSyncError(Exception):
    """Base exception class for translation-sync specific errors."""

    def __init__(
        self,
        message: str,
        category: ErrorCategory,
        context: object | None = None,
    ) -> None:
        super().__init__(message)
        self.category: ErrorCategory = category
        self.context: object | None = context


class LoadError(TranslationSyncError):
    """The dictionary file could not be read or parsed."""

    def __init__(self, message: str, context: object | None = None) -> None:
        super().__init__(message, category=ErrorCategory.STORAGE, context=context)


class PersistError(TranslationSyncError):
    """The dictionary file could not be written."""

    def __init__(self, message: str, context: object | None = None) -> None:
        super().__init__(message, category=ErrorCategory.STORAGE, context=context)


class RenderError(TranslationSyncError):
    """The generated artifact could not be serialized or written."""

    def __init__(self, message: str, context: object | None = None) -> None:
        super().__init__(message, category=ErrorCategory.RENDER, context=context)


class RequestError(TranslationSyncError):
    """Transport failure or non-success status from the translation API."""

    def __init__(
        self,
        message: str,
        status_code: int | None = None,
        context: object | None = None,
    ) -> None:
        super().__init__(message, category=ErrorCategory.NETWORK, context=context)
        self.status_code: int | None = status_code


class ResponseShapeError(TranslationSyncError):
    """The translation API answered with something other than one translation."""

    def __init__(self, message: str, context: object | None = None) -> None:
        super().__init__(message, category=ErrorCategory.API, context=context)


class UnsupportedValueTypeError(TranslationSyncError):
    """A reference value is neither a string nor a list of strings."""

    def __init__(self, key: str, value: object) -> None:
        super().__init__(
            f"unsupported translation value type {type(value).__name__} for key {key!r}",
            category=ErrorCategory.VALIDATION,
            context=value,
        )
        self.key: str = key
