"""
Translation dictionary model and persistence.

This package contains the Pydantic model of the dictionary file and the
functions that read and atomically write it.
"""

from .models import Dictionary, LanguageEntry, ValueKind, classify_value
from .store import dump_dictionary, load_dictionary, save_dictionary

__all__ = [
    "Dictionary",
    "LanguageEntry",
    "ValueKind",
    "classify_value",
    "dump_dictionary",
    "load_dictionary",
    "save_dictionary",
]
