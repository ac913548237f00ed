"""
Test utilities package for translation-sync tests.

### test_helpers.py
- `RecordingTranslator`: stub translator that records every call
- `create_mock_deepl_client()`: httpx client backed by a MockTransport
- `deepl_response()`: JSON body in the shape the DeepL API returns
- `write_dictionary_file()`: write a dictionary document as YAML
- `parse_artifact()`: read the language blocks back out of a rendered module
"""

from .test_helpers import (
    RecordingTranslator,
    create_mock_deepl_client,
    deepl_response,
    parse_artifact,
    write_dictionary_file,
)

__all__ = [
    "RecordingTranslator",
    "create_mock_deepl_client",
    "deepl_response",
    "parse_artifact",
    "write_dictionary_file",
]
