"""Machine-translation clients."""

from .deepl_client import DEFAULT_API_ENDPOINT, DEFAULT_TIMEOUT, DeepLClient, Translator

__all__ = ["DEFAULT_API_ENDPOINT", "DEFAULT_TIMEOUT", "DeepLClient", "Translator"]
