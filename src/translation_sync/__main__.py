"""Allow running the tool with ``python -m translation_sync``."""

from .main import run

run()
