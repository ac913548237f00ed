"""
translation-sync - keep a multi-language translation dictionary in sync with
its reference language and render it for the front-end.
"""

from .main import main, run, run_pipeline

__all__ = ["main", "run", "run_pipeline"]
