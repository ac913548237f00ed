"""
Main entry point for translation-sync.

This module sets up logging, builds the run configuration and drives the
pipeline: load the dictionary, fill missing translations, save the
dictionary, render the JavaScript module. Stages run strictly in that order
and any failure aborts the run, so the dictionary file is only rewritten
after every translation succeeded.

Concurrent runs against the same files are not safe; no locking is done.
"""

from __future__ import annotations

import logging
import sys

from rich.console import Console

from .config.schema import SyncConfig
from .dictionary.models import Dictionary
from .dictionary.store import load_dictionary, save_dictionary
from .render.js_renderer import write_artifact
from .sync.engine import SyncEngine, SyncResult
from .sync.report import print_missing_keys_report
from .translation.deepl_client import DeepLClient, Translator
from .utils.cli.args import build_config
from .utils.core.exceptions import TranslationSyncError

logger = logging.getLogger(__name__)


def setup_logging(level: int = logging.INFO) -> None:
    """
    Configure console logging for a run.

    Args:
        level: Minimum level for the application's messages
    """
    root_logger = logging.getLogger()
    root_logger.setLevel(level)

    # Clear any existing handlers
    root_logger.handlers.clear()

    console_handler = logging.StreamHandler(sys.stderr)
    console_handler.setLevel(level)
    console_handler.setFormatter(
        logging.Formatter("%(asctime)s - %(levelname)s - %(message)s")
    )
    root_logger.addHandler(console_handler)

    # Set specific log levels for noisy libraries
    logging.getLogger("httpx").setLevel(logging.WARNING)
    logging.getLogger("httpcore").setLevel(logging.WARNING)


def sync_translations(
    dictionary: Dictionary, config: SyncConfig, translator: Translator | None = None
) -> SyncResult | None:
    """
    Fill missing translations in place.

    Args:
        dictionary: Loaded dictionary to update
        config: Run configuration
        translator: Translator to use; a DeepL client is created from the
            configuration when omitted

    Returns:
        SyncResult, or None when sync was skipped for lack of an API key
    """
    if translator is not None:
        return SyncEngine(translator).sync(dictionary)

    if not config.deepl_api_key:
        logger.warning("Missing DeepL API key, skipping translation of new strings")
        return None

    with DeepLClient(
        config.deepl_api_endpoint,
        config.deepl_api_key,
        timeout=config.request_timeout,
    ) as client:
        return SyncEngine(client).sync(dictionary)


def run_pipeline(config: SyncConfig, translator: Translator | None = None) -> Dictionary:
    """
    Run load, sync, persist and render in order.

    Args:
        config: Run configuration
        translator: Optional translator replacing the DeepL client

    Returns:
        The synchronized dictionary as persisted

    Raises:
        TranslationSyncError: From whichever stage failed
    """
    logger.info("Loading translations...")
    dictionary = load_dictionary(config.translation_file)

    logger.info("Auto-translating new strings...")
    result = sync_translations(dictionary, config, translator)
    if result is not None:
        logger.info(str(result))

    logger.info("Saving translation file...")
    save_dictionary(config.translation_file, dictionary)

    logger.info("Updating JS embedded translations...")
    write_artifact(config.output_file, dictionary)

    return dictionary


def run_check(config: SyncConfig, console: Console | None = None) -> int:
    """
    Report missing translations without translating or writing anything.

    Returns:
        Exit status: 1 if any translation is missing, 0 otherwise
    """
    dictionary = load_dictionary(config.translation_file)
    missing = print_missing_keys_report(dictionary, console)
    return 1 if missing else 0


def main(args: list[str] | None = None) -> int:
    """
    Run translation-sync from the command line.

    Args:
        args: Command-line arguments (defaults to sys.argv[1:])

    Returns:
        Process exit status
    """
    config = build_config(args)
    setup_logging(config.logging_level)

    try:
        if config.check:
            return run_check(config)
        _ = run_pipeline(config)
    except TranslationSyncError as e:
        logger.error(f"Translation sync failed ({e.category.value}): {e}")
        return 1
    except KeyboardInterrupt:
        logger.warning("Interrupted by user")
        return 130

    return 0


def run() -> None:
    """Console script entry point."""
    sys.exit(main())


if __name__ == "__main__":
    run()
