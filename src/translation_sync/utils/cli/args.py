"""
Command-line argument parsing for translation-sync.

Every flag can also be given through an environment variable named after the
flag (``--deepl-api-key`` -> ``DEEPL_API_KEY``); an explicit flag wins.
"""

from __future__ import annotations

import argparse
import os
from collections.abc import Mapping

from pydantic import ValidationError

from ...config.schema import SyncConfig
from ...translation.deepl_client import DEFAULT_API_ENDPOINT
from ..core.version import get_version


class DefaultPaths:
    """Default paths for translation-sync."""

    TRANSLATION_FILE: str = "i18n.yaml"
    OUTPUT_FILE: str = "src/langs/langs.js"


def create_argument_parser(
    environ: Mapping[str, str] | None = None,
) -> argparse.ArgumentParser:
    """
    Create the argument parser for translation-sync.

    Args:
        environ: Environment to read flag defaults from (defaults to os.environ)

    Returns:
        Configured ArgumentParser instance
    """
    env = os.environ if environ is None else environ

    parser = argparse.ArgumentParser(
        prog="translation-sync",
        description=(
            "Fill missing translations from a reference language using DeepL "
            "and render them into a JavaScript module"
        ),
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  translation-sync
    Sync i18n.yaml and render src/langs/langs.js

  DEEPL_API_KEY=... translation-sync -t i18n.yaml -o frontend/langs.js
    Use custom file locations

  translation-sync --check
    List missing translations without contacting DeepL or writing files
""",
    )

    _ = parser.add_argument(
        "--deepl-api-endpoint",
        default=env.get("DEEPL_API_ENDPOINT", DEFAULT_API_ENDPOINT),
        help="DeepL API endpoint to request translations from (default: %(default)s)",
        metavar="URL",
    )
    _ = parser.add_argument(
        "--deepl-api-key",
        default=env.get("DEEPL_API_KEY", ""),
        help="API key for the DeepL API (env: DEEPL_API_KEY)",
        metavar="KEY",
    )
    _ = parser.add_argument(
        "--output-file",
        "-o",
        default=env.get("OUTPUT_FILE", DefaultPaths.OUTPUT_FILE),
        help="Where to put rendered translations (default: %(default)s)",
        metavar="PATH",
    )
    _ = parser.add_argument(
        "--translation-file",
        "-t",
        default=env.get("TRANSLATION_FILE", DefaultPaths.TRANSLATION_FILE),
        help="File to use for translations (default: %(default)s)",
        metavar="PATH",
    )
    _ = parser.add_argument(
        "--log-level",
        default=env.get("LOG_LEVEL", "info"),
        help="Log level (debug, info, warn, error, fatal) (default: %(default)s)",
        metavar="LEVEL",
    )
    _ = parser.add_argument(
        "--check",
        action="store_true",
        help="Report missing translations and exit non-zero if any are missing",
    )
    _ = parser.add_argument(
        "--version", action="version", version=f"%(prog)s {get_version()}"
    )

    return parser


def build_config(
    args: list[str] | None = None, environ: Mapping[str, str] | None = None
) -> SyncConfig:
    """
    Parse command-line arguments into a validated configuration.

    Args:
        args: List of arguments to parse (defaults to sys.argv[1:])
        environ: Environment to read flag defaults from (defaults to os.environ)

    Returns:
        SyncConfig built from flags and environment

    Raises:
        SystemExit: If parsing or validation fails (status 2), or --help or
            --version is requested (status 0)
    """
    parser = create_argument_parser(environ)
    parsed = parser.parse_args(args)

    try:
        return SyncConfig(
            deepl_api_endpoint=getattr(parsed, "deepl_api_endpoint"),
            deepl_api_key=getattr(parsed, "deepl_api_key"),
            output_file=getattr(parsed, "output_file"),
            translation_file=getattr(parsed, "translation_file"),
            log_level=getattr(parsed, "log_level"),
            check=getattr(parsed, "check"),
        )
    except ValidationError as e:
        problems = "; ".join(
            f"{'.'.join(str(part) for part in error['loc'])}: {error['msg']}"
            for error in e.errors()
        )
        parser.error(f"invalid configuration: {problems}")
