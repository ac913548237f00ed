"""Generated JavaScript artifact."""

from .js_renderer import (
    ARTIFACT_HEADER,
    escape_js_single_quoted,
    render_artifact,
    translations_to_json,
    write_artifact,
)

__all__ = [
    "ARTIFACT_HEADER",
    "escape_js_single_quoted",
    "render_artifact",
    "translations_to_json",
    "write_artifact",
]
