"""Atomic file replacement shared by the dictionary store and the renderer."""

from __future__ import annotations

import logging
import os
import stat
import tempfile
from pathlib import Path

logger = logging.getLogger(__name__)


def atomic_write_text(path: Path, content: str) -> None:
    """
    Write text to a file by way of a sibling temporary file and a rename.

    The temporary file lives in the target's directory so the final
    ``replace`` stays on one filesystem. The target is only touched by the
    rename, so any failure before it leaves the existing file as it was.

    Args:
        path: File to create or replace
        content: Text to write (UTF-8)

    Raises:
        OSError: If writing or renaming fails; the temporary file is removed
    """
    temp_file = None
    try:
        with tempfile.NamedTemporaryFile(
            mode="w",
            encoding="utf-8",
            dir=path.parent,
            prefix=f".{path.name}.",
            suffix=".tmp",
            delete=False,
        ) as temp_file:
            _ = temp_file.write(content)
            temp_file.flush()
            temp_path = Path(temp_file.name)

        # NamedTemporaryFile creates 0600; keep the mode the target would have
        temp_path.chmod(_target_mode(path))

        # Atomic move
        _ = temp_path.replace(path)
        logger.debug(f"Wrote {len(content)} characters to {path}")

    except Exception as e:
        if temp_file is not None:
            Path(temp_file.name).unlink(missing_ok=True)
        raise OSError(f"Failed to write {path}: {e}") from e


def _target_mode(path: Path) -> int:
    """Permission bits for the replacement: the existing file's, else 0666 minus umask."""
    try:
        return stat.S_IMODE(path.stat().st_mode)
    except FileNotFoundError:
        umask = os.umask(0)
        _ = os.umask(umask)
        return 0o666 & ~umask
