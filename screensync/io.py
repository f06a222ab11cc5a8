"""
screensync.io - Text read/write helpers, atomic file writes.

Centralized I/O utilities for the store, the preview report and the CLI.
"""

from __future__ import annotations

import sys
import tempfile
from pathlib import Path


def read_text(path: Path) -> str:
    """Read text file with UTF-8 encoding.

    Args:
        path: Path to text file, or "-" to read standard input

    Returns:
        File contents as string

    Raises:
        FileNotFoundError: If file doesn't exist
    """
    if str(path) == "-":
        return sys.stdin.read()
    with open(path, encoding="utf-8") as f:
        return f.read()


def write_text(path: Path, content: str) -> None:
    """Write text file atomically.

    Writes to a temp file first, then renames to prevent corruption
    on interruption.

    Args:
        path: Destination path
        content: Text content to write
    """
    path.parent.mkdir(parents=True, exist_ok=True)
    with tempfile.NamedTemporaryFile(
        mode="w",
        encoding="utf-8",
        dir=path.parent,
        delete=False,
        suffix=".tmp",
    ) as tmp:
        tmp_path = Path(tmp.name)
        try:
            tmp.write(content)
        except Exception:
            tmp_path.unlink(missing_ok=True)
            raise
    try:
        tmp_path.replace(path)
    except Exception:
        tmp_path.unlink(missing_ok=True)
        raise
