"""
screensync.store - Screenplay file storage.

Validates save requests, serializes them to FDX and writes one file per
request into a downloads directory.
"""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path

from screensync.exceptions import ExportError, NotFoundError
from screensync.export.fdx import serialize_text
from screensync.io import write_text
from screensync.logging import logger
from screensync.validation import validate_filename, validate_save_request


@dataclass(frozen=True)
class SaveResult:
    success: bool
    message: str
    path: Path
    download_url: str


class ScriptStore:
    """Represents a directory of exported screenplays."""

    def __init__(self, downloads_dir: Path, extension: str = ".fdx") -> None:
        self.downloads_dir = downloads_dir
        self.extension = extension

    def path_for(self, filename: str) -> Path:
        return self.downloads_dir / f"{filename}{self.extension}"

    def save(self, title: str | None, content: str | None, filename: str | None) -> SaveResult:
        """Serialize a screenplay and write it to <downloads_dir>/<filename><extension>.

        Args:
            title: Screenplay title
            content: Screenplay text, one element per line
            filename: Output file base name

        Returns:
            SaveResult with the written path and its download URL

        Raises:
            ValidationError: If title, content or filename is missing
            ExportError: If the file cannot be written
        """
        title, content, filename = validate_save_request(title, content, filename)

        document = serialize_text(title, content)
        path = self.path_for(filename)

        try:
            write_text(path, document)
        except (OSError, ValueError) as e:
            raise ExportError(f"Failed to save screenplay to {path}: {e}") from e

        logger.debug("Saved screenplay %r to %s", title, path)
        return SaveResult(
            success=True,
            message="Screenplay saved successfully",
            path=path,
            download_url=f"/download/{path.name}",
        )

    def get(self, name: str) -> Path:
        """Resolve a stored file by name, with or without its extension.

        Raises:
            NotFoundError: If no such file exists
        """
        validate_filename(name)
        path = self.downloads_dir / name
        if not path.is_file():
            path = self.path_for(name)
        if not path.is_file():
            raise NotFoundError(f"File not found: {name}")
        return path

    def list_scripts(self) -> list[Path]:
        """Stored screenplay files, sorted by name."""
        if not self.downloads_dir.exists():
            return []
        return sorted(self.downloads_dir.glob(f"*{self.extension}"))
