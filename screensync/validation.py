"""
screensync.validation - Save request validation.

Validates title, content and filename before anything is serialized or
written.
"""

from __future__ import annotations

from screensync.elements import clean_lines
from screensync.exceptions import ValidationError

REQUIRED_FIELDS = ("title", "content", "filename")


def missing_fields(title: str | None, content: str | None, filename: str | None) -> list[str]:
    """Names of required fields that are absent or blank."""
    values = {"title": title, "content": content, "filename": filename}
    missing = []
    for name in REQUIRED_FIELDS:
        value = values[name]
        if value is None or not value.strip():
            missing.append(name)
    if "content" not in missing and not clean_lines(content.split("\n")):
        missing.append("content")
    return missing


def validate_filename(filename: str) -> str:
    """Reject filenames that would escape the downloads directory.

    Args:
        filename: Caller-supplied base name, without extension

    Returns:
        The filename unchanged

    Raises:
        ValidationError: If the name contains a path separator or NUL byte, or is '..'
    """
    if "/" in filename or "\\" in filename or "\x00" in filename or filename == "..":
        raise ValidationError(f"Invalid filename: {filename!r}", ["filename"])
    return filename


def validate_save_request(
    title: str | None, content: str | None, filename: str | None
) -> tuple[str, str, str]:
    """Validate a save request.

    Raises:
        ValidationError: If any field is missing or the filename is unsafe
    """
    missing = missing_fields(title, content, filename)
    if missing:
        raise ValidationError(f"Missing required fields: {', '.join(missing)}", missing)
    validate_filename(filename)
    return title, content, filename
