"""Utility for expressing an origin file relative to the source root."""

from pathlib import Path


def relative_path(file: Path, root: Path) -> str:
    """Return ``file`` relative to ``root`` with forward slashes."""
    try:
        return file.relative_to(root).as_posix()
    except ValueError:
        return file.as_posix().lstrip("/")
