"""Tracks which origin files already have a source mirror in this run."""

from pathlib import Path


class GeneratedFileRegistry:
    """Set of origin files mirrored so far."""

    def __init__(self) -> None:
        """Initialize an empty registry."""
        self._files: set[str] = set()

    def claim(self, file: Path) -> bool:
        """Mark ``file`` as mirrored; False if it already was."""
        key = str(file)
        if key in self._files:
            return False
        self._files.add(key)
        return True

    def __contains__(self, file: object) -> bool:
        return str(file) in self._files

    def __len__(self) -> int:
        return len(self._files)
