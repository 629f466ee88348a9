"""
playimage.io - Output file helpers, atomic file writes.

Every output replaces whatever was at its path: the old file is removed
first, then the new content is written to a temp file and renamed into place.
"""

from __future__ import annotations

import tempfile
from collections.abc import Iterable
from pathlib import Path


def _replace(path: Path, content: bytes) -> None:
    path.parent.mkdir(parents=True, exist_ok=True)
    path.unlink(missing_ok=True)
    with tempfile.NamedTemporaryFile(
        mode="wb",
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
    tmp_path.rename(path)


def write_bytes(path: Path, data: bytes) -> None:
    """Write binary file atomically, deleting any previous file.

    Args:
        path: Destination path
        data: Bytes to write
    """
    _replace(path, data)


def write_text(path: Path, content: str) -> None:
    """Write text file atomically, deleting any previous file.

    Args:
        path: Destination path
        content: Text content to write
    """
    _replace(path, content.encode("utf-8"))


def write_samples(path: Path, values: Iterable[int]) -> None:
    """Write one decimal sample per line, newline-terminated."""
    write_text(path, "".join(f"{v}\n" for v in values))


def read_samples(path: Path) -> list[int]:
    """Read a samples file written by write_samples."""
    with open(path, encoding="utf-8") as f:
        return [int(line) for line in f if line.strip()]


def format_size(path: Path) -> str:
    """Format file size in human-readable format."""
    if not path.exists():
        return "-"
    size = path.stat().st_size
    for unit in ["B", "KB", "MB", "GB"]:
        if size < 1024:
            return f"{size:.1f} {unit}"
        size /= 1024
    return f"{size:.1f} TB"
