"""Extension report for a directory tree."""

from pathlib import Path

from .core import FilesystemError, PathNotFoundError


def find_unique_extensions(path: Path) -> dict[str, int]:
    """Count files under ``path`` by extension, recursing into subdirectories.

    The extension is taken without its leading dot; files without one are
    not counted. Symlinks count as files and are not followed.
    """
    path = Path(path)
    if not path.exists():
        raise PathNotFoundError(path)
    if not path.is_dir():
        raise FilesystemError(path, "Not a directory")

    counts: dict[str, int] = {}
    _collect(path, counts)
    return counts


def _collect(directory: Path, counts: dict[str, int]) -> None:
    try:
        entries = list(directory.iterdir())
    except OSError as e:
        reason = f"Cannot list directory ({e.strerror or e})"
        raise FilesystemError(directory, reason) from e

    for entry in entries:
        if entry.is_dir() and not entry.is_symlink():
            _collect(entry, counts)
            continue

        ext = entry.suffix[1:]
        if ext:
            counts[ext] = counts.get(ext, 0) + 1
