"""
Core types and error taxonomy for the case conversion tool.
"""

from dataclasses import dataclass, field
from enum import Enum
import os
from pathlib import Path


class LetterCase(Enum):
    """Target letter case of a conversion."""

    UPPER = "upper"
    LOWER = "lower"


@dataclass(frozen=True)
class CaseConversionRequest:
    """One invocation of the upper/lower commands."""

    target_path: Path
    direction: LetterCase
    recursive: bool = False
    ignore_dirs: bool = False
    ignore_files: bool = False


@dataclass
class RenameSummary:
    """Renames performed by a single walk, in the order they happened."""

    renamed: list[tuple[Path, Path]] = field(default_factory=list)

    @property
    def count(self) -> int:
        return len(self.renamed)


def display_path(path: Path | str) -> str:
    """Printable form of a path.

    Bytes that are not valid UTF-8 are shown as ``\\xNN`` escapes.
    """
    return os.fsencode(path).decode("utf-8", "backslashreplace")


class RamUtilsError(Exception):
    """Base class for errors reported to the user."""


class PathNotFoundError(RamUtilsError):
    """The path given on the command line does not exist."""

    def __init__(self, path: Path):
        super().__init__(f"File/Directory does not exist: {display_path(path)}")


class RenameCollisionError(RamUtilsError):
    """The converted name is already taken by another entry."""

    def __init__(self, source: Path, target: Path):
        super().__init__(
            f"Cannot rename {display_path(source)}: "
            f"target already exists: {display_path(target)}"
        )
        self.target = target


class FilesystemError(RamUtilsError):
    """Permission denied, I/O failure or an entry vanished mid-walk."""

    def __init__(self, path: Path, reason: str):
        super().__init__(f"{reason}: {display_path(path)}")
        self.reason = reason
