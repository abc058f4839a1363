"""
Filesystem walk that renames entries to upper or lower case.
"""

from pathlib import Path

from rich.console import Console
from rich.markup import escape

from .constants import UNRENAMEABLE_NAMES
from .core import (
    CaseConversionRequest,
    FilesystemError,
    PathNotFoundError,
    RenameCollisionError,
    RenameSummary,
    display_path,
)
from .naming import convert_case
from .safety import FileSafetyChecker


class CaseRenamer:
    """Performs the renames described by a CaseConversionRequest.

    The walk is depth-first and fails fast: the first error aborts the
    remaining walk and propagates to the caller. Directories are renamed
    before their entries are processed, so recursion always continues
    under the renamed path.
    """

    def __init__(
        self,
        request: CaseConversionRequest,
        console: Console | None = None,
        safety_checker: FileSafetyChecker | None = None,
    ):
        self.request = request
        self.console = console
        self.safety_checker = safety_checker or FileSafetyChecker()

    def run(self) -> RenameSummary:
        """Convert the target path and return the renames performed."""
        path = Path(self.request.target_path)
        summary = RenameSummary()

        if not path.exists() and not path.is_symlink():
            raise PathNotFoundError(path)

        if path.is_dir():
            if not self.request.ignore_dirs:
                path = self._rename(path, summary)
            self._convert_children(path, summary)
        elif not self.request.ignore_files:
            self._rename(path, summary)

        return summary

    def _convert_children(self, directory: Path, summary: RenameSummary) -> None:
        """Process the direct entries of ``directory``."""
        try:
            entries = sorted(directory.iterdir())
        except OSError as e:
            reason = f"Cannot list directory ({e.strerror or e})"
            raise FilesystemError(directory, reason) from e

        for entry in entries:
            # Symlinks are renamed like files and never followed
            if entry.is_dir() and not entry.is_symlink():
                if not self.request.ignore_dirs:
                    entry = self._rename(entry, summary)
                if self.request.recursive:
                    self._convert_children(entry, summary)
            elif not self.request.ignore_files:
                self._rename(entry, summary)

    def _rename(self, path: Path, summary: RenameSummary) -> Path:
        """Rename the final component of ``path`` and return the new path."""
        name = path.name
        if name in UNRENAMEABLE_NAMES:
            return path

        target_name = convert_case(name, self.request.direction)
        if target_name == name:
            return path

        target = path.with_name(target_name)
        safety = self.safety_checker.check_rename_safety(path, target)
        if safety["collision"]:
            raise RenameCollisionError(path, target)
        if not safety["safe"]:
            raise FilesystemError(path, safety["errors"][0])

        try:
            path.rename(target)
        except OSError as e:
            raise FilesystemError(path, f"Rename failed ({e.strerror or e})") from e

        summary.renamed.append((path, target))
        if self.console is not None:
            self.console.print(
                f"[dim]Converting[/dim] {escape(display_path(path))} → "
                f"{escape(display_path(target))}",
                highlight=False,
                soft_wrap=True,
            )
        return target


def convert_path(
    request: CaseConversionRequest, console: Console | None = None
) -> RenameSummary:
    """Run a single conversion request."""
    return CaseRenamer(request, console=console).run()
