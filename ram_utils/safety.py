"""
Safety checks run before every rename.
"""

import os
from pathlib import Path
from typing import Any


class FileSafetyChecker:
    """Checks that a rename cannot lose data."""

    def check_rename_safety(self, source: Path, target: Path) -> dict[str, Any]:
        """Check if rename operation is safe."""
        result: dict[str, Any] = {
            "safe": True,
            "collision": False,
            "errors": [],
        }

        # Entry may have vanished since the directory was listed
        if not os.path.lexists(source):
            result["safe"] = False
            result["errors"].append("Source no longer exists")
            return result

        if os.path.lexists(target) and not self._is_case_alias(source, target):
            result["safe"] = False
            result["collision"] = True
            result["errors"].append(f"Target already exists: {target}")
            return result

        if not os.access(source.parent, os.W_OK):
            result["safe"] = False
            result["errors"].append("Directory is not writable")
            return result

        return result

    def _is_case_alias(self, source: Path, target: Path) -> bool:
        """True when ``target`` only resolves to ``source`` by ignoring case.

        A case-insensitive filesystem reports the converted name as existing
        without listing it. Hard links list both names and are a collision.
        """
        try:
            if target.name in os.listdir(source.parent):
                return False
            source_stat = os.lstat(source)
            target_stat = os.lstat(target)
        except OSError:
            return False
        return (source_stat.st_dev, source_stat.st_ino) == (
            target_stat.st_dev,
            target_stat.st_ino,
        )
