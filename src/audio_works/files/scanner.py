"""Directory scanning utilities for finding work folders."""

import logging
import stat
from collections.abc import Iterator
from pathlib import Path, PurePosixPath

from ..config import WORK_CODE_PATTERN, LibraryConfig
from ..core.errors import LibraryReadError

logger = logging.getLogger(__name__)


class WorkFolderScanner:
    """Scans root directories for folders named after a work code."""

    def __init__(self, root_dirs: list[Path], max_depth: int):
        self.root_dirs = [Path(root) for root in root_dirs]
        self.max_depth = max_depth

    @classmethod
    def from_config(cls, config: LibraryConfig) -> "WorkFolderScanner":
        return cls(config.root_dirs, config.scanner_max_recursion_depth)

    @staticmethod
    def is_work_folder(name: str) -> bool:
        """Check whether a folder name carries a work code."""
        return WORK_CODE_PATTERN.search(name) is not None

    def scan(self) -> Iterator[str]:
        """Scan every root directory for work folders.

        Roots are scanned in configured order. The same work code found
        under two roots is yielded twice.

        Yields:
            Folder paths relative to their root, using forward slashes

        Raises:
            LibraryReadError: If any directory cannot be read. The scan
                stops at that point.
        """
        for root in self.root_dirs:
            yield from self.scan_root(root)

    def scan_root(self, root: Path) -> Iterator[str]:
        """Scan a single root directory for work folders.

        Args:
            root: Root directory to scan

        Yields:
            Folder paths relative to root, in directory listing order
        """
        logger.debug("Scanning root %s (max depth %d)", root, self.max_depth)
        yield from self._walk(Path(root), PurePosixPath(), 0)

    def count(self) -> int:
        """Count work folders across all roots."""
        return sum(1 for _ in self.scan())

    def _walk(self, root: Path, current: PurePosixPath, depth: int) -> Iterator[str]:
        for name in self._list_subdirectories(root / current):
            relative = current / name

            if self.is_work_folder(name):
                # Found a work folder, don't go any deeper
                logger.debug("Found work folder %s in %s", relative, root)
                yield relative.as_posix()
            elif depth + 1 < self.max_depth:
                yield from self._walk(root, relative, depth + 1)

    @staticmethod
    def _list_subdirectories(directory: Path) -> list[str]:
        # Every entry is stat'ed through symlinks; a dangling link is a read error
        try:
            return [
                entry.name
                for entry in directory.iterdir()
                if stat.S_ISDIR(entry.stat().st_mode)
            ]
        except OSError as e:
            raise LibraryReadError(f"Failed to scan {directory} for work folders: {e}") from e
