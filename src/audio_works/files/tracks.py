"""Track listing for work folders."""

import logging
import os
from collections.abc import Iterator
from pathlib import Path
from typing import Optional, Union

from ..config import TRACK_EXTENSIONS, LibraryConfig
from ..core.errors import LibraryReadError
from ..core.models import Track
from .natural_sort import track_sort_key

logger = logging.getLogger(__name__)


def _raise_walk_error(error: OSError) -> None:
    raise error


class TrackLister:
    """Lists playable tracks of a work across all root directories."""

    def __init__(self, root_dirs: list[Path], extensions: set[str] | None = None):
        self.root_dirs = [Path(root) for root in root_dirs]
        self.extensions = extensions if extensions is not None else TRACK_EXTENSIONS

    @classmethod
    def from_config(cls, config: LibraryConfig) -> "TrackLister":
        return cls(config.root_dirs)

    def is_track(self, name: str) -> bool:
        """Check a file name against the track extensions (case-sensitive)."""
        return os.path.splitext(name)[1] in self.extensions

    def list_tracks(self, work_id: Union[int, str], work_dir: Union[str, Path]) -> list[Track]:
        """List the playable tracks of a work.

        Files are collected from ``root/work_dir`` under every root and
        sorted by (subtitle, title) in natural order, top-level files
        first. Each track's hash is ``"{work_id}/{index}"``.

        Args:
            work_id: Work identifier used as the hash prefix
            work_dir: Work directory relative to the roots

        Returns:
            Sorted list of tracks. Empty if the work directory exists
            under no root.

        Raises:
            LibraryReadError: If any root's work directory cannot be read
        """
        entries: list[tuple[Optional[str], str]] = []

        try:
            for root in self.root_dirs:
                entries.extend(self._collect(root / work_dir))
        except OSError as e:
            raise LibraryReadError(f"Failed to get tracklist from disk: {e}") from e

        entries.sort(key=lambda entry: track_sort_key(*entry))

        tracks = [
            Track(title=title, subtitle=subtitle, hash=f"{work_id}/{index}")
            for index, (subtitle, title) in enumerate(entries)
        ]
        logger.debug("Listed %d tracks for work %s (%s)", len(tracks), work_id, work_dir)
        return tracks

    def _collect(self, base: Path) -> Iterator[tuple[Optional[str], str]]:
        """Yield (subtitle, title) for every track file below base."""
        if not base.exists():
            logger.debug("Work directory not present under root: %s", base)
            return

        # Symlinked folders are entered once per real directory, so link loops end
        visited: set[str] = set()
        for dirpath, dirnames, filenames in os.walk(
            base, onerror=_raise_walk_error, followlinks=True
        ):
            real = os.path.realpath(dirpath)
            if real in visited:
                dirnames.clear()
                continue
            visited.add(real)

            relative = Path(dirpath).relative_to(base).as_posix()
            subtitle = None if relative == "." else relative

            for name in filenames:
                if self.is_track(name):
                    yield subtitle, name
