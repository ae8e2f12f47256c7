"""Cover image files stored next to the library, one per work."""

import logging
import re
import shutil
from pathlib import Path
from typing import BinaryIO, Union

from ..config import LibraryConfig

logger = logging.getLogger(__name__)

_CODE = re.compile(r"[0-9]{6}")


class CoverImageStore:
    """Reads and writes ``RJ<code>.jpg`` files in the image directory.

    No locking is done: concurrent saves or deletes of the same code race
    on the filesystem and the last write wins.
    """

    def __init__(self, image_dir: Path):
        self.image_dir = Path(image_dir)

    @classmethod
    def from_config(cls, config: LibraryConfig) -> "CoverImageStore":
        return cls(config.image_dir)

    @staticmethod
    def format_code(code: Union[int, str]) -> str:
        """Normalize a work code to its 6 zero-padded digits.

        Raises:
            ValueError: If the code is not 6 digits (or an int in 0..999999)
        """
        if isinstance(code, int):
            code = f"{code:06d}"
        if not _CODE.fullmatch(code):
            raise ValueError(f"Invalid work code: {code!r}")
        return code

    def image_path(self, code: Union[int, str]) -> Path:
        """Path of the cover image for a work code."""
        return self.image_dir / f"RJ{self.format_code(code)}.jpg"

    def exists(self, code: Union[int, str]) -> bool:
        return self.image_path(code).is_file()

    def delete(self, code: Union[int, str]) -> None:
        """Delete a work's cover image.

        Args:
            code: Work code (the 6 digits, zero-padded)

        Raises:
            ValueError: If the code is not a valid work code
            FileNotFoundError: If there is no cover image for the code
            OSError: If the file cannot be removed
        """
        path = self.image_path(code)
        path.unlink()
        logger.info("Deleted cover image %s", path)

    def save(self, stream: BinaryIO, code: Union[int, str]) -> Path:
        """Save a cover image from a readable binary stream.

        Any existing image is overwritten. The file is always named
        ``.jpg``; the image data is not inspected.

        Args:
            stream: Readable binary stream with the image data
            code: Work code (the 6 digits, zero-padded)

        Returns:
            Path to the written file, flushed and closed

        Raises:
            ValueError: If the code is not a valid work code
        """
        # TODO: detect PNG/WebP data and store it under the matching extension
        path = self.image_path(code)
        with open(path, "wb") as f:
            shutil.copyfileobj(stream, f)
        logger.info("Saved cover image %s", path)
        return path
