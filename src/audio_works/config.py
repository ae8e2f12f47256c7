"""Configuration management for audio works."""

import logging
import os
import re
from logging.handlers import RotatingFileHandler
from pathlib import Path
from typing import Optional

from pydantic import BaseModel, Field

# Default paths
APP_DIR = Path.home() / ".audio_works"
CONFIG_FILE = APP_DIR / "config.json"
IMAGE_DIR = APP_DIR / "covers"
LOG_DIR = APP_DIR / "logs"

CONFIG_FILE_ENV = "AUDIO_WORKS_CONFIG"

# Playable track extensions (matched case-sensitively)
TRACK_EXTENSIONS = {".mp3", ".ogg", ".opus", ".wav", ".flac"}

# Work folders carry an RJ code somewhere in their name
WORK_CODE_PATTERN = re.compile(r"RJ\d{6}")

DEFAULT_MAX_RECURSION_DEPTH = 2

# Rotating log file settings
LOG_FILE_NAME = "audio_works.log"
LOG_MAX_BYTES = 5 * 1024 * 1024
LOG_BACKUP_COUNT = 3
LOG_FORMAT = "%(asctime)s %(name)s %(levelname)s %(message)s"
LOG_DATE_FORMAT = "%Y-%m-%d %H:%M:%S"


class LibraryConfig(BaseModel):
    """Root directories, cover image directory and scanner limits."""

    root_dirs: list[Path] = Field(alias="rootDir")
    image_dir: Path = Field(default=IMAGE_DIR, alias="imageDir")
    scanner_max_recursion_depth: int = Field(
        default=DEFAULT_MAX_RECURSION_DEPTH,
        ge=0,
        alias="scannerMaxRecursionDepth",
        description="Scanner never recurses to a depth >= this value",
    )

    model_config = {"populate_by_name": True}


def get_config_path() -> Path:
    """Get the configuration file path.

    Checks the AUDIO_WORKS_CONFIG environment variable first, then falls
    back to ~/.audio_works/config.json.
    """
    env_path = os.environ.get(CONFIG_FILE_ENV)
    if env_path:
        return Path(env_path.strip())
    return CONFIG_FILE


def load_config(path: Optional[Path] = None) -> LibraryConfig:
    """Load and validate a JSON configuration file.

    Args:
        path: Config file to read. Defaults to get_config_path().

    Returns:
        Validated LibraryConfig

    Raises:
        FileNotFoundError: If the config file does not exist
        pydantic.ValidationError: If the file content is invalid
    """
    path = path or get_config_path()
    if not path.exists():
        raise FileNotFoundError(f"Config file not found: {path}")

    return LibraryConfig.model_validate_json(path.read_text(encoding="utf-8"))


def setup_logging(verbose: bool = False) -> None:
    """Attach console and rotating-file handlers to the ``audio_works`` logger.

    Module loggers (``audio_works.files.scanner`` and friends) propagate
    here. The file always records DEBUG; the console shows INFO, or DEBUG
    with ``verbose``. Once handlers are attached, later calls do nothing.
    """
    logger = logging.getLogger("audio_works")
    logger.setLevel(logging.DEBUG)
    if logger.handlers:
        return

    formatter = logging.Formatter(LOG_FORMAT, datefmt=LOG_DATE_FORMAT)

    LOG_DIR.mkdir(parents=True, exist_ok=True)
    handlers = [
        (logging.StreamHandler(), logging.DEBUG if verbose else logging.INFO),
        (
            RotatingFileHandler(
                LOG_DIR / LOG_FILE_NAME,
                maxBytes=LOG_MAX_BYTES,
                backupCount=LOG_BACKUP_COUNT,
                encoding="utf-8",
            ),
            logging.DEBUG,
        ),
    ]
    for handler, level in handlers:
        handler.setLevel(level)
        handler.setFormatter(formatter)
        logger.addHandler(handler)
