"""Configuration loading from environment variables and aacboard.toml."""

from __future__ import annotations

import os
import sys
from dataclasses import dataclass, field

if sys.version_info >= (3, 11):
    import tomllib
else:
    import tomli as tomllib
from pathlib import Path

_DEFAULT_HOME = Path.home() / ".aacboard"
_DEFAULT_BOARD_FILE = _DEFAULT_HOME / "board.txt"
_CONFIG_FILENAME = "aacboard.toml"


@dataclass
class BoardConfig:
    """Where the board lives and how many old copies to keep on save."""

    board_file: Path = _DEFAULT_BOARD_FILE
    keep_versions: int = 10


@dataclass
class AacConfig:
    """Top-level configuration."""

    board: BoardConfig = field(default_factory=BoardConfig)
    log_level: str = "INFO"


def load_config(config_path: Path | None = None) -> AacConfig:
    """Load configuration from environment variables and optional aacboard.toml.

    Priority: environment variables > aacboard.toml > defaults.
    """
    file_data: dict = {}
    if config_path and config_path.exists():
        file_data = tomllib.loads(config_path.read_text())
    else:
        for candidate in [Path.cwd() / _CONFIG_FILENAME, _DEFAULT_HOME / _CONFIG_FILENAME]:
            if candidate.exists():
                file_data = tomllib.loads(candidate.read_text())
                break

    board_data = file_data.get("board", {})

    return AacConfig(
        board=BoardConfig(
            board_file=Path(
                os.getenv("AAC_BOARD_FILE", board_data.get("board_file", str(_DEFAULT_BOARD_FILE)))
            ).expanduser(),
            keep_versions=int(os.getenv("AAC_KEEP_VERSIONS", board_data.get("keep_versions", 10))),
        ),
        log_level=os.getenv("AAC_LOG_LEVEL", file_data.get("log_level", "INFO")),
    )
