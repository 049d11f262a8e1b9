"""Entry point: python -m aacboard [repl|show] [board-file]

- No args / "repl": Interactive console over the board file
- "show":           Print the board in file format to stdout
"""

from __future__ import annotations

import logging
import sys
from pathlib import Path

from aacboard.config import AacConfig, load_config


def _setup_logging(level: str) -> None:
    logging.basicConfig(
        level=getattr(logging, level.upper(), logging.INFO),
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
        datefmt="%H:%M:%S",
    )


def _board_path(config: AacConfig, argv: list[str]) -> Path:
    return Path(argv[2]).expanduser() if len(argv) > 2 else config.board.board_file


def _run_repl(argv: list[str]) -> None:
    """Interactive console mode."""
    config = load_config()
    _setup_logging(config.log_level)

    from aacboard.mappings import Mappings
    from aacboard.repl import BoardRepl

    path = _board_path(config, argv)
    mappings = Mappings(keep_versions=config.board.keep_versions)
    if path.exists():
        mappings.load(path)

    repl = BoardRepl(mappings, board_file=path)
    try:
        repl.run()
    except KeyboardInterrupt:
        pass


def _run_show(argv: list[str]) -> None:
    config = load_config()
    _setup_logging(config.log_level)

    from aacboard.mappings import Mappings

    mappings = Mappings.from_file(_board_path(config, argv))
    mappings.write(sys.stdout)


def main(argv: list[str] | None = None) -> None:
    argv = sys.argv if argv is None else argv
    cmd = argv[1] if len(argv) > 1 else "repl"

    if cmd == "repl":
        _run_repl(argv)
    elif cmd == "show":
        _run_show(argv)
    else:
        print("Usage: python -m aacboard [repl|show] [board-file]")
        print("  repl  Interactive console (default)")
        print("  show  Print the board file")
        sys.exit(1)


if __name__ == "__main__":
    main()
