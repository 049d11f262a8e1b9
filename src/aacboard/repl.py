"""Interactive line console over a board, for development and testing."""

from __future__ import annotations

import logging
import sys
from pathlib import Path
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from aacboard.mappings import Mappings

logger = logging.getLogger(__name__)

HELP = """\
categories            list category keys
select <key>          make <key> the current category
reset                 clear the current category
current               show the current category
images                list images in the current category
add <image> <text>    add an image to the current category
text <image>          speak the text for <image>
new <key> <name>      create a category
save [path]           write the board to disk
exit                  leave"""


class BoardRepl:
    """Reads commands from stdin and applies them to a Mappings board."""

    def __init__(self, mappings: Mappings, board_file: Path | None = None) -> None:
        self.mappings = mappings
        self.board_file = board_file

    def run(self) -> None:
        print("AAC board (type 'help' for commands, 'exit' to quit)")
        print("-" * 48)

        while True:
            try:
                line = self._read_input()
            except (EOFError, KeyboardInterrupt):
                print("\nBye!")
                break

            if line is None or line.strip().lower() in ("exit", "quit"):
                print("Bye!")
                break

            text = line.strip()
            if not text:
                continue
            print(self.handle(text))

    def _read_input(self) -> str | None:
        sys.stdout.write("\n> ")
        sys.stdout.flush()
        raw = sys.stdin.buffer.readline()
        if not raw:
            return None
        return raw.decode("utf-8", errors="replace").rstrip("\n")

    def handle(self, line: str) -> str:
        """Apply one command and return the reply to show."""
        cmd, _, arg = line.strip().partition(" ")
        cmd = cmd.lower()
        arg = arg.strip()
        m = self.mappings

        if cmd == "help":
            return HELP
        if cmd == "categories":
            keys = m.category_keys()
            if not keys:
                return "(no categories)"
            return "\n".join(f"{k}  {m.get_category(k).get_category()}" for k in keys)
        if cmd == "select":
            if not arg:
                return "Usage: select <key>"
            if m.select(arg):
                return f"Current category: {arg}"
            return f"No such category: {arg}"
        if cmd == "reset":
            m.reset()
            return "Current category cleared"
        if cmd == "current":
            return m.get_current_category() or "(none)"
        if cmd == "images":
            images = m.get_image_locs()
            return "\n".join(images) if images else "(no images)"
        if cmd == "add":
            image_loc, _, text = arg.partition(" ")
            if not image_loc:
                return "Usage: add <image> <text>"
            current = m.get_current_category()
            if not current:
                return "No current category set. Use 'select <key>' first."
            if not m.is_category(current):
                return f"Category not found: {current}"
            m.add(image_loc, text)
            return f"Added {image_loc}"
        if cmd == "text":
            if not arg:
                return "Usage: text <image>"
            return m.get_text(arg) or f"(no text for {arg})"
        if cmd == "new":
            key, _, name = arg.partition(" ")
            if not key:
                return "Usage: new <key> <name>"
            m.add_category(key, name)
            return f"Created category {key}"
        if cmd == "save":
            target = Path(arg).expanduser() if arg else self.board_file
            if target is None:
                return "Usage: save <path>"
            if m.save(target):
                return f"Saved to {target}"
            return f"Failed to save to {target}"
        return f"Unknown command: {cmd} (try 'help')"
