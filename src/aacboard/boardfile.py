"""Line-oriented board file format.

    food Food Items          # category header: "<key> <display name>"
    >apple.png Apple         # item: ">" + "<image location> <text>"
    >bread.png Some bread
    drinks Drinks
    >water.png Water

Items belong to the most recent header. Both kinds of line split on the
first space only, so display names and texts may contain spaces.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import TYPE_CHECKING, Iterable, Iterator, TextIO

if TYPE_CHECKING:
    from aacboard.mappings import Mappings

logger = logging.getLogger(__name__)

ITEM_PREFIX = ">"


@dataclass
class BoardEntry:
    """One parsed line: a category header or an item of the last header."""

    kind: str  # "category" | "item"
    key: str
    text: str
    line_no: int = 0


def _split(line: str) -> tuple[str, str]:
    head, _, rest = line.partition(" ")
    return head, rest


def parse_lines(lines: Iterable[str]) -> Iterator[BoardEntry]:
    """Yield entries for each meaningful line. Blank lines are skipped.

    A header with an empty key is skipped along with its items.
    """
    header = "none"  # "none" | "ok" | "skipped"
    for line_no, raw in enumerate(lines, start=1):
        line = raw.rstrip("\r\n")
        if not line.strip():
            continue

        if line.startswith(ITEM_PREFIX):
            if header == "none":
                logger.warning("Line %d: item before any category, skipped", line_no)
                continue
            if header == "skipped":
                logger.warning("Line %d: item of a skipped category, skipped", line_no)
                continue
            image_loc, text = _split(line[len(ITEM_PREFIX):])
            yield BoardEntry(kind="item", key=image_loc, text=text, line_no=line_no)
        else:
            key, name = _split(line)
            if not key:
                logger.warning("Line %d: category with empty key, skipped", line_no)
                header = "skipped"
                continue
            header = "ok"
            yield BoardEntry(kind="category", key=key, text=name, line_no=line_no)


def read_board(stream: TextIO) -> Iterator[BoardEntry]:
    return parse_lines(stream)


def format_board(mappings: Mappings) -> Iterator[str]:
    """Yield the lines (without newlines) describing every category."""
    for key in mappings.category_keys():
        category = mappings.get_category(key)
        if category is None:
            continue
        yield f"{key} {category.get_category()}"
        for image_loc in category.get_images():
            yield f"{ITEM_PREFIX}{image_loc} {category.get_text(image_loc) or ''}"


def write_board(stream: TextIO, mappings: Mappings) -> None:
    for line in format_board(mappings):
        stream.write(line + "\n")
