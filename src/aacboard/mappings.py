"""AAC board: categories of image → text mappings plus the current selection.

The board owns an AssociativeArray of category key → Category. A lookup miss
anywhere in this layer is routine: callers get an empty result and a log line,
never an exception.
"""

from __future__ import annotations

import logging
import re
from datetime import datetime
from pathlib import Path
from typing import TextIO

from aacboard.boardfile import read_board, write_board
from aacboard.category import Category
from aacboard.structures.associative_array import AssociativeArray, KeyNotFoundError

logger = logging.getLogger(__name__)

VERSIONS_DIR = ".versions"


class Mappings:
    """Category store with a current-category selector."""

    def __init__(self, keep_versions: int = 10) -> None:
        self.categories: AssociativeArray[str, Category] = AssociativeArray()
        self.current_category = ""
        self.keep_versions = keep_versions

    @classmethod
    def from_file(cls, path: Path | str, keep_versions: int = 10) -> Mappings:
        mappings = cls(keep_versions=keep_versions)
        mappings.load(path)
        return mappings

    def __len__(self) -> int:
        return len(self.categories)

    # ── Category store ────────────────────────────────────────

    def add_category(self, key: str, name: str) -> Category:
        """Create (or replace) the category stored under key."""
        category = Category(name)
        self.categories.set(key, category)
        return category

    def remove_category(self, key: str) -> None:
        self.categories.remove(key)

    def get_category(self, key: str) -> Category | None:
        if key is None:
            return None
        try:
            return self.categories.get(key)
        except KeyNotFoundError:
            return None

    def category_keys(self) -> list[str]:
        return self.categories.keys()

    def is_category(self, name: str) -> bool:
        return self.categories.has_key(name)

    # ── Selection ─────────────────────────────────────────────

    def select(self, key: str) -> bool:
        """Make key the current category. Unknown keys leave the state alone."""
        if not self.is_category(key):
            logger.warning("Cannot select unknown category: %s", key)
            return False
        self.current_category = key
        return True

    def reset(self) -> None:
        self.current_category = ""

    def get_current_category(self) -> str:
        return self.current_category

    # ── Board operations ──────────────────────────────────────

    def add(self, image_loc: str, text: str) -> None:
        """Add image_loc → text to the current category."""
        if not self.current_category:
            logger.warning(
                "No current category set. Select a category before adding items."
            )
            return
        try:
            category = self.categories.get(self.current_category)
        except KeyNotFoundError:
            # Selection is kept even though its category is gone.
            logger.error("Category not found: %s", self.current_category)
            return
        category.add_item(image_loc, text)

    def get_image_locs(self) -> list[str]:
        if not self.current_category:
            return []
        try:
            category = self.categories.get(self.current_category)
        except KeyNotFoundError:
            logger.error("Failed to get images, category not found: %s", self.current_category)
            return []
        return category.get_images()

    def get_text(self, image_loc: str) -> str:
        """Text for image_loc from the first category holding it, else ""."""
        for key in self.categories.keys():
            category = self.categories.get(key)
            if category.has_image(image_loc):
                return category.get_text(image_loc) or ""
        return ""

    # ── Persistence ───────────────────────────────────────────

    def load(self, source: Path | str | TextIO) -> int:
        """Read categories from a path or text stream. Returns categories read.

        On an I/O or decoding error the error is logged, the categories read
        so far are kept, and 0 is returned.
        """
        try:
            if isinstance(source, (str, Path)):
                with Path(source).open(encoding="utf-8") as f:
                    return self._load_stream(f)
            return self._load_stream(source)
        except (OSError, UnicodeDecodeError) as e:
            logger.error("Failed to load mappings from %s: %s", source, e)
            return 0

    def _load_stream(self, stream: TextIO) -> int:
        count = 0
        current: Category | None = None
        for entry in read_board(stream):
            if entry.kind == "category":
                current = self.add_category(entry.key, entry.text)
                count += 1
            elif current is not None:
                current.add_item(entry.key, entry.text)
        logger.info("Loaded %d categories", count)
        return count

    def write(self, sink: Path | str | TextIO) -> bool:
        """Write every category to a path or text stream. False on I/O error."""
        try:
            if isinstance(sink, (str, Path)):
                with Path(sink).open("w", encoding="utf-8", newline="\n") as f:
                    write_board(f, self)
            else:
                write_board(sink, self)
        except (OSError, UnicodeEncodeError) as e:
            logger.error("Failed to write mappings to %s: %s", sink, e)
            return False
        return True

    def save(self, path: Path | str) -> bool:
        """Write to path, keeping a timestamped copy of the previous file."""
        path = Path(path)
        try:
            path.parent.mkdir(parents=True, exist_ok=True)
            self._backup(path)
        except OSError as e:
            logger.error("Failed to back up %s: %s", path, e)
        ok = self.write(path)
        if ok:
            logger.info("Saved %d categories to %s", len(self), path)
        return ok

    def _backup(self, path: Path) -> None:
        """Copy path to .versions/, keeping at most keep_versions copies."""
        if not path.exists() or self.keep_versions <= 0:
            return
        versions_dir = path.parent / VERSIONS_DIR
        versions_dir.mkdir(exist_ok=True)
        ts = datetime.now().strftime("%Y%m%dT%H%M%S%f")
        (versions_dir / f"{path.stem}-{ts}{path.suffix}").write_bytes(path.read_bytes())
        # Only this file's copies: "board-<ts>.txt", never "board-kids-<ts>.txt".
        pattern = re.compile(rf"{re.escape(path.stem)}-\d{{8}}T\d{{12}}{re.escape(path.suffix)}")
        old = sorted(f for f in versions_dir.iterdir() if pattern.fullmatch(f.name))
        for f in old[: -self.keep_versions]:
            f.unlink()
