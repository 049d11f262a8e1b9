"""A single board category: image locations mapped to spoken text."""

from __future__ import annotations

from aacboard.structures.associative_array import AssociativeArray, KeyNotFoundError


class Category:
    """Named bucket of image → text mappings."""

    def __init__(self, name: str) -> None:
        self._name = name
        self._images: AssociativeArray[str, str] = AssociativeArray()

    def __repr__(self) -> str:
        return f"Category({self._name!r}, images={len(self._images)})"

    def __len__(self) -> int:
        return len(self._images)

    def add_item(self, image_loc: str, text: str) -> None:
        """Map image_loc to text, overwriting any earlier text."""
        self._images.set(image_loc, text)

    def remove_item(self, image_loc: str) -> None:
        self._images.remove(image_loc)

    def get_category(self) -> str:
        return self._name

    def get_text(self, image_loc: str | None) -> str | None:
        """Text for image_loc, or None when the image is not in this category."""
        if image_loc is None:
            return None
        try:
            return self._images.get(image_loc)
        except KeyNotFoundError:
            return None

    def has_image(self, image_loc: str | None) -> bool:
        return self._images.has_key(image_loc)

    def get_images(self) -> list[str]:
        return self._images.keys()
