"""A registry of named images."""

from __future__ import annotations

from typing import Dict, Optional

from .image import Image


class ImageManager:
    """Creates images and keeps them by name.

    A name keeps the first image registered under it; later images created
    with the same name are returned but not stored.
    """

    def __init__(self) -> None:
        self._images: Dict[str, Image] = {}

    def create_image(self, name: str, width: int, height: int) -> Image:
        """Create a blank image and register it under ``name``."""
        image = Image(width, height)
        self._images.setdefault(name, image)
        return image

    def create_image_from_image(
        self, name: str, image: Image, x: int, y: int, width: int, height: int
    ) -> Image:
        """Create an image from a region of ``image`` and register it under ``name``."""
        new_image = image.crop(x, y, width, height)
        self._images.setdefault(name, new_image)
        return new_image

    def get_image(self, name: str) -> Optional[Image]:
        """The image registered under ``name``, or None."""
        return self._images.get(name)