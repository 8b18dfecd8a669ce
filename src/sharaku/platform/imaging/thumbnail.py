"""Where: platform/imaging/thumbnail.py
What: Pillow-backed WebP thumbnail encoder for library works.
Why: Importer stores a small preview blob per work; decoding stays out of the domain.
"""

from __future__ import annotations

import io
from pathlib import Path
from typing import final

from PIL import Image, UnidentifiedImageError

from sharaku.config.settings import THUMBNAIL_MAX_HEIGHT, THUMBNAIL_MAX_WIDTH, THUMBNAIL_QUALITY
from sharaku.platform.logging import logger
from sharaku.shared.errors import ThumbnailError


@final
class PillowThumbnailGenerator:
    """Scale an image to fit a bounding box and encode it as WebP."""

    max_width: int
    max_height: int
    quality: int

    def __init__(
        self,
        max_width: int = THUMBNAIL_MAX_WIDTH,
        max_height: int = THUMBNAIL_MAX_HEIGHT,
        quality: int = THUMBNAIL_QUALITY,
    ) -> None:
        self.max_width = max_width
        self.max_height = max_height
        self.quality = quality

    def generate(self, image_path: Path) -> bytes:
        """Return WebP bytes for ``image_path``; images are never upscaled.

        Raises:
            ThumbnailError: The image cannot be decoded or the encoder fails.
        """

        try:
            with Image.open(image_path) as source:
                image = source.convert("RGBA")
        except (OSError, UnidentifiedImageError, Image.DecompressionBombError) as e:
            logger.warning("Cannot decode %s for thumbnail: %s", image_path, e)
            raise ThumbnailError(f"Cannot decode {image_path}: {e}") from e

        width, height = image.size
        scale = min(self.max_width / width, self.max_height / height)
        if scale < 1.0:
            target = (max(1, round(width * scale)), max(1, round(height * scale)))
            image = image.resize(target, Image.Resampling.BILINEAR)

        buffer = io.BytesIO()
        try:
            image.save(buffer, format="WEBP", quality=self.quality)
        except (OSError, ValueError) as e:
            logger.warning("Cannot encode thumbnail for %s: %s", image_path, e)
            raise ThumbnailError(f"Cannot encode thumbnail for {image_path}: {e}") from e

        data = buffer.getvalue()
        if not data:
            raise ThumbnailError(f"Empty thumbnail for {image_path}")
        return data


__all__ = ["PillowThumbnailGenerator"]
