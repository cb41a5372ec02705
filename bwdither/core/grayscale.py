"""Conversion of decoded images to 8-bit luminance buffers."""

from __future__ import annotations

import numpy as np
from PIL import Image

_ALPHA_MODES = ("RGBA", "LA", "PA", "RGBa", "La")


def _has_alpha(img: Image.Image) -> bool:
    return img.mode in _ALPHA_MODES or "transparency" in img.info


def _flatten_alpha(img: Image.Image) -> Image.Image:
    """Composite an image with transparency over opaque black."""
    canvas = Image.new("RGBA", img.size, (0, 0, 0, 255))
    layer = img.convert("RGBA")
    canvas.paste(layer, (0, 0), layer)
    return canvas.convert("RGB")


def to_grayscale(source: Image.Image | np.ndarray) -> np.ndarray:
    """Convert an image to a uint8 luminance buffer of shape (height, width).

    Uses Pillow's ITU-R 601-2 luma transform
    (L = 0.299 R + 0.587 G + 0.114 B, rounded). Pixels with an alpha
    channel are composited over black first. The source is not modified.

    Args:
        source: a PIL image in any mode, or an array of shape (H, W),
            (H, W, 3) or (H, W, 4).
    """
    if isinstance(source, np.ndarray):
        if source.size == 0:
            return np.zeros(source.shape[:2], dtype=np.uint8)
        if source.ndim == 2:
            return np.clip(np.rint(source), 0, 255).astype(np.uint8)
        source = Image.fromarray(np.clip(np.rint(source), 0, 255).astype(np.uint8))

    width, height = source.size
    if width == 0 or height == 0:
        return np.zeros((height, width), dtype=np.uint8)

    img = source
    if img.mode.startswith("I;16"):
        # 16-bit grayscale: keep the high byte
        return (np.array(img, dtype=np.uint16) >> 8).astype(np.uint8)
    if _has_alpha(img):
        img = _flatten_alpha(img)

    return np.array(img.convert("L"), dtype=np.uint8)
