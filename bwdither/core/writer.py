"""Encode dithered luminance buffers as GIF, JPEG or PNG."""

from __future__ import annotations

from pathlib import Path

import numpy as np
from PIL import Image

from bwdither.core.errors import EncodeError

JPEG_QUALITY = 100


def buffer_to_image(gray: np.ndarray) -> Image.Image:
    """Wrap a (height, width) luminance buffer in an "L" mode PIL image."""
    return Image.fromarray(np.clip(gray, 0, 255).astype(np.uint8))


def _save_gif(img: Image.Image, path: Path) -> None:
    # "L" images are stored with a 256-entry grayscale palette
    img.save(str(path), format="GIF")


def _save_jpeg(img: Image.Image, path: Path) -> None:
    img.save(str(path), format="JPEG", quality=JPEG_QUALITY)


def _save_png(img: Image.Image, path: Path) -> None:
    img.save(str(path), format="PNG")


_ENCODERS = {
    "gif": _save_gif,
    "jpeg": _save_jpeg,
    "png": _save_png,
}


def save_image(gray: np.ndarray, output_path: str | Path, fmt: str) -> None:
    """Save a luminance buffer in the given container format.

    Args:
        gray: 2D uint8 array of shape (height, width).
        output_path: file to write. Its extension does not select the
            format.
        fmt: "gif", "jpeg" or "png".

    Raises:
        EncodeError: for an unknown format, an empty image, or a write
            failure.
    """
    encoder = _ENCODERS.get(fmt)
    if encoder is None:
        raise EncodeError(f"Unknown image format: {fmt}")
    if gray.size == 0:
        raise EncodeError("Cannot encode an empty image")

    path = Path(output_path)
    try:
        encoder(buffer_to_image(gray), path)
    except (OSError, ValueError) as e:
        raise EncodeError(f"Cannot write {path}: {e}") from e
