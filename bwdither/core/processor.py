"""Dithering pipeline.

Decode → grayscale → error diffusion → encode in the input's format.
"""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path

import numpy as np
from PIL import Image

from bwdither.core.config import Config
from bwdither.core.dither import dither_in_place
from bwdither.core.grayscale import to_grayscale
from bwdither.core.reader import load_image
from bwdither.core.writer import save_image


@dataclass
class DitherResult:
    """Summary of a completed run."""

    input: str
    output: Path
    format: str
    width: int
    height: int
    invert: bool


def dither_image(source: Image.Image | np.ndarray, invert: bool = False) -> np.ndarray:
    """Return a two-tone luminance buffer for a decoded image."""
    gray = to_grayscale(source)
    dither_in_place(gray, invert)
    return gray


def run(config: Config) -> DitherResult:
    """Dither config.input and write the result to config.output.

    Raises:
        DecodeError: if the input cannot be read.
        EncodeError: if the output cannot be written.
    """
    src = load_image(config.input)
    gray = dither_image(src.image, config.invert)
    save_image(gray, config.output, src.format)

    return DitherResult(
        input=config.input,
        output=config.output,
        format=src.format,
        width=src.width,
        height=src.height,
        invert=config.invert,
    )
