"""Floyd-Steinberg error diffusion to a two-tone (black/white) image."""

from __future__ import annotations

import numpy as np

THRESHOLD = 127
BLACK = 0
WHITE = 255

# (dx, dy, weight) for the neighbours not yet visited in a row-major scan
FLOYD_STEINBERG = (
    (1, 0, 7 / 16),
    (-1, 1, 3 / 16),
    (0, 1, 5 / 16),
    (1, 1, 1 / 16),
)


def output_levels(invert: bool = False) -> tuple[int, int]:
    """Return the (low, high) values written for dark and light pixels."""
    if invert:
        return WHITE, BLACK
    return BLACK, WHITE


def dither_in_place(gray: np.ndarray, invert: bool = False) -> None:
    """Dither a luminance buffer to two levels in place.

    Pixels are visited row by row, left to right. Each pixel is compared
    against THRESHOLD and replaced by the high or low output level, and the
    difference between its value and the luminance it was rounded to is
    pushed onto the four unvisited neighbours. Each contribution is
    truncated toward zero, and intermediate values are never clamped.

    Args:
        gray: 2D array of shape (height, width) with values in [0, 255].
        invert: write 0 for light pixels and 255 for dark ones.
    """
    h, w = gray.shape[:2]
    if gray.size == 0:
        return

    low, high = output_levels(invert)

    # Accumulated error can leave [0, 255], so the pass runs on Python ints
    # and the quantized rows are copied back once the scan has finished.
    work = gray.tolist()

    for y in range(h):
        row = work[y]
        for x in range(w):
            old = row[x]
            # The residual is taken against the luminance the pixel was
            # rounded to (WHITE or BLACK), not the written value, so an
            # inverted run is the exact complement of a normal one.
            if old > THRESHOLD:
                row[x] = high
                err = old - WHITE
            else:
                row[x] = low
                err = old - BLACK

            if err == 0:
                continue

            for dx, dy, weight in FLOYD_STEINBERG:
                nx = x + dx
                ny = y + dy
                if 0 <= nx < w and ny < h:
                    work[ny][nx] += int(err * weight)

    gray[...] = work
