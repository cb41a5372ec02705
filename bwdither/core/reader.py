"""Image decoding from local files or HTTP(S) URLs.

The container format is detected from the decoded content, not the file
name. Only GIF, JPEG and PNG inputs are accepted; for GIFs the first frame
is used.
"""

from __future__ import annotations

import http.client
import io
import urllib.request
from dataclasses import dataclass
from pathlib import Path
from typing import BinaryIO
from urllib.parse import urlparse

from PIL import Image, UnidentifiedImageError

from bwdither.core.errors import DecodeError

# Pillow format name -> output format
SUPPORTED_FORMATS = {
    "GIF": "gif",
    "JPEG": "jpeg",
    "PNG": "png",
}

FETCH_TIMEOUT = 30  # seconds


@dataclass
class SourceImage:
    """A decoded input image."""

    image: Image.Image
    format: str  # "gif", "jpeg" or "png"
    source: str  # Path or URL it was read from

    @property
    def width(self) -> int:
        return self.image.width

    @property
    def height(self) -> int:
        return self.image.height


def is_url(path: str) -> bool:
    """Check if the input looks like an HTTP(S) URL."""
    try:
        parsed = urlparse(str(path))
        return parsed.scheme in ("http", "https")
    except ValueError:
        return False


def source_extension(source: str) -> str:
    """Return the file extension of a local path or of a URL's path."""
    if is_url(source):
        return Path(urlparse(source).path).suffix
    return Path(source).suffix


def fetch_image(url: str) -> io.BytesIO:
    """Read the body of an HTTP(S) response into memory.

    Raises:
        DecodeError: if the request or the transfer fails, or the body is
            empty.
    """
    req = urllib.request.Request(url, headers={"User-Agent": "bwdither/0.1"})
    try:
        with urllib.request.urlopen(req, timeout=FETCH_TIMEOUT) as resp:
            body = resp.read()
    except (OSError, http.client.HTTPException) as e:
        # URLError and socket timeouts are both OSErrors
        raise DecodeError(f"Failed to download {url}: {e}") from e

    if not body:
        raise DecodeError(f"Downloaded file is empty: {url}")
    return io.BytesIO(body)


def detect_format(img: Image.Image) -> str:
    """Map the decoder's format name to "gif", "jpeg" or "png"."""
    fmt = SUPPORTED_FORMATS.get(img.format or "")
    if fmt is None:
        raise DecodeError(f"Unsupported format: {img.format or 'unknown'}")
    return fmt


def _decode(fp: Path | BinaryIO, name: str) -> tuple[Image.Image, str]:
    try:
        with Image.open(fp) as img:
            fmt = detect_format(img)
            img.load()
            return img.copy(), fmt
    except UnidentifiedImageError as e:
        raise DecodeError(f"Unrecognised image format: {name}") from e
    except OSError as e:
        raise DecodeError(f"Cannot decode {name}: {e}") from e


def load_image(source: str | Path) -> SourceImage:
    """Open and fully decode an image file or URL.

    Raises:
        DecodeError: if the file is missing, unreadable, cannot be
            downloaded, or is not a GIF, JPEG or PNG image.
    """
    source_str = str(source)
    if is_url(source_str):
        image, fmt = _decode(fetch_image(source_str), source_str)
    else:
        local_path = Path(source_str)
        if not local_path.is_file():
            raise DecodeError(f"File not found: {local_path}")
        image, fmt = _decode(local_path, source_str)

    return SourceImage(image=image, format=fmt, source=source_str)
