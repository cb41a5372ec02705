"""Run configuration.

A Config is built once from user input and passed explicitly into the
pipeline; nothing is read from process-wide state.
"""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path

from bwdither.core.errors import ConfigError
from bwdither.core.reader import source_extension

DEFAULT_OUTPUT = "out"


@dataclass(frozen=True)
class Config:
    """Settings for one dithering run."""

    input: str  # Local path or HTTP(S) URL
    output: Path
    invert: bool = False


def resolve_output_path(input_path: str, output: str | Path) -> Path:
    """Append the input's extension to an output path that has none."""
    out = Path(output)
    if not out.suffix:
        out = out.with_name(out.name + source_extension(input_path))
    return out


def build_config(
    input_path: str | None,
    output: str | Path | None = DEFAULT_OUTPUT,
    invert: bool = False,
) -> Config:
    """Validate user input and return a Config.

    Raises:
        ConfigError: if no input image is given.
    """
    if not input_path:
        raise ConfigError("no input image specified")
    input_str = str(input_path)
    return Config(
        input=input_str,
        output=resolve_output_path(input_str, output or DEFAULT_OUTPUT),
        invert=invert,
    )
