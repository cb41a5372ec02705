"""Command-line interface for bwdither.

Supports plain human-readable output and a JSON mode for scripting.
"""

from __future__ import annotations

import argparse
import json
import sys

from bwdither.core.config import DEFAULT_OUTPUT
from bwdither.core.errors import ConfigError, DecodeError, EncodeError


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="bwdither",
        description="Dither a GIF, JPEG or PNG image to black and white "
        "using Floyd-Steinberg error diffusion.",
    )
    parser.add_argument(
        "input",
        nargs="?",
        help="Image file to dither (GIF, JPG, or PNG), or an HTTP(S) URL.",
    )
    parser.add_argument(
        "-o", "--output",
        default=DEFAULT_OUTPUT,
        help="Output image file. The input's extension is added when "
        f"missing (default: {DEFAULT_OUTPUT}).",
    )
    parser.add_argument(
        "-i", "--invert",
        action="store_true",
        help="Invert output image.",
    )
    parser.add_argument(
        "--json",
        action="store_true",
        help="Output structured JSON (pipe-friendly).",
    )
    parser.add_argument(
        "--debug",
        action="store_true",
        help="Show stack traces on error (with --json).",
    )
    return parser


def _json_error(message: str, code: str, debug: bool = False) -> None:
    """Print JSON error to stderr and exit with code 1."""
    if debug:
        import traceback
        traceback.print_exc(file=sys.stderr)
    err = {"status": "error", "error": message, "code": code}
    print(json.dumps(err), file=sys.stderr)
    sys.exit(1)


def _fail(args: argparse.Namespace, message: str, code: str) -> None:
    if args.json:
        _json_error(message, code, args.debug)
    print(f"Error: {message}", file=sys.stderr)
    sys.exit(1)


def _run(args: argparse.Namespace) -> None:
    """Dither one image and report the outcome."""
    from bwdither.core.config import build_config
    from bwdither.core.processor import run
    from bwdither.core.reader import is_url

    config = build_config(args.input, args.output, args.invert)
    is_remote = is_url(config.input)

    if is_remote and not args.json:
        print(f"Downloading {config.input}...", file=sys.stderr)

    try:
        result = run(config)
    except DecodeError as e:
        _fail(args, str(e), "DOWNLOAD_FAILED" if is_remote else "DECODE_FAILED")
    except EncodeError as e:
        _fail(args, str(e), "ENCODE_FAILED")

    if not args.json:
        print(f"Saved to {result.output}", file=sys.stderr)
    else:
        report = {
            "status": "success",
            "input": result.input,
            "output": str(result.output),
            "settings": {
                "invert": result.invert,
            },
            "metadata": {
                "format": result.format,
                "width": result.width,
                "height": result.height,
            },
        }
        print(json.dumps(report, indent=2))


def main(argv: list[str] | None = None) -> None:
    """Main entry point."""
    parser = _build_parser()
    args = parser.parse_args(argv)

    try:
        _run(args)
    except ConfigError as e:
        if args.json:
            _json_error(str(e), "INVALID_ARGS", args.debug)
        print(e, file=sys.stderr)
        parser.print_usage(sys.stderr)
        sys.exit(1)


if __name__ == "__main__":
    main()
