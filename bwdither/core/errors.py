"""Errors raised by the image I/O and configuration layer."""

from __future__ import annotations


class DitherError(Exception):
    """Base class for bwdither errors."""


class DecodeError(DitherError):
    """The input could not be read, downloaded or recognised."""


class EncodeError(DitherError):
    """The output could not be encoded or written."""


class ConfigError(DitherError):
    """The run was configured without a usable input."""
