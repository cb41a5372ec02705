"""Tests for run configuration."""

from pathlib import Path

import pytest

from bwdither.core.config import (
    DEFAULT_OUTPUT,
    Config,
    build_config,
    resolve_output_path,
)
from bwdither.core.errors import ConfigError


class TestBuildConfig:
    def test_defaults(self):
        cfg = build_config("cat.png")
        assert cfg == Config(input="cat.png", output=Path("out.png"), invert=False)

    def test_missing_input(self):
        with pytest.raises(ConfigError, match="no input image"):
            build_config(None)

    def test_empty_input(self):
        with pytest.raises(ConfigError):
            build_config("")

    def test_invert(self):
        assert build_config("cat.gif", invert=True).invert is True

    def test_none_output_uses_default(self):
        cfg = build_config("cat.gif", output=None)
        assert cfg.output == Path(DEFAULT_OUTPUT + ".gif")

    def test_frozen(self):
        cfg = build_config("cat.png")
        with pytest.raises(Exception):
            cfg.invert = True


class TestResolveOutputPath:
    def test_appends_input_extension(self):
        assert resolve_output_path("dir/cat.jpg", "result") == Path("result.jpg")

    def test_keeps_explicit_extension(self):
        assert resolve_output_path("cat.jpg", "result.png") == Path("result.png")

    def test_keeps_directory(self):
        assert resolve_output_path("cat.gif", "out_dir/result") == Path(
            "out_dir/result.gif"
        )

    def test_url_input(self):
        url = "https://example.com/images/cat.png?v=3"
        assert resolve_output_path(url, "out") == Path("out.png")

    def test_input_without_extension(self):
        assert resolve_output_path("cat", "out") == Path("out")
