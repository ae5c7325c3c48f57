"""Shared test fixtures and configuration.

Provides deterministic measure functions, small output sizes and in-memory
images so most tests run without touching fonts or the filesystem.
"""

from __future__ import annotations

import logging
from io import BytesIO
from pathlib import Path
from typing import Callable

import pytest
from PIL import Image

from screenshot_studio.models import OutputSpec, SolidBackground, Style

BG_HEX = "#F28B82"
BG_RGB = (242, 139, 130)

# Loggers the CLI points at its log file
APP_LOGGERS = ["compositor", "editing", "export", "config", "cli"]


@pytest.fixture
def char_measure() -> Callable[[str], float]:
    """Measure function giving every character 10px."""
    return lambda word: 10.0 * len(word)


@pytest.fixture
def small_output() -> OutputSpec:
    """A small portrait output that renders quickly."""
    return OutputSpec(width=200, height=400)


@pytest.fixture
def solid_style() -> Style:
    """White bold caption on the default salmon background."""
    return Style(
        background=SolidBackground(color=BG_HEX),
        text_color="#FFFFFF",
        font_size_percent=6,
        font_weight="bold",
    )


@pytest.fixture
def make_png() -> Callable[..., bytes]:
    """Factory for encoded PNG bytes of a flat-colored image.

    Usage:
        def test_something(make_png):
            data = make_png((80, 40), (255, 0, 0))
    """
    def _make(size: tuple[int, int], color: tuple[int, ...], mode: str = "RGB") -> bytes:
        output = BytesIO()
        Image.new(mode, size, color).save(output, format="PNG")
        return output.getvalue()

    return _make


@pytest.fixture
def project_dir(tmp_path: Path, make_png: Callable[..., bytes]) -> Path:
    """Directory with a small project file and one slide image."""
    (tmp_path / "shots").mkdir()
    (tmp_path / "shots" / "home.png").write_bytes(make_png((60, 120), (0, 0, 255)))
    (tmp_path / "project.yaml").write_text(
        "output: {width: 200, height: 400}\n"
        "style:\n"
        "  background: {kind: gradient, color_a: '#F28B82', color_b: '#FBBC04', angle_degrees: 135}\n"
        "  text_color: '#FFFFFF'\n"
        "  font_size_percent: 6\n"
        "  font_weight: bold\n"
        "slides:\n"
        "  - text: Big Sale Today\n"
        "    word_colors: {1: '#000000'}\n"
        "    image: shots/home.png\n"
        "  - Second slide\n",
        encoding="utf-8",
    )
    return tmp_path


@pytest.fixture(autouse=True)
def reset_app_loggers():
    """Undo CLI logging setup so later tests can capture log records."""
    yield
    for name in APP_LOGGERS:
        logger = logging.getLogger(name)
        for handler in logger.handlers:
            handler.close()
        logger.handlers = []
        logger.propagate = True
        logger.setLevel(logging.NOTSET)
    logging.getLogger().setLevel(logging.WARNING)
