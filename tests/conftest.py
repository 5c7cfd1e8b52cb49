"""Shared fixtures for the tablegrid tests."""

from __future__ import annotations

from typing import Callable

import pytest

from tablegrid.text import TextElement

TextFactory = Callable[..., TextElement]


@pytest.fixture
def make_text() -> TextFactory:
    """Return a factory for text elements with sensible font defaults."""

    def _make(
        top: float,
        left: float,
        width: float = 20,
        height: float = 10,
        text: str = "x",
        font_size: float = 10,
        font: str = "Helvetica",
    ) -> TextElement:
        return TextElement(top, left, width, height, font, font_size, text)

    return _make
