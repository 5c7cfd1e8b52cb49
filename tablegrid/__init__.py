"""Geometric clustering core for reconstructing tables from PDF pages."""

from __future__ import annotations

from importlib import metadata

from .config import DEFAULT_CONFIG, LayoutConfig
from .entities import Rect, RectBacked
from .errors import DegenerateGeometryError, TypeMismatchError
from .layout import (
    PageLayout,
    group_columns,
    group_lines,
    merge_text_elements,
    reconstruct_page,
)
from .page import Page
from .ruling import Ruling, clean_rulings, prune_unconnected
from .text import Column, Line, TextElement

__all__ = [
    "Rect",
    "RectBacked",
    "TextElement",
    "Line",
    "Column",
    "Ruling",
    "Page",
    "PageLayout",
    "LayoutConfig",
    "DEFAULT_CONFIG",
    "TypeMismatchError",
    "DegenerateGeometryError",
    "clean_rulings",
    "prune_unconnected",
    "merge_text_elements",
    "group_lines",
    "group_columns",
    "reconstruct_page",
    "__version__",
]

try:  # pragma: no cover - metadata only available when installed
    __version__ = metadata.version("tablegrid")
except metadata.PackageNotFoundError:  # pragma: no cover - fallback for local dev
    __version__ = "1.0.0"
