"""Layout reconstruction pass: fragments to lines, lines to columns."""

from __future__ import annotations

from dataclasses import dataclass, field
from operator import attrgetter
from typing import Dict, Iterable, List

from .config import DEFAULT_CONFIG, LayoutConfig
from .entities import Rect
from .logging_config import get_logger
from .page import Page
from .ruling import Ruling, clean_rulings
from .text import Column, Line, TextElement

logger = get_logger(__name__)


@dataclass(slots=True)
class PageLayout:
    """Everything the table-structure layer needs for one page."""

    page: Page
    lines: List[Line] = field(default_factory=list)
    columns: List[Column] = field(default_factory=list)
    rulings: Dict[str, List[Ruling]] = field(
        default_factory=lambda: {"horizontal": [], "vertical": []}
    )


def _reading_order(elements: Iterable[TextElement]) -> List[TextElement]:
    return sorted(elements, key=lambda t: (t.top, t.left))


def _in_band(band: Rect, te: TextElement) -> bool:
    if te.height == 0:
        return band.top <= te.top <= band.bottom
    return band.vertically_overlaps(te.rect)


def _rows(elements: Iterable[TextElement]) -> List[List[TextElement]]:
    """Split elements into rows by vertical overlap, each row sorted by ``left``.

    Row membership is decided against the row's growing band, so small
    jitter in ``top`` does not reorder fragments of the same line.
    """
    bands: List[Rect] = []
    rows: List[List[TextElement]] = []
    for te in _reading_order(elements):
        if bands and _in_band(bands[-1], te):
            bands[-1].merge(te.rect)
            rows[-1].append(te)
        else:
            bands.append(te.rect.copy())
            rows.append([te])
    return [sorted(row, key=attrgetter("left")) for row in rows]


def merge_text_elements(
    elements: Iterable[TextElement], config: LayoutConfig = DEFAULT_CONFIG
) -> List[TextElement]:
    """Fold adjacent fragments of the same word or phrase together.

    Elements are consumed: survivors absorb their neighbours in place.
    """
    merged: List[TextElement] = []
    for row in _rows(elements):
        previous = None
        for te in row:
            if previous is not None:
                if previous.should_merge(te, config):
                    previous.merge(te)
                    continue
                if previous.should_add_space(te, config):
                    previous.text += " "
                    previous.merge(te)
                    continue
            merged.append(te)
            previous = te
    return merged


def group_lines(elements: Iterable[TextElement]) -> List[Line]:
    """Group text elements into lines by vertical overlap with the line box."""
    lines: List[Line] = []
    for te in _reading_order(elements):
        if not lines or not lines[-1].vertically_overlaps(te):
            lines.append(Line())
        lines[-1].append(te)
    return lines


def _fuse_columns(columns: List[Column]) -> List[Column]:
    fused: List[Column] = []
    for column in sorted(columns, key=attrgetter("left")):
        target = next((c for c in fused if c.contains(column)), None)
        if target is None:
            fused.append(column)
            continue
        for te in column.text_elements:
            target.append(te)
    return fused


def group_columns(lines: Iterable[Line]) -> List[Column]:
    """Distribute the elements of ``lines`` into columns, sorted by ``left``."""
    columns: List[Column] = []
    for line in lines:
        for te in line.sorted_elements():
            probe = Column(te.left, te.width)
            column = next((c for c in columns if c.contains(probe)), None)
            if column is None:
                column = probe
                columns.append(column)
            column.append(te)
    return _fuse_columns(columns)


def reconstruct_page(page: Page, config: LayoutConfig = DEFAULT_CONFIG) -> PageLayout:
    """Run the whole clustering pass over one page.

    Works on copies of ``page.texts`` so the page itself is left intact.
    """
    elements = merge_text_elements((t.copy() for t in page.texts), config)
    lines = group_lines(elements)
    columns = group_columns(lines)
    rulings = clean_rulings(page.rulings, config=config)

    log = logger.info if config.verbose else logger.debug
    log(
        "Page %s: %d text elements -> %d lines, %d columns, %d/%d rulings",
        page.number,
        len(page.texts),
        len(lines),
        len(columns),
        len(rulings["horizontal"]),
        len(rulings["vertical"]),
    )
    return PageLayout(page=page, lines=lines, columns=columns, rulings=rulings)


__all__ = [
    "PageLayout",
    "merge_text_elements",
    "group_lines",
    "group_columns",
    "reconstruct_page",
]
