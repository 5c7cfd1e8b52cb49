"""Ruling segments and the cleanup pass that fuses them into a grid."""

from __future__ import annotations

import json
from operator import attrgetter
from typing import Dict, Iterable, List, Optional, Tuple

from .config import DEFAULT_CONFIG, LayoutConfig
from .entities import RectBacked
from .geometry_utils import edges_to_array, intersection_matrix_numba, segments_intersect_numba
from .logging_config import get_logger

logger = get_logger(__name__)


class Ruling(RectBacked):
    """A horizontal or vertical line segment that may be a table border.

    Exactly one of ``width`` or ``height`` is expected to be zero. This is
    not enforced; :func:`clean_rulings` drops anything that is neither.
    """

    @classmethod
    def from_points(cls, x1: float, y1: float, x2: float, y2: float) -> Ruling:
        """Build a ruling from two endpoints in any order."""
        left, right = min(x1, x2), max(x1, x2)
        top, bottom = min(y1, y2), max(y1, y2)
        return cls(top, left, right - left, bottom - top)

    @property
    def vertical(self) -> bool:
        return self.left == self.right

    @property
    def horizontal(self) -> bool:
        return self.top == self.bottom

    def edges(self) -> Tuple[float, float, float, float]:
        return (self.left, self.top, self.right, self.bottom)

    def intersects(self, other: Ruling) -> bool:
        return segments_intersect_numba(*self.edges(), *other.edges())

    def to_list(self) -> List[float]:
        return list(self.edges())

    def to_json(self) -> str:
        return json.dumps(self.to_list())

    def to_xml(self) -> str:
        return '<ruling x1="%.2f" y1="%.2f" x2="%.2f" y2="%.2f" />' % self.edges()

    def __repr__(self) -> str:
        return (
            f"Ruling(top={self.top}, left={self.left}, "
            f"width={self.width}, height={self.height})"
        )


def _group_by(rulings: Iterable[Ruling], key: str) -> Dict[float, List[Ruling]]:
    groups: Dict[float, List[Ruling]] = {}
    for r in rulings:
        groups.setdefault(getattr(r, key), []).append(r)
    return groups


def _fuse_horizontal(group: List[Ruling]) -> Ruling:
    if len(group) == 1:
        return group[0]
    group = sorted(group, key=attrgetter("left"))
    first = group[0]
    right = max(r.right for r in group)
    return Ruling(first.top, first.left, right - first.left, 0)


def _fuse_vertical(group: List[Ruling]) -> Ruling:
    if len(group) == 1:
        return group[0]
    group = sorted(group, key=attrgetter("top"))
    first = group[0]
    bottom = max(r.bottom for r in group)
    return Ruling(first.top, first.left, 0, bottom - first.top)


def prune_unconnected(
    horizontal: List[Ruling], vertical: List[Ruling]
) -> Tuple[List[Ruling], List[Ruling]]:
    """Keep only rulings that cross at least one perpendicular ruling.

    A side is left untouched when the other side is empty.
    """
    if not horizontal or not vertical:
        return list(horizontal), list(vertical)

    hits = intersection_matrix_numba(
        edges_to_array([v.edges() for v in vertical]),
        edges_to_array([h.edges() for h in horizontal]),
    )
    kept_vertical = [v for v, row in zip(vertical, hits) if row.any()]
    # horizontals are tested against the surviving verticals only
    if kept_vertical:
        hits = hits[[i for i, row in enumerate(hits) if row.any()]]
        kept_horizontal = [h for j, h in enumerate(horizontal) if hits[:, j].any()]
    else:
        kept_horizontal = list(horizontal)
    return kept_horizontal, kept_vertical


def clean_rulings(
    rulings: Iterable[Ruling],
    max_distance: Optional[float] = None,
    config: LayoutConfig = DEFAULT_CONFIG,
) -> Dict[str, List[Ruling]]:
    """Fuse collinear rulings into one ruling per coordinate.

    Horizontal rulings are grouped by exact ``top`` and vertical ones by
    exact ``left``; each group collapses into a single ruling spanning the
    group's extent. ``max_distance`` is accepted but does not widen the
    grouping.

    Returns:
        ``{"horizontal": [...], "vertical": [...]}``
    """
    if max_distance is None:
        max_distance = config.ruling_max_distance
    rulings = list(rulings)

    # TODO grouping should become iterative and honour max_distance
    horiz = [
        _fuse_horizontal(group)
        for group in _group_by((r for r in rulings if r.horizontal), "top").values()
    ]
    vert = [
        _fuse_vertical(group)
        for group in _group_by((r for r in rulings if r.vertical), "left").values()
    ]

    dropped = sum(1 for r in rulings if not (r.horizontal or r.vertical))
    if dropped:
        logger.debug("Dropped %d rulings that are neither horizontal nor vertical", dropped)

    if config.prune_unconnected_rulings:
        horiz, vert = prune_unconnected(horiz, vert)

    logger.debug(
        "Cleaned %d rulings into %d horizontal and %d vertical (max_distance=%s)",
        len(rulings),
        len(horiz),
        len(vert),
        max_distance,
    )
    return {"horizontal": horiz, "vertical": vert}


__all__ = ["Ruling", "clean_rulings", "prune_unconnected"]
