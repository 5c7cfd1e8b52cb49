"""Rectangle geometry shared by every entity on a page.

Entities do not inherit geometry. Each one owns a :class:`Rect` and
:class:`RectBacked` forwards edges, measures and predicates to it.
"""

from __future__ import annotations

import json
from dataclasses import dataclass
from typing import Any, Dict, Tuple, Union

from .geometry_utils import interval_overlap_numba, overlap_ratio_numba, union_box_numba


@dataclass(slots=True)
class Rect:
    """Axis-aligned rectangle in page coordinates (top grows downward)."""

    top: float
    left: float
    width: float
    height: float

    def __post_init__(self) -> None:
        # keep the jitted kernels on a single float64 signature
        self.top = float(self.top)
        self.left = float(self.left)
        self.width = float(self.width)
        self.height = float(self.height)

    @property
    def bottom(self) -> float:
        return self.top + self.height

    @property
    def right(self) -> float:
        return self.left + self.width

    @property
    def area(self) -> float:
        return self.width * self.height

    @property
    def midpoint(self) -> Tuple[float, float]:
        """(x, y) centre of the rectangle."""
        return (self.left + self.width / 2, self.top + self.height / 2)

    def vertically_overlaps(self, other: Rect) -> bool:
        """Roughly, whether self and other sit on the same line."""
        return interval_overlap_numba(self.top, self.bottom, other.top, other.bottom) > 0

    def horizontally_overlaps(self, other: Rect) -> bool:
        """Roughly, whether self and other sit in the same column."""
        return interval_overlap_numba(self.left, self.right, other.left, other.right) > 0

    def overlap_ratio(self, other: Rect) -> float:
        return overlap_ratio_numba(
            self.top,
            self.left,
            self.width,
            self.height,
            other.top,
            other.left,
            other.width,
            other.height,
        )

    def overlaps(self, other: Rect, ratio_tolerance: float = 0.00001) -> bool:
        return self.overlap_ratio(other) > ratio_tolerance

    def horizontal_distance(self, other: Rect) -> float:
        """Gap from self's right edge to other's left edge."""
        return abs(other.left - self.right)

    def vertical_distance(self, other: Rect) -> float:
        """Bottom-to-bottom delta."""
        return abs(other.bottom - self.bottom)

    def merge(self, other: Rect) -> Rect:
        """Grow self to the union bounding box of self and other."""
        self.top, self.left, self.width, self.height = union_box_numba(
            self.top,
            self.left,
            self.width,
            self.height,
            other.top,
            other.left,
            other.width,
            other.height,
        )
        return self

    def copy(self) -> Rect:
        return Rect(self.top, self.left, self.width, self.height)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "top": self.top,
            "left": self.left,
            "width": self.width,
            "height": self.height,
        }


RectLike = Union[Rect, "RectBacked"]


def as_rect(obj: RectLike) -> Rect:
    """Return the Rect behind ``obj``."""
    if isinstance(obj, RectBacked):
        return obj.rect
    if isinstance(obj, Rect):
        return obj
    raise TypeError(f"Cannot convert {obj!r} to Rect")


class RectBacked:
    """Base for entities that own a :class:`Rect` and delegate geometry to it."""

    def __init__(self, top: float, left: float, width: float, height: float) -> None:
        self.rect = Rect(top, left, width, height)

    # -- geometry accessors --------------------------------------------------

    @property
    def top(self) -> float:
        return self.rect.top

    @top.setter
    def top(self, value: float) -> None:
        self.rect.top = float(value)

    @property
    def left(self) -> float:
        return self.rect.left

    @left.setter
    def left(self, value: float) -> None:
        self.rect.left = float(value)

    @property
    def width(self) -> float:
        return self.rect.width

    @width.setter
    def width(self, value: float) -> None:
        self.rect.width = float(value)

    @property
    def height(self) -> float:
        return self.rect.height

    @height.setter
    def height(self, value: float) -> None:
        self.rect.height = float(value)

    @property
    def bottom(self) -> float:
        return self.rect.bottom

    @property
    def right(self) -> float:
        return self.rect.right

    @property
    def area(self) -> float:
        return self.rect.area

    @property
    def midpoint(self) -> Tuple[float, float]:
        return self.rect.midpoint

    # -- predicates ----------------------------------------------------------

    def vertically_overlaps(self, other: RectLike) -> bool:
        return self.rect.vertically_overlaps(as_rect(other))

    def horizontally_overlaps(self, other: RectLike) -> bool:
        return self.rect.horizontally_overlaps(as_rect(other))

    def overlap_ratio(self, other: RectLike) -> float:
        return self.rect.overlap_ratio(as_rect(other))

    def overlaps(self, other: RectLike, ratio_tolerance: float = 0.00001) -> bool:
        return self.rect.overlaps(as_rect(other), ratio_tolerance)

    def horizontal_distance(self, other: RectLike) -> float:
        return self.rect.horizontal_distance(as_rect(other))

    def vertical_distance(self, other: RectLike) -> float:
        return self.rect.vertical_distance(as_rect(other))

    def merge(self, other: RectLike):
        """Expand self's bounds to cover ``other``. ``other`` is left untouched."""
        self.rect.merge(as_rect(other))
        return self

    # -- serialization -------------------------------------------------------

    def to_dict(self) -> Dict[str, Any]:
        return self.rect.to_dict()

    def to_json(self) -> str:
        return json.dumps(self.to_dict())


__all__ = ["Rect", "RectBacked", "RectLike", "as_rect"]
