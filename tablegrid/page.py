"""Page container for the text elements and rulings of one PDF page."""

from __future__ import annotations

import json
from typing import Any, Dict, List, Optional, Sequence

from .entities import Rect, RectBacked
from .ruling import Ruling
from .text import TextElement


class Page(RectBacked):
    """A page's dimensions and metadata plus the raw entities found on it.

    Args:
        width: Page width in points.
        height: Page height in points.
        rotation: Rotation tag as reported by the extraction layer.
        number: 1-indexed page number.
        texts: Raw text elements, in any order.
        rulings: Raw ruling segments, in any order.
    """

    def __init__(
        self,
        width: float,
        height: float,
        rotation: int,
        number: int,
        texts: Optional[List[TextElement]] = None,
        rulings: Optional[List[Ruling]] = None,
    ) -> None:
        super().__init__(0, 0, width, height)
        self._rotation = rotation
        self._number = number
        self.texts: List[TextElement] = list(texts) if texts else []
        self.rulings: List[Ruling] = list(rulings) if rulings else []

    @property
    def rotation(self) -> int:
        return self._rotation

    @property
    def number(self) -> int:
        return self._number

    def get_text(self, area: Optional[Sequence[float]] = None) -> List[TextElement]:
        """Text elements overlapping ``area``, given as [top, left, bottom, right].

        Defaults to the whole page.
        """
        if area is None:
            area = [0, 0, self.height, self.width]
        if len(area) != 4:
            raise ValueError(f"area must be [top, left, bottom, right], got {area!r}")
        top, left, bottom, right = (float(v) for v in area)
        zone = Rect(top, left, right - left, bottom - top)
        return [t for t in self.texts if t.overlaps(zone)]

    def to_dict(self) -> Dict[str, Any]:
        return {
            "width": self.width,
            "height": self.height,
            "number": self.number,
            "rotation": self.rotation,
            "texts": [t.to_dict() for t in self.texts],
        }

    def to_json(self) -> str:
        return json.dumps(self.to_dict())

    def __repr__(self) -> str:
        return (
            f"Page(number={self.number}, width={self.width}, height={self.height}, "
            f"rotation={self.rotation}, texts={len(self.texts)}, rulings={len(self.rulings)})"
        )


__all__ = ["Page"]
