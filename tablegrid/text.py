"""Text fragments and the lines and columns built from them."""

from __future__ import annotations

from operator import attrgetter
from typing import Any, Dict, Iterable, Iterator, List, Optional

import numpy as np

from .config import DEFAULT_CONFIG, LayoutConfig
from .entities import RectBacked
from .errors import DegenerateGeometryError, TypeMismatchError


def _require_text_element(other: Any) -> None:
    """Reject anything that is not a TextElement. Subclasses are accepted."""
    if not isinstance(other, TextElement):
        raise TypeMismatchError("argument is not a TextElement")


class TextElement(RectBacked):
    """A run of text with its bounding box, font name and font size.

    Merging is destructive: the absorbing element takes over the combined
    text and bounds, and the absorbed element must not be used afterwards.
    """

    def __init__(
        self,
        top: float,
        left: float,
        width: float,
        height: float,
        font: str,
        font_size: float,
        text: str,
    ) -> None:
        super().__init__(top, left, width, height)
        self.font = font
        self.font_size = font_size
        self.text = text

    def _lone_zero_height(self, other: TextElement) -> bool:
        return (self.height == 0) != (other.height == 0)

    def should_merge(
        self, other: TextElement, config: LayoutConfig = DEFAULT_CONFIG
    ) -> bool:
        """More or less, whether the gap to ``other`` is below the tolerance."""
        _require_text_element(other)
        tolerance = config.tolerance(self.font_size, other.font_size)
        same_row = self.vertically_overlaps(other) or self._lone_zero_height(other)
        return same_row and self.horizontal_distance(other) < tolerance

    def should_add_space(
        self, other: TextElement, config: LayoutConfig = DEFAULT_CONFIG
    ) -> bool:
        """More or less, whether tolerance <= gap < threshold * tolerance."""
        _require_text_element(other)
        tolerance = config.tolerance(self.font_size, other.font_size)
        same_row = self.vertically_overlaps(other) or self._lone_zero_height(other)
        dist = self.horizontal_distance(other)
        return same_row and (
            tolerance <= dist < tolerance * config.character_distance_threshold
        )

    def merge(self, other: TextElement) -> TextElement:
        _require_text_element(other)
        if self.horizontally_overlaps(other) and other.top < self.top:
            self.text = other.text + self.text
        else:
            self.text = self.text + other.text
        super().merge(other)
        return self

    def copy(self) -> TextElement:
        return TextElement(
            self.top,
            self.left,
            self.width,
            self.height,
            self.font,
            self.font_size,
            self.text,
        )

    def to_dict(self) -> Dict[str, Any]:
        data = super().to_dict()
        data["font"] = self.font
        data["text"] = self.text
        return data

    def __repr__(self) -> str:
        return (
            f"TextElement(top={self.top}, left={self.left}, width={self.width}, "
            f"height={self.height}, font={self.font!r}, font_size={self.font_size}, "
            f"text={self.text!r})"
        )


class Line(RectBacked):
    """Text elements inferred to share a visual row.

    Members are kept in insertion order. Sort by ``left`` before reading the
    text out, or use :meth:`sorted_elements`.
    """

    def __init__(self) -> None:
        super().__init__(0, 0, 0, 0)
        self.text_elements: List[TextElement] = []

    def append(self, text_element: TextElement) -> None:
        _require_text_element(text_element)
        if not self.text_elements:
            self.text_elements.append(text_element)
            self.rect = text_element.rect.copy()
            return

        in_same_column = next(
            (te for te in self.text_elements if te.horizontally_overlaps(text_element)),
            None,
        )
        if in_same_column is not None:
            in_same_column.merge(text_element)
        else:
            self.text_elements.append(text_element)
        self.merge(text_element)

    def extend(self, text_elements: Iterable[TextElement]) -> None:
        for te in text_elements:
            self.append(te)

    def sorted_elements(self) -> List[TextElement]:
        return sorted(self.text_elements, key=attrgetter("left"))

    @property
    def text(self) -> str:
        return " ".join(te.text for te in self.sorted_elements())

    def __len__(self) -> int:
        return len(self.text_elements)

    def __iter__(self) -> Iterator[TextElement]:
        return iter(self.text_elements)

    def __repr__(self) -> str:
        return (
            f"Line(top={self.top}, left={self.left}, width={self.width}, "
            f"height={self.height}, text={self.text!r})"
        )


class Column(RectBacked):
    """A vertical band of text elements, kept sorted by ``top``."""

    def __init__(
        self,
        left: float,
        width: float,
        text_elements: Optional[Iterable[TextElement]] = None,
    ) -> None:
        super().__init__(0, left, width, 0)
        self.text_elements: List[TextElement] = sorted(
            text_elements or [], key=attrgetter("top")
        )

    def append(self, text_element: TextElement) -> None:
        _require_text_element(text_element)
        self.text_elements.append(text_element)
        self.update_boundaries(text_element)
        self.text_elements.sort(key=attrgetter("top"))

    def update_boundaries(self, text_element: TextElement) -> None:
        self.merge(text_element)

    def contains(self, other_column: Column) -> bool:
        """Whether this column and ``other_column`` share horizontal extent."""
        return self.horizontally_overlaps(other_column)

    def average_line_distance(self) -> float:
        """Sum of consecutive ``top`` deltas divided by the member count.

        The divisor is the number of members rather than the number of
        deltas, so short columns are biased toward zero.
        """
        if len(self.text_elements) < 2:
            raise DegenerateGeometryError(
                "average_line_distance needs at least two text elements"
            )
        tops = np.fromiter(
            (te.top for te in self.text_elements),
            dtype=np.float64,
            count=len(self.text_elements),
        )
        return float(np.diff(tops).sum() / tops.size)

    def __len__(self) -> int:
        return len(self.text_elements)

    def __iter__(self) -> Iterator[TextElement]:
        return iter(self.text_elements)

    def __repr__(self) -> str:
        texts = ", ".join(te.text for te in sorted(self.text_elements, key=attrgetter("top")))
        return (
            f"<Column: top={self.top}, left={self.left}, width={self.width}, "
            f"height={self.height}, text_elements={texts}>"
        )


__all__ = ["TextElement", "Line", "Column"]
