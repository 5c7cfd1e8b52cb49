"""Configuration for controlling layout reconstruction."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(slots=True, frozen=True)
class LayoutConfig:
    """Heuristic constants used while clustering a page.

    Attributes:
        merge_tolerance_ratio: Fraction of the average font size below which
            two fragments are considered part of the same word.
        character_distance_threshold: Multiplier on the merge tolerance that
            bounds the "next word on the same line" band.
        ruling_max_distance: Distance accepted by ``clean_rulings``. Grouping
            is still by exact coordinate equality.
        prune_unconnected_rulings: Drop rulings that cross no perpendicular
            ruling after fusing.
        verbose: Log reconstruction summaries at INFO instead of DEBUG.
    """

    merge_tolerance_ratio: float = 0.25
    character_distance_threshold: float = 1.5
    ruling_max_distance: float = 4.0
    prune_unconnected_rulings: bool = False
    verbose: bool = False

    def __post_init__(self) -> None:
        if self.merge_tolerance_ratio <= 0:
            raise ValueError("merge_tolerance_ratio must be > 0")
        if self.character_distance_threshold <= 1:
            raise ValueError("character_distance_threshold must be > 1")
        if self.ruling_max_distance < 0:
            raise ValueError("ruling_max_distance must be >= 0")

    def tolerance(self, font_size: float, other_font_size: float) -> float:
        """Return the merge tolerance for two font sizes."""
        return ((font_size + other_font_size) / 2) * self.merge_tolerance_ratio


DEFAULT_CONFIG = LayoutConfig()

__all__ = ["LayoutConfig", "DEFAULT_CONFIG"]
