"""Tests for text element merge and spacing decisions."""

from __future__ import annotations

import pytest

from tablegrid.config import LayoutConfig
from tablegrid.entities import Rect
from tablegrid.errors import TypeMismatchError
from tablegrid.ruling import Ruling
from tablegrid.text import TextElement


@pytest.fixture
def hello() -> TextElement:
    return TextElement(10, 10, 20, 10, "Helvetica", 10, "Hello")


def world_at(left: float, top: float = 10, height: float = 10) -> TextElement:
    return TextElement(top, left, 20, height, "Helvetica", 10, "World")


@pytest.mark.smoke
class TestShouldMerge:
    def test_gap_below_tolerance_merges_without_space(self, hello: TextElement):
        world = world_at(31)  # gap 1, tolerance 2.5

        assert hello.should_merge(world)
        assert not hello.should_add_space(world)

    def test_gap_inside_space_band(self, hello: TextElement):
        world = world_at(33)  # gap 3 in [2.5, 3.75)

        assert not hello.should_merge(world)
        assert hello.should_add_space(world)

    def test_gap_at_tolerance_starts_space_band(self, hello: TextElement):
        world = world_at(32.5)

        assert not hello.should_merge(world)
        assert hello.should_add_space(world)

    def test_gap_beyond_space_band(self, hello: TextElement):
        world = world_at(34)  # gap 4 >= 3.75

        assert not hello.should_merge(world)
        assert not hello.should_add_space(world)

    def test_close_but_on_another_row(self, hello: TextElement):
        world = world_at(31, top=50)

        assert not hello.should_merge(world)
        assert not hello.should_add_space(world)

    def test_lone_zero_height_counts_as_same_row(self):
        flat = TextElement(10, 10, 20, 0, "Helvetica", 10, "Hello")
        world = world_at(31)

        assert flat.should_merge(world)
        assert world_at(31).should_merge(TextElement(10, 52, 5, 0, "Helvetica", 10, "!"))

    def test_both_zero_height_do_not_merge(self):
        a = TextElement(10, 10, 20, 0, "Helvetica", 10, "Hello")
        b = TextElement(10, 31, 20, 0, "Helvetica", 10, "World")

        assert not a.should_merge(b)
        assert not a.should_add_space(b)

    def test_tolerance_uses_average_font_size(self):
        big = TextElement(10, 10, 20, 10, "Helvetica", 20, "Hello")
        world = world_at(33)  # tolerance (20 + 10) / 2 * 0.25 = 3.75

        assert big.should_merge(world)

    def test_config_changes_tolerance(self, hello: TextElement):
        loose = LayoutConfig(merge_tolerance_ratio=0.5)  # tolerance 5
        world = world_at(34)

        assert hello.should_merge(world, loose)
        assert not hello.should_merge(world)

    def test_config_changes_space_band(self, hello: TextElement):
        wide = LayoutConfig(character_distance_threshold=2.0)  # band [2.5, 5)
        world = world_at(34)

        assert hello.should_add_space(world, wide)


@pytest.mark.smoke
class TestMerge:
    def test_concatenates_and_grows_bounds(self, hello: TextElement):
        world = world_at(31)
        result = hello.merge(world)

        assert result is hello
        assert hello.text == "HelloWorld"
        assert hello.to_dict() == {
            "top": 10,
            "left": 10,
            "width": 41,
            "height": 10,
            "font": "Helvetica",
            "text": "HelloWorld",
        }

    def test_stacked_element_above_is_prepended(self):
        lower = TextElement(20, 10, 20, 10, "Helvetica", 10, "b")
        upper = TextElement(10, 15, 10, 10, "Helvetica", 10, "a")

        lower.merge(upper)

        assert lower.text == "ab"
        assert lower.rect == Rect(10, 10, 20, 20)

    def test_no_space_is_inserted(self, hello: TextElement):
        hello.merge(world_at(33))
        assert hello.text == "HelloWorld"

    def test_absorbed_element_is_not_mutated(self, hello: TextElement):
        world = world_at(31)
        hello.merge(world)

        assert world.text == "World"
        assert world.rect == Rect(10, 31, 20, 10)


@pytest.mark.smoke
class TestTypeMismatch:
    @pytest.mark.parametrize("other", [Rect(10, 31, 20, 10), Ruling(10, 31, 20, 0), "World"])
    def test_non_text_arguments_are_rejected(self, hello: TextElement, other):
        with pytest.raises(TypeMismatchError):
            hello.should_merge(other)
        with pytest.raises(TypeMismatchError):
            hello.should_add_space(other)
        with pytest.raises(TypeError):
            hello.merge(other)

    def test_subclasses_are_accepted(self, hello: TextElement):
        class BoldText(TextElement):
            pass

        bold = BoldText(10, 31, 20, 10, "Helvetica-Bold", 10, "World")

        assert hello.should_merge(bold)
        assert hello.merge(bold).text == "HelloWorld"

    def test_failed_merge_leaves_element_untouched(self, hello: TextElement):
        with pytest.raises(TypeMismatchError):
            hello.merge(Ruling(0, 0, 100, 0))
        assert hello.text == "Hello"
        assert hello.rect == Rect(10, 10, 20, 10)


@pytest.mark.smoke
def test_serialization_omits_font_size(hello: TextElement):
    data = hello.to_dict()

    assert list(data) == ["top", "left", "width", "height", "font", "text"]
    assert "font_size" not in data


@pytest.mark.smoke
def test_copy_is_independent(hello: TextElement):
    clone = hello.copy()
    clone.merge(world_at(31))

    assert hello.text == "Hello"
    assert clone.text == "HelloWorld"
