"""Tests for the page container and its spatial query."""

from __future__ import annotations

import json

import pytest

from tablegrid.page import Page
from tablegrid.ruling import Ruling


@pytest.fixture
def page(make_text) -> Page:
    texts = [
        make_text(10, 10, text="top-left"),
        make_text(10, 500, text="top-right"),
        make_text(700, 10, text="bottom-left"),
        make_text(900, 10, text="off-page"),
    ]
    return Page(612, 792, 90, 3, texts=texts, rulings=[Ruling(100, 0, 612, 0)])


@pytest.mark.smoke
class TestPage:
    def test_metadata(self, page: Page):
        assert (page.top, page.left, page.width, page.height) == (0, 0, 612, 792)
        assert page.rotation == 90
        assert page.number == 3
        assert len(page.rulings) == 1

    def test_metadata_is_read_only(self, page: Page):
        with pytest.raises(AttributeError):
            page.rotation = 0  # type: ignore[misc]
        with pytest.raises(AttributeError):
            page.number = 1  # type: ignore[misc]

    def test_get_text_defaults_to_whole_page(self, page: Page):
        texts = [t.text for t in page.get_text()]

        assert texts == ["top-left", "top-right", "bottom-left"]

    def test_get_text_in_area(self, page: Page):
        # [top, left, bottom, right]
        texts = [t.text for t in page.get_text([0, 0, 100, 100])]

        assert texts == ["top-left"]

    def test_get_text_rejects_malformed_area(self, page: Page):
        with pytest.raises(ValueError):
            page.get_text([0, 0, 100])

    def test_empty_page(self):
        empty = Page(100, 100, 0, 1)

        assert empty.texts == []
        assert empty.rulings == []
        assert empty.get_text() == []


@pytest.mark.smoke
def test_serialization_shape(page: Page):
    data = page.to_dict()

    assert list(data) == ["width", "height", "number", "rotation", "texts"]
    assert data["texts"][0] == {
        "top": 10,
        "left": 10,
        "width": 20,
        "height": 10,
        "font": "Helvetica",
        "text": "top-left",
    }
    assert json.loads(page.to_json()) == data
