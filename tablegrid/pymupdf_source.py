"""Build :class:`~tablegrid.page.Page` objects from PyMuPDF pages.

PyMuPDF does the content-stream decoding; this module only reshapes its
spans and vector drawings into text elements and rulings.
"""

from __future__ import annotations

from pathlib import Path
from typing import Any, Iterable, Iterator, List, Optional

import pymupdf  # type: ignore

from .logging_config import get_logger
from .page import Page
from .ruling import Ruling
from .text import TextElement

logger = get_logger(__name__)

# filled bars up to this many points thick are treated as drawn rules
RULE_THICKNESS = 2.0


def is_white(text: str) -> bool:
    return not text or text.isspace()


def text_elements_from_page(page: "pymupdf.Page") -> List[TextElement]:
    """One text element per non-blank span."""
    blocks = page.get_text("dict", flags=pymupdf.TEXTFLAGS_TEXT)["blocks"]
    elements: List[TextElement] = []
    for span in [  # look at all non-empty spans
        s
        for b in blocks
        for l in b.get("lines", [])
        for s in l["spans"]
        if not is_white(s["text"])
    ]:
        x0, y0, x1, y1 = span["bbox"]
        elements.append(
            TextElement(y0, x0, x1 - x0, y1 - y0, span["font"], span["size"], span["text"])
        )
    return elements


def rulings_from_rect(rect: Any, max_thickness: float = RULE_THICKNESS) -> List[Ruling]:
    """The four sides of a drawn rectangle.

    A bar no thicker than ``max_thickness`` is a drawn rule and collapses
    to its centreline.
    """
    if rect.height <= max_thickness and rect.height <= rect.width:
        y = (rect.y0 + rect.y1) / 2
        return [Ruling.from_points(rect.x0, y, rect.x1, y)]
    if rect.width <= max_thickness:
        x = (rect.x0 + rect.x1) / 2
        return [Ruling.from_points(x, rect.y0, x, rect.y1)]
    return [
        Ruling.from_points(rect.x0, rect.y0, rect.x1, rect.y0),
        Ruling.from_points(rect.x0, rect.y1, rect.x1, rect.y1),
        Ruling.from_points(rect.x0, rect.y0, rect.x0, rect.y1),
        Ruling.from_points(rect.x1, rect.y0, rect.x1, rect.y1),
    ]


def rulings_from_page(page: "pymupdf.Page") -> List[Ruling]:
    """Straight segments from the page's vector drawings.

    Only line ("l") and rectangle ("re") items are used; curves and quads
    are ignored.
    """
    rulings: List[Ruling] = []
    for path in page.get_drawings():
        for item in path["items"]:
            kind = item[0]
            if kind == "l":
                p1, p2 = item[1], item[2]
                rulings.append(Ruling.from_points(p1.x, p1.y, p2.x, p2.y))
            elif kind == "re":
                rulings.extend(rulings_from_rect(item[1]))
    return rulings


def page_from_pymupdf(page: "pymupdf.Page") -> Page:
    """Convert a loaded PyMuPDF page. Page numbers are 1-indexed."""
    texts = text_elements_from_page(page)
    rulings = rulings_from_page(page)
    logger.debug(
        "Page %d: %d text elements, %d rulings", page.number + 1, len(texts), len(rulings)
    )
    return Page(
        page.rect.width,
        page.rect.height,
        page.rotation,
        page.number + 1,
        texts=texts,
        rulings=rulings,
    )


def iter_pages(
    pdf_path: str | Path, pages: Optional[Iterable[int]] = None
) -> Iterator[Page]:
    """Yield a :class:`Page` for each 0-based page index in ``pages``.

    All pages are used when ``pages`` is omitted.
    """
    pdf_path = Path(pdf_path)
    if not pdf_path.exists():
        raise FileNotFoundError(f"Input PDF not found: {pdf_path}")

    with pymupdf.open(str(pdf_path)) as doc:
        if pages is None:  # use all pages if omitted
            pages = range(doc.page_count)
        for pno in pages:
            if pno < 0:
                raise ValueError("page_number must be >= 0")
            yield page_from_pymupdf(doc.load_page(pno))


__all__ = [
    "text_elements_from_page",
    "rulings_from_rect",
    "rulings_from_page",
    "page_from_pymupdf",
    "iter_pages",
]
