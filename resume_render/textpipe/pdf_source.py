# resume_render/textpipe/pdf_source.py
from __future__ import annotations
import os
from dataclasses import dataclass, field
from typing import Any, Dict, Iterator, List

import fitz  # PyMuPDF

from ..errors import ExtractionError, SourceNotFoundError


@dataclass
class PageContent:
    number: int  # 1-based
    fragments: List[Dict[str, Any]] = field(default_factory=list)
    annotations: List[Dict[str, Any]] = field(default_factory=list)


def _page_fragments(page: "fitz.Page") -> List[Dict[str, Any]]:
    """One fragment per text span, positioned at the span's baseline origin."""
    info = page.get_text("dict")
    frags: List[Dict[str, Any]] = []
    for block in info.get("blocks", []):
        if block.get("type") != 0:
            continue
        for line in block.get("lines", []):
            for span in line.get("spans", []):
                ox, oy = span.get("origin", (0.0, 0.0))
                size = float(span.get("size", 0))
                frags.append({
                    "str": span.get("text", ""),
                    "transform": [size, 0.0, 0.0, size, float(ox), float(oy)],
                    "fontName": span.get("font", "") or "",
                })
    return frags


def _page_annotations(page: "fitz.Page") -> List[Dict[str, Any]]:
    anns: List[Dict[str, Any]] = []
    for link in page.get_links():
        if link.get("kind") != fitz.LINK_URI:
            continue
        r = link.get("from")
        if not link.get("uri") or r is None:
            continue
        anns.append({"url": link["uri"], "rect": [r.x0, r.y0, r.x1, r.y1]})
    return anns


def check_source(path: str) -> None:
    if not path or not os.path.isfile(path):
        raise SourceNotFoundError(path)


def iter_page_content(path: str) -> Iterator[PageContent]:
    """
    Yield each page's fragments and link annotations in document order.
    Pages are read lazily, so a caller consumes page N before page N+1 is extracted.
    """
    check_source(path)
    try:
        doc = fitz.open(path)
    except Exception as e:
        raise ExtractionError(f"could not open {path}: {e}") from e

    with doc:
        for pno in range(len(doc)):
            try:
                page = doc[pno]
                content = PageContent(
                    number=pno + 1,
                    fragments=_page_fragments(page),
                    annotations=_page_annotations(page),
                )
            except Exception as e:
                raise ExtractionError(f"page {pno + 1}: {e}") from e
            yield content
