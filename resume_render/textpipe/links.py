# resume_render/textpipe/links.py
from __future__ import annotations
from dataclasses import dataclass
from typing import Any, Iterable, List, Mapping, Optional, Sequence, Tuple

from .tokens import Token


@dataclass(frozen=True)
class LinkAnnotation:
    rect: Tuple[float, float, float, float]  # x1,y1,x2,y2
    url: str

    def contains(self, x: float, y: float) -> bool:
        x1, y1, x2, y2 = self.rect
        return x1 <= x <= x2 and y1 <= y <= y2


def _norm_rect(rect: Sequence[Any]) -> Optional[Tuple[float, float, float, float]]:
    try:
        x1, y1, x2, y2 = (float(v) for v in rect)
    except (TypeError, ValueError):
        return None
    return (min(x1, x2), min(y1, y2), max(x1, x2), max(y1, y2))


def parse_annotations(raw: Iterable[Mapping[str, Any]]) -> List[LinkAnnotation]:
    """Keep only annotations that carry both a url and a usable 4-value rect."""
    links: List[LinkAnnotation] = []
    for ann in raw or []:
        if not isinstance(ann, Mapping):
            continue
        url, rect = ann.get("url"), ann.get("rect")
        if not url or rect is None:
            continue
        norm = _norm_rect(rect)
        if norm is None:
            continue
        links.append(LinkAnnotation(rect=norm, url=str(url)))
    return links


def find_link(x: float, y: float, links: Iterable[LinkAnnotation]) -> Optional[str]:
    # origin point only, the token's rendered width is unknown
    for link in links:
        if link.contains(x, y):
            return link.url
    return None


def overlay_links(tokens: Iterable[Token], links: Sequence[LinkAnnotation]) -> List[Token]:
    if not links:
        return list(tokens)
    out: List[Token] = []
    for tok in tokens:
        url = find_link(tok.x, tok.y, links)
        out.append(tok.with_link(url) if url else tok)
    return out
