# resume_render/textpipe/tokens.py
from __future__ import annotations
from dataclasses import dataclass, replace
from typing import Any, Iterable, List, Mapping, Optional


@dataclass(frozen=True)
class Token:
    text: str
    x: float
    y: float
    font_name: str = ""
    link_url: Optional[str] = None

    def with_link(self, url: Optional[str]) -> "Token":
        return replace(self, link_url=url)


def _coord(transform: Any, idx: int) -> Optional[float]:
    try:
        return float(transform[idx])
    except (TypeError, ValueError, IndexError, KeyError):
        return None


def fragment_to_token(item: Mapping[str, Any]) -> Optional[Token]:
    """
    Turn one raw content fragment into a Token.
    Accepts {"str"|"text", "transform": [a,b,c,d,e,f], "fontName"}; x/y are transform[4]/[5].
    Returns None for empty or malformed fragments.
    """
    if not isinstance(item, Mapping):
        return None
    raw = item.get("str", item.get("text"))
    if not isinstance(raw, str):
        return None
    text = raw.strip()
    if not text:
        return None

    transform = item.get("transform")
    x, y = _coord(transform, 4), _coord(transform, 5)
    if x is None or y is None:
        return None

    font = item.get("fontName") or ""
    return Token(text=text, x=x, y=y, font_name=str(font))


def ingest_fragments(fragments: Iterable[Mapping[str, Any]]) -> List[Token]:
    tokens: List[Token] = []
    for item in fragments or []:
        tok = fragment_to_token(item)
        if tok is not None:
            tokens.append(tok)
    return tokens
