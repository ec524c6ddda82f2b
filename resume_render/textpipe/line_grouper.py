# resume_render/textpipe/line_grouper.py
from __future__ import annotations
from dataclasses import dataclass, field
from typing import Iterable, List, Optional

from .tokens import Token

# Fragments on the same visual row arrive with near-identical y.
LINE_Y_THRESHOLD = 5.0


@dataclass
class Line:
    tokens: List[Token] = field(default_factory=list)

    @property
    def raw_text(self) -> str:
        return " ".join(t.text for t in self.tokens).strip()


def group_lines(tokens: Iterable[Token], y_threshold: float = LINE_Y_THRESHOLD) -> List[Line]:
    """
    Cluster tokens into visual lines in one pass over discovery order.
    A token starts a new line when its y is more than `y_threshold` away from the previous token's y.
    """
    lines: List[Line] = []
    current: List[Token] = []
    last_y: Optional[float] = None

    for tok in tokens:
        if last_y is None or abs(tok.y - last_y) > y_threshold:
            if current:
                lines.append(Line(current))
            current = []
        current.append(tok)
        last_y = tok.y

    if current:
        lines.append(Line(current))
    return lines
