# resume_render/textpipe/formatter.py
from __future__ import annotations
import re
from typing import Optional

from .line_grouper import Line
from ..render.styles import BOLD, LINK, PlainStyler

_BOLD_FONT_RE = re.compile(r"Bold|Medium|Semibold|Heavy", re.I)

# Gap heuristics in content units; no glyph metrics are available from the source
SPACE_GAP = 5.0
TAB_GAP = 10.0
CHAR_WIDTH = 5.0


def is_bold_font(font_name: Optional[str]) -> bool:
    return bool(_BOLD_FONT_RE.search(font_name or ""))


def format_line(
    line: Line,
    styler: Optional[PlainStyler] = None,
    space_gap: float = SPACE_GAP,
    tab_gap: float = TAB_GAP,
    char_width: float = CHAR_WIDTH,
) -> str:
    """
    Render a line's tokens left-to-right, re-inserting spacing from x gaps:
    gap > tab_gap -> tab, gap > space_gap -> space, otherwise glued.
    The next gap is measured from x + len(text) * char_width.
    """
    styler = styler or PlainStyler()
    out = ""
    last_x = 0.0

    for tok in sorted(line.tokens, key=lambda t: t.x):
        gap = tok.x - last_x
        if gap > tab_gap:
            out += "\t"
        elif gap > space_gap:
            out += " "

        text = tok.text
        if tok.link_url:
            text = styler.hyperlink(styler.style(text, LINK), tok.link_url)
        if is_bold_font(tok.font_name):
            text = styler.style(text, BOLD)
        out += text
        last_x = tok.x + len(tok.text) * char_width

    return out.strip()
