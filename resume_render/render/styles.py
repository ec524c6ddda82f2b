# resume_render/render/styles.py
from __future__ import annotations
from typing import Dict, Optional, Tuple

# Presentation tags understood by every styler
HEADER = "header"
SUBHEADER_TITLE = "subheader-title"
SUBHEADER_MUTED = "subheader-muted"
BOLD = "bold"
MUTED_ITALIC = "muted-italic"
LINK = "link"
SKILL_LABEL = "skill-label"
PLAIN_COLON = "plain-colon"

STYLE_TAGS = (HEADER, SUBHEADER_TITLE, SUBHEADER_MUTED, BOLD, MUTED_ITALIC, LINK, SKILL_LABEL, PLAIN_COLON)

# SGR open codes per tag; each span is closed with a full reset
_SGR: Dict[str, Tuple[int, ...]] = {
    HEADER: (33, 1, 4),           # yellow bold underline
    SUBHEADER_TITLE: (36, 1, 4),  # cyan bold underline
    SUBHEADER_MUTED: (90,),       # gray
    BOLD: (1,),
    MUTED_ITALIC: (90, 3),        # gray italic
    LINK: (34, 4),                # blue underline
    SKILL_LABEL: (35, 1),         # magenta bold
    PLAIN_COLON: (37,),           # white
}

_ESC = "\u001b"
_BEL = "\u0007"
_RESET = f"{_ESC}[0m"


class PlainStyler:
    """Leaves text untouched; used for --no-color and for tests."""

    def style(self, text: str, tag: Optional[str]) -> str:
        return text

    def hyperlink(self, text: str, url: str) -> str:
        return text


class AnsiStyler(PlainStyler):
    def style(self, text: str, tag: Optional[str]) -> str:
        codes = _SGR.get(tag or "")
        if not codes or not text:
            return text
        opener = f"{_ESC}[{';'.join(str(c) for c in codes)}m"
        # inner spans end with a full reset; re-open this span after each one
        text = text.replace(_RESET, _RESET + opener)
        return f"{opener}{text}{_RESET}"

    def hyperlink(self, text: str, url: str) -> str:
        # OSC 8, understood by most modern terminals
        return f"{_ESC}]8;;{url}{_BEL}{text}{_ESC}]8;;{_BEL}"


def make_styler(color: bool) -> PlainStyler:
    return AnsiStyler() if color else PlainStyler()
