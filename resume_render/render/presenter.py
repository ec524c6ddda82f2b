# resume_render/render/presenter.py
from __future__ import annotations
import sys
from typing import List, Optional, TextIO, Tuple

from .styles import PlainStyler

# (kind, text, tag); kind is "text" or "blank"
Call = Tuple[str, str, Optional[str]]


class Presenter:
    """Sink for classified lines. Subclasses decide how a (text, tag) pair is shown."""

    def emit(self, text: str, tag: Optional[str] = None) -> None:
        raise NotImplementedError

    def emit_blank_line(self) -> None:
        raise NotImplementedError


class TerminalPresenter(Presenter):
    def __init__(self, styler: Optional[PlainStyler] = None, stream: Optional[TextIO] = None):
        self.styler = styler or PlainStyler()
        self.stream = stream if stream is not None else sys.stdout

    def emit(self, text: str, tag: Optional[str] = None) -> None:
        print(self.styler.style(text, tag), file=self.stream)

    def emit_blank_line(self) -> None:
        print("", file=self.stream)


class RecordingPresenter(Presenter):
    def __init__(self):
        self.calls: List[Call] = []

    def emit(self, text: str, tag: Optional[str] = None) -> None:
        self.calls.append(("text", text, tag))

    def emit_blank_line(self) -> None:
        self.calls.append(("blank", "", None))

    def lines(self) -> List[str]:
        return [text for _, text, _ in self.calls]
