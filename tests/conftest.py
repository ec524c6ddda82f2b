import pytest

from resume_render.config.settings import RenderConfig
from resume_render.postprocess.sectioner import SectionClassifier
from resume_render.render.presenter import RecordingPresenter
from resume_render.textpipe.line_grouper import Line
from resume_render.textpipe.tokens import Token


def make_line(*parts, font="Helvetica"):
    """parts: plain strings (laid out left to right, 1 line) or Token objects."""
    toks = []
    x = 0.0
    for p in parts:
        if isinstance(p, Token):
            toks.append(p)
            continue
        toks.append(Token(text=p, x=x, y=100.0, font_name=font))
        x += len(p) * 5 + 6
    return Line(toks)


def frag(text, x, y, font="Helvetica"):
    return {"str": text, "transform": [10, 0, 0, 10, x, y], "fontName": font}


@pytest.fixture
def recorder():
    return RecordingPresenter()


@pytest.fixture
def classifier(recorder):
    return SectionClassifier(recorder, config=RenderConfig(color=False))
