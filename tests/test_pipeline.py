from resume_render.config.settings import RenderConfig
from resume_render.pipeline.run_render import build_page_lines, render_pages
from resume_render.render.presenter import RecordingPresenter
from resume_render.textpipe.pdf_source import PageContent

from conftest import frag


def test_build_page_lines_groups_and_links():
    frags = [
        frag("Jane", 50, 700, "Helvetica-Bold"), frag("Doe", 76, 701, "Helvetica-Bold"),
        frag("   ", 10, 690),
        frag("github.com/jane", 50, 680),
    ]
    anns = [{"url": "https://github.com/jane", "rect": [45, 675, 200, 690]}, {"url": "https://broken"}]
    lines = build_page_lines(frags, anns)
    assert [l.raw_text for l in lines] == ["Jane Doe", "github.com/jane"]
    assert lines[1].tokens[0].link_url == "https://github.com/jane"
    assert all(t.link_url is None for t in lines[0].tokens)


def test_render_pages_end_to_end():
    page1 = PageContent(number=1, fragments=[
        frag("EXPERIENCE", 50, 700, "Helvetica-Bold"),
        frag("Senior Engineer", 50, 680, "Helvetica-Bold"),
        frag("Built", 50, 660), frag("APIs", 82, 660),
        frag("PROJECTS", 50, 620, "Helvetica-Bold"),
        frag("MY COOL PROJECT", 50, 600),
        frag("Go, Rust", 50, 585),
    ])
    page2 = PageContent(number=2, fragments=[
        frag("Skills", 50, 700, "Helvetica-Bold"),
        frag("Tools:", 50, 680), frag("Docker", 90, 680),
    ])
    rec = RecordingPresenter()
    stats = render_pages([page1, page2], rec, RenderConfig(color=False))

    assert stats == {"pages": 2, "lines": 8}
    assert rec.calls == [
        ("blank", "", None), ("text", "EXPERIENCE", "header"),
        ("blank", "", None), ("text", "Senior Engineer", "subheader-title"),
        ("text", "Built APIs", None),
        ("blank", "", None), ("text", "PROJECTS", "header"),
        ("blank", "", None), ("text", "MY COOL PROJECT", "subheader-title"),
        ("text", "Go, Rust", "muted-italic"),
        ("blank", "", None), ("text", "SKILLS", "header"),
        ("text", "Tools: Docker", None),
    ]


def test_render_pages_debug_goes_to_stderr(capsys):
    rec = RecordingPresenter()
    render_pages([PageContent(number=1, fragments=[frag("Hello", 0, 0)])], rec,
                 RenderConfig(color=False, debug=True))
    captured = capsys.readouterr()
    assert captured.out == ""
    assert "[debug] page=1 fragments=1 links=0 lines=1" in captured.err
    assert rec.lines() == ["Hello"]
