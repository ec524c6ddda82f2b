# resume_render/postprocess/sectioner.py
from __future__ import annotations
import re
from dataclasses import dataclass, field
from typing import Callable, List, Optional, Tuple

from ..config.settings import RenderConfig
from ..render.presenter import Presenter
from ..render.styles import (
    BOLD, HEADER, MUTED_ITALIC, PLAIN_COLON, SKILL_LABEL, SUBHEADER_MUTED, SUBHEADER_TITLE, PlainStyler,
)
from ..textpipe.formatter import format_line, is_bold_font
from ..textpipe.line_grouper import Line

# ---------- Sections ----------

SECTION_NONE = "none"
SECTION_EDUCATION = "education"
SECTION_EXPERIENCE = "experience"
SECTION_PROJECTS = "projects"
SECTION_SKILLS = "skills"

# a header line starts with one of these
HEADER_KEYWORDS = ("education", "experience", "projects", "skills", "certifications")

# section picked by containment, first hit wins; certifications has no dedicated handling
SECTION_CUES = [
    ("education", SECTION_EDUCATION),
    ("experience", SECTION_EXPERIENCE),
    ("project", SECTION_PROJECTS),
    ("skills", SECTION_SKILLS),
]

SKILL_CATEGORIES = [
    "Programming Languages:",
    "Frameworks/Libraries:",
    "Tools:",
    "Cloud/DevOps:",
    "Technological Concepts:",
    "Soft Skills:",
]

PROJECT_TITLE_RE = re.compile(r"^[A-Z0-9\s\-():]+$")
TECH_STACK_RE = re.compile(r"^[A-Za-z,\s]+$")

EDUCATION_PAIR = 2

# ---------- Text predicates ----------

def header_keyword(text: str) -> Optional[str]:
    t = (text or "").lower()
    for word in HEADER_KEYWORDS:
        if t.startswith(word):
            return word
    return None

def is_section_header(text: str) -> bool:
    return header_keyword(text) is not None

def section_for_header(text: str) -> str:
    t = (text or "").lower()
    for cue, section in SECTION_CUES:
        if cue in t:
            return section
    return SECTION_NONE

def is_project_title(text: str, min_len: int = 5) -> bool:
    return bool(PROJECT_TITLE_RE.match(text or "")) and len(text) > min_len

def is_github_link(text: str) -> bool:
    return "github.com" in (text or "")

def is_tech_stack(text: str, max_len: int = 100) -> bool:
    return bool(TECH_STACK_RE.match(text or "")) and len(text) < max_len

def find_skill_category(text: str) -> Optional[str]:
    for key in SKILL_CATEGORIES:
        if key in (text or ""):
            return key
    return None

def is_verify_line(text: str) -> bool:
    return "verify" in (text or "").lower()

def highlight_skill_key(line: str, styler: PlainStyler) -> str:
    """Re-style the first skill label found in `line`, keeping everything around it."""
    key = find_skill_category(line)
    if key is None:
        return line
    label = styler.style(key.replace(":", ""), SKILL_LABEL) + styler.style(":", PLAIN_COLON)
    return line.replace(key, label, 1)

# ---------- State ----------

@dataclass
class ClassifierState:
    current_section: str = SECTION_NONE
    education_buffer: List[str] = field(default_factory=list)
    last_project_title_index: int = -2

    def reset_page(self, carry_sections: bool = False) -> None:
        self.last_project_title_index = -2
        if not carry_sections:
            self.current_section = SECTION_NONE
            self.education_buffer = []


@dataclass
class LineContext:
    """Everything a rule may look at for one line; rules never mutate it."""
    lines: List[Line]
    index: int
    raw: str
    formatted: str
    state: ClassifierState
    config: RenderConfig

    @property
    def line(self) -> Line:
        return self.lines[self.index]

    @property
    def section(self) -> str:
        return self.state.current_section

    def next_raw(self) -> Optional[str]:
        if self.index + 1 < len(self.lines):
            return self.lines[self.index + 1].raw_text
        return None

# ---------- Line predicates ----------

def in_education(ctx: LineContext) -> bool:
    return ctx.section == SECTION_EDUCATION

def in_experience(ctx: LineContext) -> bool:
    return ctx.section == SECTION_EXPERIENCE

def is_experience_title(ctx: LineContext) -> bool:
    toks = ctx.line.tokens
    return (
        in_experience(ctx)
        and len(toks) == 1
        and is_bold_font(toks[0].font_name)
        and len(ctx.raw) < ctx.config.experience_title_max_len
    )

def is_project_title_line(ctx: LineContext) -> bool:
    return (
        ctx.section == SECTION_PROJECTS
        and is_project_title(ctx.raw, ctx.config.project_title_min_len)
        and ctx.index - ctx.state.last_project_title_index > 1
    )

def is_project_link(ctx: LineContext) -> bool:
    return ctx.section == SECTION_PROJECTS and is_github_link(ctx.raw)

def is_project_tech_stack(ctx: LineContext) -> bool:
    return ctx.section == SECTION_PROJECTS and is_tech_stack(ctx.raw, ctx.config.tech_stack_max_len)

def is_skill_line(ctx: LineContext) -> bool:
    return ctx.section != SECTION_PROJECTS and find_skill_category(ctx.raw) is not None

def is_verify(ctx: LineContext) -> bool:
    return is_verify_line(ctx.raw)

def always(ctx: LineContext) -> bool:
    return True

# ---------- Classifier ----------

Rule = Tuple[Callable[[LineContext], bool], Callable[[LineContext], None]]


class SectionClassifier:
    """
    Walks the ordered lines of each page and turns them into presentation calls.
    One instance per document: state persists between pages as configured.
    """

    def __init__(self, presenter: Presenter, styler: Optional[PlainStyler] = None,
                 config: Optional[RenderConfig] = None):
        self.presenter = presenter
        self.styler = styler or PlainStyler()
        self.config = config or RenderConfig()
        self.state = ClassifierState()
        self.rules: List[Rule] = [
            (in_education, self._education),
            (is_experience_title, self._experience_title),
            (in_experience, self._verbatim),
            (is_project_title_line, self._project_title),
            (is_project_link, self._verbatim),
            (is_project_tech_stack, self._tech_stack),
            (is_skill_line, self._skill),
            (is_verify, self._verbatim),
            (always, self._generic),
        ]

    def format(self, line: Line) -> str:
        return format_line(
            line, self.styler,
            space_gap=self.config.space_gap,
            tab_gap=self.config.tab_gap,
            char_width=self.config.char_width,
        )

    def begin_page(self) -> None:
        self.state.reset_page(self.config.carry_sections)

    def classify_page(self, lines: List[Line]) -> None:
        self.begin_page()
        for i in range(len(lines)):
            self.classify_line(lines, i)

    def classify_line(self, lines: List[Line], index: int) -> None:
        line = lines[index]
        raw = line.raw_text
        if not raw:
            return

        if is_section_header(raw):
            self._header(raw)
            return

        ctx = LineContext(lines=lines, index=index, raw=raw, formatted=self.format(line),
                          state=self.state, config=self.config)
        for predicate, handler in self.rules:
            if predicate(ctx):
                handler(ctx)
                return

    # --- handlers ---

    def _header(self, raw: str) -> None:
        self.state.education_buffer = []
        self.state.current_section = section_for_header(raw)
        self.presenter.emit_blank_line()
        self.presenter.emit(raw.upper(), HEADER)

    def _education(self, ctx: LineContext) -> None:
        buf = self.state.education_buffer
        buf.append(ctx.formatted)
        if len(buf) < EDUCATION_PAIR:
            return
        self.presenter.emit(buf[0].strip(), BOLD)
        self.presenter.emit("\t" + buf[1].strip(), SUBHEADER_MUTED)
        self.presenter.emit_blank_line()
        self.state.education_buffer = []

    def _experience_title(self, ctx: LineContext) -> None:
        self.presenter.emit_blank_line()
        self.presenter.emit(ctx.raw, SUBHEADER_TITLE)

    def _project_title(self, ctx: LineContext) -> None:
        self.presenter.emit_blank_line()
        self.presenter.emit(ctx.formatted, SUBHEADER_TITLE)
        self.state.last_project_title_index = ctx.index

    def _tech_stack(self, ctx: LineContext) -> None:
        self.presenter.emit(ctx.formatted, MUTED_ITALIC)

    def _skill(self, ctx: LineContext) -> None:
        self.presenter.emit(highlight_skill_key(ctx.formatted, self.styler))

    def _verbatim(self, ctx: LineContext) -> None:
        self.presenter.emit(ctx.formatted)

    def _generic(self, ctx: LineContext) -> None:
        self.presenter.emit(ctx.formatted)
        if ctx.section != SECTION_PROJECTS:
            return
        nxt = ctx.next_raw()
        if nxt is not None and is_project_title(nxt, self.config.project_title_min_len):
            self.presenter.emit_blank_line()
