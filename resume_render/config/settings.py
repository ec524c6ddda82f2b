"""
Configuration for resume-render.

Every knob has a default that reproduces the calibrated layout behaviour; the
environment (optionally via a .env file) and then CLI flags override it.
"""
from __future__ import annotations
import os
import sys
from dataclasses import dataclass
from typing import Optional

from dotenv import load_dotenv


@dataclass
class RenderConfig:
    # Layout heuristics, in content units
    line_y_threshold: float = 5.0
    space_gap: float = 5.0
    tab_gap: float = 10.0
    char_width: float = 5.0

    # Classifier thresholds, in characters
    experience_title_max_len: int = 40
    tech_stack_max_len: int = 100
    project_title_min_len: int = 5

    carry_sections: bool = False
    color: bool = True
    debug: bool = False
    pdf_path: Optional[str] = None


def _env_flag(name: str, default: bool) -> bool:
    raw = os.getenv(name)
    if raw is None or not raw.strip():
        return default
    return raw.strip().lower() in {"1", "true", "yes", "on"}


def _color_default() -> bool:
    # https://no-color.org: any non-empty NO_COLOR disables colour; FORCE_COLOR wins for pipes
    if os.getenv("NO_COLOR"):
        return False
    force = os.getenv("FORCE_COLOR")
    if force is not None and force.strip():
        return force.strip() != "0"
    isatty = getattr(sys.stdout, "isatty", None)
    return bool(isatty and isatty())


def load_config(dotenv: bool = True) -> RenderConfig:
    if dotenv:
        load_dotenv()

    return RenderConfig(
        line_y_threshold=float(os.getenv("RESUME_LINE_Y_THRESHOLD", "5")),
        space_gap=float(os.getenv("RESUME_SPACE_GAP", "5")),
        tab_gap=float(os.getenv("RESUME_TAB_GAP", "10")),
        char_width=float(os.getenv("RESUME_CHAR_WIDTH", "5")),
        experience_title_max_len=int(os.getenv("RESUME_EXPERIENCE_TITLE_MAX_LEN", "40")),
        tech_stack_max_len=int(os.getenv("RESUME_TECH_STACK_MAX_LEN", "100")),
        project_title_min_len=int(os.getenv("RESUME_PROJECT_TITLE_MIN_LEN", "5")),
        carry_sections=_env_flag("RESUME_CARRY_SECTIONS", False),
        color=_color_default(),
        debug=_env_flag("RESUME_RENDER_DEBUG", False),
        pdf_path=os.getenv("RESUME_PDF_PATH") or None,
    )
