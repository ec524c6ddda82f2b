# resume_render/pipeline/run_render.py
from __future__ import annotations
import argparse
import sys
from typing import Any, Dict, Iterable, List, Mapping, Optional

from ..config.settings import RenderConfig, load_config
from ..errors import ExtractionError, SourceNotFoundError
from ..postprocess.sectioner import SectionClassifier
from ..render.presenter import Presenter, TerminalPresenter
from ..render.styles import make_styler
from ..textpipe.line_grouper import Line, group_lines
from ..textpipe.links import overlay_links, parse_annotations
from ..textpipe.pdf_source import PageContent, iter_page_content
from ..textpipe.tokens import ingest_fragments


def _debug(msg: str, enabled: bool) -> None:
    if enabled:
        print(f"[debug] {msg}", file=sys.stderr, flush=True)


def build_page_lines(
    fragments: Iterable[Mapping[str, Any]],
    annotations: Iterable[Mapping[str, Any]],
    config: Optional[RenderConfig] = None,
) -> List[Line]:
    """Ingest -> link overlay -> line grouping for one page."""
    config = config or RenderConfig()
    tokens = ingest_fragments(fragments)
    links = parse_annotations(annotations)
    tokens = overlay_links(tokens, links)
    return group_lines(tokens, y_threshold=config.line_y_threshold)


def render_pages(
    pages: Iterable[PageContent],
    presenter: Presenter,
    config: Optional[RenderConfig] = None,
) -> Dict[str, int]:
    """
    Classify pages strictly in order with one classifier for the whole document.
    Returns simple counters for the caller's diagnostics.
    """
    config = config or RenderConfig()
    styler = make_styler(config.color)
    classifier = SectionClassifier(presenter, styler=styler, config=config)

    stats = {"pages": 0, "lines": 0}
    for page in pages:
        lines = build_page_lines(page.fragments, page.annotations, config)
        _debug(f"page={page.number} fragments={len(page.fragments)} "
               f"links={len(page.annotations)} lines={len(lines)}", config.debug)
        classifier.classify_page(lines)
        stats["pages"] += 1
        stats["lines"] += len(lines)
    return stats


def render_pdf(path: str, presenter: Optional[Presenter] = None,
               config: Optional[RenderConfig] = None) -> Dict[str, int]:
    config = config or RenderConfig()
    if presenter is None:
        presenter = TerminalPresenter(make_styler(config.color))
    return render_pages(iter_page_content(path), presenter, config)


def main(argv: Optional[List[str]] = None) -> int:
    config = load_config()

    ap = argparse.ArgumentParser(description="Render a PDF resume as styled, sectioned terminal text")
    ap.add_argument("path", nargs="?", default=config.pdf_path,
                    help="Path to PDF resume (default: $RESUME_PDF_PATH)")
    ap.add_argument("--no-color", action="store_true", help="Disable ANSI styling and hyperlinks")
    ap.add_argument("--debug", action="store_true", help="Print per-page diagnostics to stderr")
    ap.add_argument("--carry-sections", action="store_true",
                    help="Keep the current section open across page breaks")
    args = ap.parse_args(argv)

    if not args.path:
        ap.error("no PDF given (pass PATH or set RESUME_PDF_PATH)")

    config.pdf_path = args.path
    config.color = config.color and not args.no_color
    config.debug = config.debug or args.debug
    config.carry_sections = config.carry_sections or args.carry_sections
    _debug(f"config: {config}", config.debug)

    try:
        stats = render_pdf(args.path, config=config)
    except SourceNotFoundError as e:
        print(f"[error] {e}", file=sys.stderr)
        return 1
    except ExtractionError as e:
        print(f"[error] Error parsing PDF: {e}", file=sys.stderr)
        return 1

    if config.debug:
        print(f"[ok] rendered pages={stats['pages']} lines={stats['lines']}", file=sys.stderr, flush=True)
    return 0


if __name__ == "__main__":
    sys.exit(main())
