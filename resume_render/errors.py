# resume_render/errors.py
from __future__ import annotations


class ResumeRenderError(Exception):
    pass


class SourceNotFoundError(ResumeRenderError):
    def __init__(self, path: str):
        super().__init__(f"PDF file not found at: {path}")
        self.path = path


class ExtractionError(ResumeRenderError):
    """The PDF could not be opened or one of its pages could not be read."""
