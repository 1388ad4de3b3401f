"""
Document rendering: ordered teams → PDF bytes, one "Team N" section per team.
"""

from .pdf import RenderedDocument, layout_lines, render_document, write_pdf

__all__ = ["layout_lines", "render_document", "write_pdf", "RenderedDocument"]
