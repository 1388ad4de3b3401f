"""
Render teams to a PDF with fpdf2.

The text model (layout_lines) is separate from the PDF writer so the layout can
be checked without decoding PDF streams. Output is byte-identical for the same
teams and creation date.
"""

from dataclasses import dataclass
from datetime import datetime, timezone
from pathlib import Path
from typing import Iterable, Iterator

from fpdf import FPDF
from fpdf.enums import XPos, YPos
from fpdf.errors import FPDFException
from loguru import logger

from team_builder.assigner import Team
from team_builder.errors import RenderError

PDF_MEDIA_TYPE = "application/pdf"
CORE_FONT = "Helvetica"
CUSTOM_FONT = "TeamBuilderBody"
FONT_SIZE = 12
LINE_HEIGHT = 7


@dataclass(frozen=True)
class RenderedDocument:
    content: bytes
    team_count: int
    media_type: str = PDF_MEDIA_TYPE


def _sections(teams: Iterable[Team]) -> Iterator[tuple[str, tuple[str, ...]]]:
    for number, team in enumerate(teams, 1):
        yield f"Team {number}", team.members


def layout_lines(teams: Iterable[Team]) -> list[str]:
    """'Team N' heading, five member lines, blank separator between teams."""
    lines: list[str] = []
    for heading, members in _sections(teams):
        if lines:
            lines.append("")
        lines.append(heading)
        lines.extend(members)
    return lines


def _build_pdf(teams: list[Team], created_at: datetime, font_path: str | Path | None) -> FPDF:
    pdf = FPDF(format="A4")
    pdf.set_creation_date(created_at)
    pdf.set_title("Teams")
    pdf.set_producer("team-builder")
    font, heading_style = CORE_FONT, "B"
    if font_path is not None:
        pdf.add_font(CUSTOM_FONT, fname=str(font_path))
        font, heading_style = CUSTOM_FONT, ""
    pdf.add_page()

    for index, (heading, members) in enumerate(_sections(teams)):
        if index:
            pdf.ln(LINE_HEIGHT)
        pdf.set_font(font, style=heading_style, size=FONT_SIZE)
        pdf.cell(0, LINE_HEIGHT, heading, new_x=XPos.LMARGIN, new_y=YPos.NEXT)
        pdf.set_font(font, size=FONT_SIZE)
        for name in members:
            pdf.cell(0, LINE_HEIGHT, name, new_x=XPos.LMARGIN, new_y=YPos.NEXT)
    return pdf


def render_document(
    teams: Iterable[Team],
    *,
    created_at: datetime | None = None,
    font_path: str | Path | None = None,
) -> RenderedDocument:
    """
    Render teams into a PDF held in memory.
    An empty team list still gives a valid one-page PDF. Raises RenderError if
    fpdf2 cannot encode a name (e.g. non Latin-1 text without `font_path`) or the
    font cannot be loaded.
    """
    teams = list(teams)
    created_at = created_at or datetime.now(timezone.utc)
    try:
        content = bytes(_build_pdf(teams, created_at, font_path).output())
    except (FPDFException, UnicodeEncodeError, OSError) as e:
        raise RenderError(f"Could not render team document: {e}") from e
    logger.info(f"Rendered {len(teams)} team(s) into {len(content)} byte PDF")
    return RenderedDocument(content=content, team_count=len(teams))


def write_pdf(
    teams: Iterable[Team],
    path: str | Path,
    *,
    created_at: datetime | None = None,
    font_path: str | Path | None = None,
) -> Path:
    """Render teams straight to a file at `path`; same bytes as render_document."""
    teams = list(teams)
    created_at = created_at or datetime.now(timezone.utc)
    path = Path(path)
    try:
        _build_pdf(teams, created_at, font_path).output(str(path))
    except (FPDFException, UnicodeEncodeError, OSError) as e:
        raise RenderError(f"Could not write team document to {path}: {e}") from e
    logger.debug(f"Wrote {len(teams)} team(s) to {path}")
    return path
