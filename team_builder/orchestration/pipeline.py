"""
End-to-end pipeline: parse workbook → assign teams → render PDF.
"""

import random
import tempfile
import time
from dataclasses import dataclass, field
from datetime import datetime
from pathlib import Path

from loguru import logger

from team_builder.assigner import AssignmentResult, assign_teams
from team_builder.errors import StorageError
from team_builder.renderer import RenderedDocument, write_pdf
from team_builder.sheet_reader import Rosters, parse_workbook

OUTPUT_SUFFIX = "-teams.pdf"
MAX_NAME_ATTEMPTS = 100


@dataclass
class PipelineResult:
    """Result of one pipeline run: the PDF plus what went into it."""
    document: RenderedDocument
    assignment: AssignmentResult
    skipped: dict[str, int] = field(default_factory=dict)

    @property
    def team_count(self) -> int:
        return self.document.team_count


def _log_leftovers(assignment: AssignmentResult, rosters: Rosters) -> None:
    for label, sheet, left in zip(
        ("primary", "secondary", "tertiary"),
        rosters.sheet_names,
        (assignment.leftover_primary, assignment.leftover_secondary, assignment.leftover_tertiary),
    ):
        if left:
            logger.warning(f"{len(left)} {label} name(s) from sheet {sheet!r} not placed in a team")


def run_pipeline(
    raw: bytes,
    *,
    rng: random.Random | None = None,
    created_at: datetime | None = None,
    font_path: str | Path | None = None,
    work_root: str | Path | None = None,
) -> PipelineResult:
    """
    Run the full flow on workbook bytes and return the rendered PDF.
    Stage errors (MalformedInputError, SchemaError, RenderError) propagate unchanged.
    The PDF is written into a temporary directory under `work_root` (system temp by
    default) that is removed whether the run succeeds or fails.
    """
    # 1. Parse
    rosters = parse_workbook(raw)

    # 2. Assign
    assignment = assign_teams(rosters.primary, rosters.secondary, rosters.tertiary, rng=rng)
    logger.info(f"Formed {len(assignment.teams)} team(s)")
    _log_leftovers(assignment, rosters)

    # 3. Render
    with tempfile.TemporaryDirectory(prefix="teams-", dir=work_root) as workdir:
        pdf_path = Path(workdir) / "teams.pdf"
        logger.debug(f"Rendering into {pdf_path}")
        write_pdf(assignment.teams, pdf_path, created_at=created_at, font_path=font_path)
        content = pdf_path.read_bytes()

    document = RenderedDocument(content=content, team_count=len(assignment.teams))
    return PipelineResult(document=document, assignment=assignment, skipped=rosters.skipped)


def save_document(document: RenderedDocument, output_dir: str | Path) -> Path:
    """
    Store the PDF as <epoch-ms>-teams.pdf in `output_dir` and return its path.
    Existing files are never overwritten: a clash in the same millisecond gets a
    -1, -2, ... suffix. Raises StorageError if the directory or file cannot be written.
    """
    out_dir = Path(output_dir)
    stamp = int(time.time() * 1000)
    try:
        out_dir.mkdir(parents=True, exist_ok=True)
        for attempt in range(MAX_NAME_ATTEMPTS):
            suffix = f"-{attempt}" if attempt else ""
            path = out_dir / f"{stamp}{suffix}{OUTPUT_SUFFIX}"
            try:
                with open(path, "xb") as f:
                    f.write(document.content)
            except FileExistsError:
                continue
            logger.info(f"Saved {document.team_count} team(s) to {path}")
            return path
    except OSError as e:
        raise StorageError(f"Could not save PDF to {out_dir}: {e}") from e
    raise StorageError(f"Could not find a free file name in {out_dir} for {stamp}{OUTPUT_SUFFIX}")
