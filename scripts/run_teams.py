#!/usr/bin/env python3
"""
One-command entry point: workbook → random teams → PDF.
Usage:
  python scripts/run_teams.py roster.xlsx                # save PDF under ./output
  python scripts/run_teams.py roster.xlsx /path/to/out   # save PDF under that directory
The workbook needs at least three sheets, each with a "Name" column.
"""

import random
import sys
from pathlib import Path

ROOT = Path(__file__).resolve().parent.parent
sys.path.insert(0, str(ROOT))


def main():
    if len(sys.argv) < 2:
        print("Usage: python scripts/run_teams.py ROSTER.xlsx [output_dir]")
        print("  ROSTER.xlsx = workbook whose first three sheets have a Name column")
        print("  output_dir  = where to save the PDF (default: TEAM_BUILDER_OUTPUT_DIR or ./output)")
        return 1

    from team_builder.config import load_settings
    from team_builder.errors import TeamBuilderError
    from team_builder.intake import read_upload
    from team_builder.log import setup_logging
    from team_builder.orchestration import run_pipeline, save_document

    try:
        settings = load_settings()
    except ValueError as e:
        print(f"Error: {e}")
        return 1
    setup_logging(settings.log_level)
    output_dir = Path(sys.argv[2]).resolve() if len(sys.argv) > 2 else settings.output_dir

    print(f"Running pipeline: input={sys.argv[1]}, output={output_dir}")
    try:
        raw = read_upload(sys.argv[1], settings.max_upload_bytes)
        result = run_pipeline(raw, rng=random.Random(settings.seed), font_path=settings.font_path)
        pdf_path = save_document(result.document, output_dir)
    except TeamBuilderError as e:
        print(f"Error: {e}")
        return 1

    print(f"\n=== TEAMS ({result.team_count}) ===")
    for i, team in enumerate(result.assignment.teams, 1):
        print(f"  Team {i}: {', '.join(team.members)}")
    print(f"\nPDF: {pdf_path}")
    return 0


if __name__ == "__main__":
    sys.exit(main())
