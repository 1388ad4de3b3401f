"""
CLI: full pipeline (workbook → teams → PDF saved to the output directory).
  python -m team_builder.orchestration --input roster.xlsx [--output-dir output] [--seed 42]
  python -m team_builder.orchestration --sheet <URL_OR_KEY> [--credentials PATH]
"""

import argparse
import json
import random
from pathlib import Path

from team_builder.config import load_settings
from team_builder.errors import TeamBuilderError
from team_builder.intake import read_upload
from team_builder.log import setup_logging
from team_builder.sheet_reader.config import get_credentials_path

from .pipeline import run_pipeline, save_document


def main() -> None:
    ap = argparse.ArgumentParser(
        description="Team builder: read three Name sheets → random teams of 3+1+1 → PDF"
    )
    source = ap.add_mutually_exclusive_group(required=True)
    source.add_argument("--input", "-i", type=Path, help="Local .xlsx/.xls workbook")
    source.add_argument("--sheet", "-s", help="Google Sheet URL or key")
    ap.add_argument("--credentials", "-c", help="Path to credentials.json")
    ap.add_argument("--output-dir", "-o", type=Path, help="Where to save the PDF (default: ./output)")
    ap.add_argument("--seed", type=int, help="Seed for reproducible teams")
    ap.add_argument("--font", type=Path, help="TrueType font for names outside Latin-1")
    ap.add_argument("--json", action="store_true", help="Output result as JSON")
    args = ap.parse_args()

    try:
        settings = load_settings()
    except ValueError as e:
        print(f"Error: {e}")
        raise SystemExit(1)
    setup_logging(settings.log_level)
    seed = args.seed if args.seed is not None else settings.seed
    output_dir = args.output_dir or settings.output_dir
    font_path = args.font or settings.font_path

    try:
        if args.input:
            raw = read_upload(args.input, settings.max_upload_bytes)
        else:
            from team_builder.sheet_reader.gsheet import GoogleSheetSource

            creds = Path(args.credentials) if args.credentials else get_credentials_path()
            raw = GoogleSheetSource(credentials_path=creds).fetch_workbook(args.sheet)
        result = run_pipeline(raw, rng=random.Random(seed), font_path=font_path)
        pdf_path = save_document(result.document, output_dir)
    except (TeamBuilderError, FileNotFoundError) as e:
        if args.json:
            print(json.dumps({"error": str(e), "error_type": type(e).__name__}, indent=2))
        else:
            print(f"Error: {e}")
        raise SystemExit(1)

    if args.json:
        out = {
            "pdf_path": str(pdf_path),
            "team_count": result.team_count,
            "teams": [list(team.members) for team in result.assignment.teams],
            "leftovers": result.assignment.leftovers,
            "skipped": result.skipped,
        }
        print(json.dumps(out, indent=2))
        return

    print(f"Teams: {result.team_count}")
    for i, team in enumerate(result.assignment.teams, 1):
        print(f"  Team {i}: {', '.join(team.members)}")
    if result.assignment.leftovers:
        print(f"Not placed: {', '.join(result.assignment.leftovers)}")
    print(f"PDF: {pdf_path}")


if __name__ == "__main__":
    main()
