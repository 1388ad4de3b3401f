"""
CLI: print the three name lists parsed from a workbook.
  python -m team_builder.sheet_reader --input roster.xlsx [--json]
  python -m team_builder.sheet_reader --sheet <URL_OR_KEY> [--credentials PATH] [--json]
"""

import argparse
import json
from pathlib import Path

from team_builder.config import load_settings
from team_builder.errors import TeamBuilderError
from team_builder.intake import read_upload
from team_builder.log import setup_logging

from .config import get_credentials_path
from .reader import parse_workbook


def main() -> None:
    ap = argparse.ArgumentParser(description="Parse the three Name lists from a workbook")
    source = ap.add_mutually_exclusive_group(required=True)
    source.add_argument("--input", "-i", type=Path, help="Local .xlsx/.xls file")
    source.add_argument("--sheet", "-s", help="Google Sheet URL or key")
    ap.add_argument("--credentials", "-c", help="Path to credentials.json (default: project root)")
    ap.add_argument("--json", action="store_true", help="Output as JSON")
    args = ap.parse_args()

    try:
        settings = load_settings()
    except ValueError as e:
        print(f"Error: {e}")
        raise SystemExit(1)
    setup_logging(settings.log_level)

    try:
        if args.input:
            raw = read_upload(args.input, settings.max_upload_bytes)
        else:
            from .gsheet import GoogleSheetSource

            creds_path = Path(args.credentials) if args.credentials else get_credentials_path()
            raw = GoogleSheetSource(credentials_path=creds_path).fetch_workbook(args.sheet)
        rosters = parse_workbook(raw)
    except (TeamBuilderError, FileNotFoundError) as e:
        print(f"Error: {e}")
        raise SystemExit(1)

    lists = {
        "primary": rosters.primary,
        "secondary": rosters.secondary,
        "tertiary": rosters.tertiary,
    }
    if args.json:
        out = {
            "sheets": list(rosters.sheet_names),
            **lists,
            "skipped": rosters.skipped,
        }
        print(json.dumps(out, indent=2))
        return

    for (label, names), sheet in zip(lists.items(), rosters.sheet_names):
        skipped = rosters.skipped.get(sheet, 0)
        suffix = f", {skipped} blank skipped" if skipped else ""
        print(f"{label} ({sheet}): {len(names)} names{suffix}")
        for name in names:
            print(f"  {name}")


if __name__ == "__main__":
    main()
