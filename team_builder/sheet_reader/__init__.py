"""
Spreadsheet ingestion: workbook bytes → three name lists.
Also exports a Google Sheet to workbook bytes (credentials.json).
"""

from .config import get_credentials_path
from .reader import Rosters, parse_workbook


# Lazy import so the parser can be used without gspread configured
def __getattr__(name: str):
    if name == "GoogleSheetSource":
        from .gsheet import GoogleSheetSource
        return GoogleSheetSource
    raise AttributeError(f"module {__name__!r} has no attribute {name!r}")


__all__ = ["get_credentials_path", "parse_workbook", "Rosters", "GoogleSheetSource"]
