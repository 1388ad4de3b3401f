"""
Fetch a Google Sheet as .xlsx bytes so it can go through the same parser as an upload.
Uses credentials.json (service account) for authentication.
"""

from pathlib import Path

import gspread
from gspread.utils import ExportFormat
from loguru import logger

from .config import get_credentials_path


class GoogleSheetSource:
    """
    Exports a whole spreadsheet (every worksheet, in order) as an Excel workbook.
    The sheet must be shared with the service account email from credentials.json.
    """

    def __init__(
        self,
        credentials_path: str | Path | None = None,
        project_root: str | Path | None = None,
    ):
        if credentials_path is None:
            credentials_path = get_credentials_path(project_root)
        self.credentials_path = Path(credentials_path)
        self._client: gspread.Client | None = None

    def _get_client(self) -> gspread.Client:
        if self._client is None:
            if not self.credentials_path.is_file():
                raise FileNotFoundError(
                    f"Credentials not found: {self.credentials_path}. "
                    "Place credentials.json in project root or set GOOGLE_APPLICATION_CREDENTIALS."
                )
            self._client = gspread.service_account(
                filename=str(self.credentials_path),
                scopes=gspread.auth.READONLY_SCOPES,
            )
        return self._client

    def open_spreadsheet(self, sheet_key_or_url: str) -> gspread.Spreadsheet:
        """Open a spreadsheet by key (from URL) or full URL."""
        client = self._get_client()
        if sheet_key_or_url.startswith("http"):
            return client.open_by_url(sheet_key_or_url)
        return client.open_by_key(sheet_key_or_url)

    def fetch_workbook(self, sheet_key_or_url: str) -> bytes:
        """Return the spreadsheet exported as .xlsx bytes."""
        spreadsheet = self.open_spreadsheet(sheet_key_or_url)
        content = spreadsheet.export(format=ExportFormat.EXCEL)
        logger.info(f"Exported Google Sheet {spreadsheet.title!r} ({len(content)} bytes)")
        return content
