"""
Decode an uploaded workbook into the three name lists.
The first three sheets (workbook order, not name) supply primary, secondary
and tertiary; each must carry a "Name" header.
"""

import io
import zipfile
from dataclasses import dataclass, field

import pandas as pd
from loguru import logger
from openpyxl.utils.exceptions import InvalidFileException
from xlrd import XLRDError
from xlrd.compdoc import CompDocError

from team_builder.errors import MalformedInputError, SchemaError

NAME_COLUMN = "Name"
REQUIRED_SHEETS = 3

# What pandas and its engines raise for bytes that are not a usable workbook
UNREADABLE_WORKBOOK = (
    ValueError,
    OSError,
    KeyError,
    zipfile.BadZipFile,
    InvalidFileException,
    XLRDError,
    CompDocError,
)


@dataclass
class Rosters:
    """The three name lists of one workbook, plus how many blank rows each sheet dropped."""
    primary: list[str]
    secondary: list[str]
    tertiary: list[str]
    sheet_names: tuple[str, str, str] = ("", "", "")
    skipped: dict[str, int] = field(default_factory=dict)


def _open_workbook(raw: bytes) -> pd.ExcelFile:
    if not raw:
        raise MalformedInputError("Empty input: expected an .xlsx or .xls workbook")
    try:
        return pd.ExcelFile(io.BytesIO(raw))
    except UNREADABLE_WORKBOOK as e:
        raise MalformedInputError(f"Not a readable spreadsheet: {e}") from e


def _extract_names(frame: pd.DataFrame, sheet: str, name_column: str) -> tuple[list[str], int]:
    if name_column not in frame.columns:
        raise SchemaError(f"Sheet {sheet!r} has no {name_column!r} column")
    names: list[str] = []
    skipped = 0
    for value in frame[name_column].tolist():
        text = "" if pd.isna(value) else str(value).strip()
        if not text:
            skipped += 1
            continue
        names.append(text)
    return names, skipped


def parse_workbook(raw: bytes, *, name_column: str = NAME_COLUMN) -> Rosters:
    """
    Parse workbook bytes into Rosters.
    Raises MalformedInputError for unreadable input or fewer than three sheets,
    SchemaError when one of the first three sheets lacks `name_column`.
    Blank names are skipped, counted per sheet and logged as a warning.
    """
    with _open_workbook(raw) as workbook:
        sheet_names = [str(s) for s in workbook.sheet_names]
        if len(sheet_names) < REQUIRED_SHEETS:
            raise MalformedInputError(
                f"Workbook has {len(sheet_names)} sheet(s); {REQUIRED_SHEETS} are required"
            )
        lists: list[list[str]] = []
        skipped: dict[str, int] = {}
        for sheet in sheet_names[:REQUIRED_SHEETS]:
            try:
                frame = workbook.parse(sheet, dtype=str, keep_default_na=False, na_values=[""])
            except UNREADABLE_WORKBOOK as e:
                raise MalformedInputError(f"Could not read sheet {sheet!r}: {e}") from e
            names, blank = _extract_names(frame, sheet, name_column)
            if blank:
                logger.warning(f"Sheet {sheet!r}: skipped {blank} row(s) with an empty {name_column!r}")
            skipped[sheet] = blank
            lists.append(names)

    logger.info(
        f"Parsed sheets {sheet_names[:REQUIRED_SHEETS]}: "
        f"{len(lists[0])} / {len(lists[1])} / {len(lists[2])} names"
    )
    return Rosters(
        primary=lists[0],
        secondary=lists[1],
        tertiary=lists[2],
        sheet_names=tuple(sheet_names[:REQUIRED_SHEETS]),
        skipped=skipped,
    )
