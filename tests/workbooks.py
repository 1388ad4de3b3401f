import io

import pandas as pd


def build_workbook(sheets: dict[str, pd.DataFrame]) -> bytes:
    """Write DataFrames to an in-memory .xlsx, one sheet each, in dict order."""
    buf = io.BytesIO()
    with pd.ExcelWriter(buf, engine="openpyxl") as writer:
        for name, frame in sheets.items():
            frame.to_excel(writer, sheet_name=name, index=False)
    return buf.getvalue()


def names_frame(*names) -> pd.DataFrame:
    return pd.DataFrame({"Name": list(names)})
