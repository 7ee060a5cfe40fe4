import logging
import os

import pandas as pd

from .errors import SourceReadFailure

logger = logging.getLogger(__name__)

CSV_EXTENSIONS = {".csv", ".tsv", ".txt"}
EXCEL_EXTENSIONS = {".xlsx", ".xls"}


def rows_from_frame(df):
    """
    Turn a DataFrame into a list of {header: cell} dicts.

    Every cell becomes a string; missing cells become "".
    """
    df = df.copy()
    df.columns = [str(c) for c in df.columns]
    df = df.fillna("").astype(str)
    return df.to_dict(orient="records")


def read_rows(path, sheet_name=0):
    """Load a CSV or Excel sheet into row dicts keyed by header name."""
    ext = os.path.splitext(str(path))[1].lower()

    try:
        if ext in CSV_EXTENSIONS:
            sep = "\t" if ext == ".tsv" else ","
            df = pd.read_csv(path, sep=sep, dtype=str, keep_default_na=False,
                             skip_blank_lines=True)
        elif ext in EXCEL_EXTENSIONS:
            df = pd.read_excel(path, sheet_name=sheet_name, dtype=str)
        else:
            raise SourceReadFailure(f"Unsupported file type '{ext or path}' (expected .csv or .xlsx)")
    except SourceReadFailure:
        raise
    except Exception as exc:
        raise SourceReadFailure(f"Could not read {path}: {exc}") from exc

    rows = rows_from_frame(df)
    logger.info("Read %d row(s) from %s", len(rows), path)
    return rows
