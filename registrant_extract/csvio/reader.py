from __future__ import annotations

from pathlib import Path

import pandas as pd

"""CSV export reader.

Headers are used verbatim and every cell is read as a string, so "NA" or
"None" typed by a registrant stays text. Rows whose cells are all blank are
dropped, the same way a spreadsheet export's trailing empty lines are.
"""

__all__ = [
    "ExportParseError",
    "read_export_csv",
    "read_export_frame",
]


class ExportParseError(Exception):
    """Raised when a file cannot be tokenized as CSV."""


def read_export_frame(path: Path, encoding: str = "utf-8-sig") -> pd.DataFrame:
    """Read an export file into a string-typed DataFrame.

    Parameters
    ----------
    path: CSV file path
    encoding: text encoding (the default tolerates a UTF-8 BOM)
    """
    try:
        df = pd.read_csv(
            path,
            dtype=str,
            # a trailing comma must not turn the first column into the index
            index_col=False,
            keep_default_na=False,
            skip_blank_lines=True,
            encoding=encoding,
        )
    except pd.errors.EmptyDataError:
        return pd.DataFrame()
    except (pd.errors.ParserError, UnicodeDecodeError) as e:
        raise ExportParseError(f"{path.name}: {e}") from e
    # Short rows are padded with NaN even with keep_default_na=False
    return df.fillna("")


def read_export_csv(path: Path, encoding: str = "utf-8-sig") -> list[dict[str, str]]:
    """Read an export file into a list of column -> string row maps."""
    df = read_export_frame(path, encoding=encoding)
    if df.empty:
        return []
    blank = df.apply(lambda col: col.str.strip() == "").all(axis=1)
    df = df[~blank]
    return [{str(k): str(v) for k, v in rec.items()} for rec in df.to_dict(orient="records")]
