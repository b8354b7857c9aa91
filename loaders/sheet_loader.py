"""Pallet tag spreadsheet loader and record mapper."""

import logging
from pathlib import Path
from typing import Any, List, Sequence, Tuple

import pandas as pd

from config import HEADER_LOOKAHEAD, SUPPORTED_EXTENSIONS
from models import Record, SheetData
from utils.helpers import clean_header, is_blank


class SheetReadError(RuntimeError):
    """The input file could not be opened or is not a supported type."""


class SheetParseError(ValueError):
    """The input file was opened but its tabular content is malformed."""


def detect_header_row(rows: Sequence[Sequence[Any]], lookahead: int = HEADER_LOOKAHEAD) -> int:
    """
    Find the header row index.

    The header is the first row within the first ``lookahead`` rows that has
    at least one non-blank cell. Falls back to row 0.

    Args:
        rows: Raw rows as read from the sheet
        lookahead: Number of leading rows to inspect

    Returns:
        Index of the header row
    """
    for i, row in enumerate(rows[:lookahead]):
        if row and any(not is_blank(cell) for cell in row):
            return i
    return 0


def build_records(rows: Sequence[Sequence[Any]], header_index: int) -> Tuple[List[str], List[Record]]:
    """
    Zip the header row with every following non-empty row.

    Blank headers are dropped together with their cells. A row shorter
    than the header reads as "" for the missing cells.

    Args:
        rows: Raw rows as read from the sheet
        header_index: Index of the header row

    Returns:
        Tuple of (cleaned headers, records)
    """
    if not rows:
        return [], []

    headers = [clean_header(h) for h in rows[header_index]]

    records: List[Record] = []
    for row in rows[header_index + 1:]:
        if not row or all(is_blank(cell) for cell in row):
            continue
        record: Record = {}
        for index, header in enumerate(headers):
            if not header:
                continue
            value = row[index] if index < len(row) else ""
            record[header] = "" if value is None else value
        records.append(record)

    return headers, records


class TagSheetLoader:
    """Load a pallet tag spreadsheet (first sheet only) into records."""

    def __init__(self, path):
        """
        Initialize loader.

        Args:
            path: Path to the .xlsx / .csv input file
        """
        self.path = Path(path)
        self.raw_rows: List[List[Any]] = []
        self.headers: List[str] = []
        self.records: List[Record] = []

    def validate_format(self) -> None:
        """
        Check the input file exists and has a supported extension.

        Raises:
            SheetReadError: If the file is missing or of an unsupported type
        """
        suffix = self.path.suffix.lower()
        if suffix not in SUPPORTED_EXTENSIONS:
            raise SheetReadError(
                f"Failed to read file: {self.path.name} is not a supported spreadsheet "
                f"(expected one of {', '.join(SUPPORTED_EXTENSIONS)})"
            )
        if not self.path.is_file():
            raise SheetReadError(f"Failed to read file: {self.path} does not exist")

    def _read_frame(self) -> pd.DataFrame:
        if self.path.suffix.lower() == ".csv":
            tried_encs = ["utf-8", "utf-8-sig", "cp1252", "latin1"]
            last_err = None
            for enc in tried_encs:
                try:
                    return pd.read_csv(self.path, header=None, dtype=object, encoding=enc)
                except UnicodeDecodeError as e:
                    last_err = e
                    continue
            raise last_err
        return pd.read_excel(self.path, sheet_name=0, header=None, dtype=object)

    def read_rows(self) -> List[List[Any]]:
        """
        Read the first sheet as raw rows.

        Empty cells come back as "".

        Raises:
            SheetReadError: If the file cannot be opened
            SheetParseError: If the content cannot be parsed as a table
        """
        try:
            df = self._read_frame()
        except OSError as e:
            raise SheetReadError(f"Failed to read file: {e}") from e
        except pd.errors.EmptyDataError:
            df = pd.DataFrame()
        except Exception as e:
            raise SheetParseError(f"Failed to parse Excel file: {e}") from e

        self.raw_rows = [
            ["" if pd.isna(cell) else cell for cell in row]
            for row in df.itertuples(index=False, name=None)
        ]
        return self.raw_rows

    def run_import(self) -> SheetData:
        """
        Run full import workflow: validate → read → map records.

        Returns:
            SheetData with cleaned headers, records and the raw rows
        """
        self.validate_format()
        rows = self.read_rows()

        header_index = detect_header_row(rows)
        self.headers, self.records = build_records(rows, header_index)

        logging.info(
            "[%s] Header row %d, %d record(s)", self.path.name, header_index, len(self.records)
        )
        logging.debug("Headers: %s", self.headers)
        if self.records:
            logging.debug("First record: %s", self.records[0])

        return SheetData(headers=self.headers, records=self.records, raw_rows=rows)
