"""Parsers turning CSV and Excel files into row records."""

import datetime as dt
import logging
from pathlib import Path
from typing import Literal, Union

import pandas as pd


logger = logging.getLogger(__name__)

# A parsed cell: CSV cells are always strings, Excel cells keep their type
CellValue = Union[str, int, float, bool, None]
RowRecord = dict[str, CellValue]

FileType = Literal["csv", "excel"]

FILE_TYPES: dict[str, FileType] = {
    ".csv":  "csv",
    ".xlsx": "excel",
    ".xls":  "excel",
}


class UnsupportedFileType(ValueError):
    """Raised for files that are neither CSV nor Excel."""



# FILE TYPE DETECTION
# ===================


def DetectFileType(filePath: str) -> FileType:
    """Return the kind of tabular file from its extension (case insensitive)."""

    suffix = Path(filePath).suffix.lower()
    if suffix not in FILE_TYPES:
        raise UnsupportedFileType("Unsupported file type. Only CSV and Excel files are supported.")
    return FILE_TYPES[suffix]


def ParseFile(filePath: str, chunkSize: int = 1000) -> list[RowRecord]:
    """Parse a CSV or Excel file into a list of records, one per data row.
    Any I/O or parsing error aborts the whole operation.
    """

    if DetectFileType(filePath) == "csv":
        return ParseCSV(filePath, chunkSize)
    return ParseExcel(filePath)



# CSV
# ===


def ParseCSV(csvPath: str, chunkSize: int = 1000) -> list[RowRecord]:
    """Read a comma separated file in chunks, keeping all cells as strings.
    The header row defines the record keys. Empty cells are kept as empty strings.
    """

    records: list[RowRecord] = []
    read_kwargs = {
        'header': 0,
        'dtype': str,
        'keep_default_na': False,
        'encoding': "utf-8",
        'delimiter': ",",
        'chunksize': chunkSize,
    }
    try:
        with pd.read_csv(csvPath, **read_kwargs) as reader:
            for chunk in reader:
                records.extend(chunk.to_dict("records"))
    except pd.errors.EmptyDataError:
        logger.info("No data found in CSV file '%s'", csvPath)
        return []

    logger.debug("Parsed %d rows from CSV file '%s'", len(records), csvPath)
    return records



# EXCEL
# =====


def ParseExcel(excelPath: str) -> list[RowRecord]:
    """Read the first sheet of an Excel workbook, using its first row as header."""

    df = pd.read_excel(excelPath, sheet_name=0, header=0)
    df.columns = [str(column) for column in df.columns]

    records = [
        {column: ToCellValue(value) for column, value in row.items()}
        for row in df.to_dict("records")
    ]
    logger.debug("Parsed %d rows from Excel file '%s'", len(records), excelPath)
    return records


def ToCellValue(value) -> CellValue:
    """Convert a pandas/numpy cell to a plain python value.
    Missing cells become None, dates and times become ISO strings.
    """

    if value is None or (not isinstance(value, str) and pd.isna(value)):
        return None
    if isinstance(value, (pd.Timestamp, dt.datetime, dt.date, dt.time)):
        return value.isoformat()
    if isinstance(value, (str, bool, int, float)):
        return value

    # numpy scalars (int64, float64, bool_) expose the python value via item()
    if hasattr(value, "item"):
        return value.item()
    return str(value)
