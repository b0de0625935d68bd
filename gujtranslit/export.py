"""
Spreadsheet export of shop records with optional Gujarati columns.
"""

import os
from dataclasses import dataclass
from datetime import datetime
from typing import Any, Callable, Iterable, Optional

from .transliteration import transliterate_to_gujarati

GUJARATI_COLUMN_SUFFIX = " (ગુજરાતી)"
MIN_COLUMN_WIDTH = 10


@dataclass
class ExcelColumn:
    """One exported column: a dotted key into each record and its header."""
    key: str
    header: str
    formatter: Optional[Callable[[Any], str]] = None
    transliterate: bool = False


def get_nested_value(record: Any, path: str) -> Any:
    """
    Resolve a dotted key such as "customer.firstName".

    Missing keys at any level give "".
    """
    current = record
    for key in path.split("."):
        if isinstance(current, dict) and current.get(key) is not None:
            current = current[key]
        elif current is not None and not isinstance(current, dict) and getattr(current, key, None) is not None:
            current = getattr(current, key)
        else:
            return ""
    return current


def build_rows(records: Iterable[Any], columns: list[ExcelColumn]) -> tuple[list[str], list[list[Any]]]:
    """Flatten records into a header row and value rows."""
    headers = []
    for col in columns:
        headers.append(col.header)
        if col.transliterate:
            headers.append(col.header + GUJARATI_COLUMN_SUFFIX)

    rows = []
    for record in records:
        row = []
        for col in columns:
            value = get_nested_value(record, col.key)
            if col.formatter:
                value = col.formatter(value)
            row.append(value)
            if col.transliterate:
                row.append(transliterate_to_gujarati(str(value)) if value != "" else "")
        rows.append(row)

    return headers, rows


def export_to_excel(
    records: Iterable[Any],
    columns: list[ExcelColumn],
    filename: str,
    output_dir: Optional[str] = None,
    timestamp: Optional[datetime] = None,
) -> str:
    """
    Write records to a timestamped .xlsx file.

    Args:
        records: Dicts or objects to export.
        columns: Column definitions, in output order.
        filename: Base filename without extension.
        output_dir: Target directory (default: current directory).
        timestamp: Time used in the filename (default: now).

    Returns:
        Path of the written workbook.
    """
    try:
        from openpyxl import Workbook
        from openpyxl.utils import get_column_letter
    except ImportError:
        raise RuntimeError("openpyxl is not installed. Run: pip install openpyxl")

    headers, rows = build_rows(records, columns)

    wb = Workbook()
    ws = wb.active
    ws.title = "Data"
    ws.append(headers)
    for row in rows:
        ws.append(row)

    for index, header in enumerate(headers):
        longest = max((len(str(row[index])) for row in rows), default=0)
        width = max(len(header), longest, MIN_COLUMN_WIDTH)
        ws.column_dimensions[get_column_letter(index + 1)].width = width

    stamp = (timestamp or datetime.now()).strftime("%Y-%m-%dT%H-%M-%S")
    output_dir = output_dir or os.getcwd()
    os.makedirs(output_dir, exist_ok=True)
    out_path = os.path.join(output_dir, f"{filename}_{stamp}.xlsx")
    wb.save(out_path)
    return out_path
