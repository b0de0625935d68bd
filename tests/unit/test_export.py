"""
Unit tests for spreadsheet export.
"""

import os
from datetime import datetime

from openpyxl import load_workbook

from gujtranslit.export import (
    ExcelColumn,
    build_rows,
    export_to_excel,
    get_nested_value,
)
from gujtranslit.formatting import format_currency_for_excel, format_status


RECORDS = [
    {"orderNumber": "WO-1", "status": "in_progress", "customer": {"firstName": "Amit"}, "cost": "1500"},
    {"orderNumber": "WO-2", "status": "completed", "customer": {"firstName": "raj"}, "cost": None},
    {"orderNumber": "WO-3", "status": "pending", "customer": None, "cost": "abc"},
]

COLUMNS = [
    ExcelColumn("orderNumber", "Order"),
    ExcelColumn("customer.firstName", "Customer", transliterate=True),
    ExcelColumn("status", "Status", formatter=format_status),
    ExcelColumn("cost", "Cost", formatter=format_currency_for_excel),
]


class TestNestedValue:
    def test_dotted_key(self):
        assert get_nested_value(RECORDS[0], "customer.firstName") == "Amit"

    def test_missing_levels(self):
        assert get_nested_value(RECORDS[2], "customer.firstName") == ""
        assert get_nested_value({}, "a.b.c") == ""

    def test_object_attributes(self, sample_customer):
        assert get_nested_value({"customer": sample_customer}, "customer.city") == "Rajkot"


class TestBuildRows:
    def test_gujarati_column_added(self):
        headers, rows = build_rows(RECORDS, COLUMNS)
        assert headers == ["Order", "Customer", "Customer (ગુજરાતી)", "Status", "Cost"]
        assert rows[0] == ["WO-1", "Amit", "અમિત", "In progress", "1500.00"]
        assert rows[1][2] == "રાજ"

    def test_missing_values(self):
        _, rows = build_rows(RECORDS, COLUMNS)
        assert rows[2] == ["WO-3", "", "", "Pending", "0.00"]
        assert rows[1][4] == "0.00"


class TestExportToExcel:
    def test_writes_timestamped_workbook(self, tmp_path):
        path = export_to_excel(
            RECORDS, COLUMNS, "work_orders",
            output_dir=str(tmp_path),
            timestamp=datetime(2025, 1, 15, 9, 5, 30),
        )
        assert os.path.basename(path) == "work_orders_2025-01-15T09-05-30.xlsx"

        wb = load_workbook(path)
        ws = wb["Data"]
        assert ws["A1"].value == "Order"
        assert ws["C1"].value == "Customer (ગુજરાતી)"
        assert ws["C2"].value == "અમિત"
        assert ws.max_row == 4

    def test_column_widths(self, tmp_path):
        path = export_to_excel(RECORDS, COLUMNS, "widths", output_dir=str(tmp_path))
        ws = load_workbook(path)["Data"]
        assert ws.column_dimensions["A"].width == 10
        assert ws.column_dimensions["C"].width == len("Customer (ગુજરાતી)")

    def test_empty_records(self, tmp_path):
        path = export_to_excel([], COLUMNS, "empty", output_dir=str(tmp_path))
        ws = load_workbook(path)["Data"]
        assert ws.max_row == 1
