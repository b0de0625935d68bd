"""
Office document transliteration.

Word (.docx) documents are rewritten run by run so bold, italics and
styles survive. Excel (.xlsx) workbooks have their text cells rewritten;
numbers, dates and formulas are left alone.
"""

import os
from typing import Optional

from ..transliteration import transliterate_segment
from .text_converter import is_numeric_text


class OfficeConverter:
    """Transliterates Office documents (.docx, .xlsx)."""

    SUPPORTED_EXTENSIONS = {".docx", ".xlsx"}

    @staticmethod
    def can_handle(file_path: str) -> bool:
        _, ext = os.path.splitext(file_path.lower())
        return ext in OfficeConverter.SUPPORTED_EXTENSIONS

    @staticmethod
    def convert(file_path: str, output_path: Optional[str] = None) -> str:
        """
        Transliterate a Word or Excel file.

        Args:
            file_path: Source document.
            output_path: Where to save the transliterated copy. When None,
                nothing is written.

        Returns:
            The transliterated text content, for previews and stdout.
        """
        if not os.path.isfile(file_path):
            raise FileNotFoundError(f"File not found: {file_path}")

        _, ext = os.path.splitext(file_path.lower())

        if ext == ".docx":
            return _convert_docx(file_path, output_path)
        elif ext == ".xlsx":
            return _convert_xlsx(file_path, output_path)
        else:
            raise ValueError(f"Unsupported Office format: {ext}")


def _convert_docx(file_path: str, output_path: Optional[str]) -> str:
    """Transliterate the paragraphs and tables of a Word document."""
    try:
        from docx import Document
    except ImportError:
        raise RuntimeError("python-docx is not installed. Run: pip install python-docx")

    doc = Document(file_path)
    lines = []

    for para in doc.paragraphs:
        lines.append(_transliterate_paragraph(para))

    for table in doc.tables:
        lines.append("")
        lines.append(_table_to_text(table))

    if output_path:
        doc.save(output_path)

    return "\n".join(lines).strip() + "\n"


def _transliterate_paragraph(para) -> str:
    """Rewrite each run in place and return the paragraph's new text."""
    for run in para.runs:
        if run.text:
            run.text = transliterate_segment(run.text)
    return para.text


def _table_to_text(table) -> str:
    """Transliterate a docx table and render it as a Markdown table."""
    rows = []
    seen = []
    for row in table.rows:
        cells = []
        for cell in row.cells:
            # Merged cells repeat the same underlying element
            if not any(cell._tc is tc for tc in seen):
                seen.append(cell._tc)
                for para in cell.paragraphs:
                    _transliterate_paragraph(para)
            cells.append(cell.text.strip().replace("\n", " "))
        rows.append(cells)

    if not rows:
        return ""

    col_count = max(len(r) for r in rows)
    for r in rows:
        while len(r) < col_count:
            r.append("")

    md = "| " + " | ".join(rows[0]) + " |\n"
    md += "| " + " | ".join(["---"] * col_count) + " |\n"
    for row in rows[1:]:
        md += "| " + " | ".join(row) + " |\n"

    return md


def _convert_xlsx(file_path: str, output_path: Optional[str]) -> str:
    """Transliterate text cells of every sheet in a workbook."""
    try:
        from openpyxl import load_workbook
    except ImportError:
        raise RuntimeError("openpyxl is not installed. Run: pip install openpyxl")

    wb = load_workbook(file_path)
    sections = []

    for ws in wb.worksheets:
        data_rows = []
        for row in ws.iter_rows():
            values = []
            for cell in row:
                value = cell.value
                if isinstance(value, str) and not value.startswith("=") and not is_numeric_text(value):
                    value = transliterate_segment(value)
                    cell.value = value
                values.append("" if value is None else str(value))
            if any(values):
                data_rows.append(values)

        if not data_rows:
            sections.append(f"## {ws.title}\n\n[Empty sheet]\n")
            continue

        header_row = data_rows[0]
        section = f"## {ws.title}\n\n"
        section += "| " + " | ".join(header_row) + " |\n"
        section += "| " + " | ".join(["---"] * len(header_row)) + " |\n"
        for row in data_rows[1:]:
            padded = row + [""] * (len(header_row) - len(row))
            section += "| " + " | ".join(padded[:len(header_row)]) + " |\n"
        sections.append(section)

    if output_path:
        wb.save(output_path)
    wb.close()

    return "\n".join(sections).strip() + "\n"
