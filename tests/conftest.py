"""
Pytest configuration and shared fixtures.
"""

import json
import sys
from pathlib import Path

import pytest

# Add the project root to path for imports
sys.path.insert(0, str(Path(__file__).parent.parent))

from gujtranslit.core import DocumentTransliterator
from gujtranslit.i18n import LanguagePreference
from gujtranslit.invoice import BilingualInvoice
from gujtranslit.transliteration import Transliterator

from tests.fixtures import (
    SAMPLE_CUSTOMERS_CSV,
    SAMPLE_HTML,
    SAMPLE_INVOICE_BUNDLE,
    SAMPLE_NOTES_TXT,
    create_sample_customer,
    create_sample_invoice,
    create_sample_work_order,
)


# ============================================================================
# Pytest Hooks
# ============================================================================


def pytest_configure(config):
    """Configure custom markers."""
    config.addinivalue_line("markers", "integration: mark as integration test")


# ============================================================================
# Base Fixtures
# ============================================================================


@pytest.fixture
def engine():
    """Create a transliteration engine with the default tables."""
    return Transliterator()


@pytest.fixture
def document_transliterator(tmp_path):
    """Create a document transliterator writing into a temp directory."""
    return DocumentTransliterator(output_dir=str(tmp_path / "out"))


@pytest.fixture
def preference(tmp_path, monkeypatch):
    """Create a language preference backed by a temp settings file."""
    monkeypatch.delenv(LanguagePreference.LANGUAGE_ENV, raising=False)
    monkeypatch.delenv(LanguagePreference.SETTINGS_ENV, raising=False)
    return LanguagePreference(settings_path=tmp_path / "settings.json")


# ============================================================================
# Record Fixtures
# ============================================================================


@pytest.fixture
def sample_customer():
    return create_sample_customer()


@pytest.fixture
def sample_work_order():
    return create_sample_work_order()


@pytest.fixture
def sample_invoice():
    return create_sample_invoice()


@pytest.fixture
def bilingual_invoice(sample_invoice, sample_customer, sample_work_order):
    """Create a fully-populated bilingual invoice."""
    return BilingualInvoice(sample_invoice, sample_customer, sample_work_order)


# ============================================================================
# Temporary File Fixtures
# ============================================================================


@pytest.fixture
def invoice_bundle_file(tmp_path):
    """Write the sample invoice bundle to a JSON file."""
    file_path = tmp_path / "INV-2025-001.json"
    file_path.write_text(json.dumps(SAMPLE_INVOICE_BUNDLE), encoding="utf-8")
    return file_path


@pytest.fixture
def notes_file(tmp_path):
    file_path = tmp_path / "notes.txt"
    file_path.write_text(SAMPLE_NOTES_TXT, encoding="utf-8")
    return file_path


@pytest.fixture
def csv_file(tmp_path):
    file_path = tmp_path / "customers.csv"
    file_path.write_text(SAMPLE_CUSTOMERS_CSV, encoding="utf-8")
    return file_path


@pytest.fixture
def html_file(tmp_path):
    file_path = tmp_path / "letter.html"
    file_path.write_text(SAMPLE_HTML, encoding="utf-8")
    return file_path


@pytest.fixture
def docx_file(tmp_path):
    """Create a Word document with a paragraph and a table."""
    from docx import Document

    doc = Document()
    doc.add_paragraph("amit patel")
    run_para = doc.add_paragraph()
    run_para.add_run("raj ").bold = True
    run_para.add_run("shah")
    table = doc.add_table(rows=2, cols=2)
    table.cell(0, 0).text = "City"
    table.cell(0, 1).text = "Zip"
    table.cell(1, 0).text = "surat"
    table.cell(1, 1).text = "395003"

    file_path = tmp_path / "letter.docx"
    doc.save(str(file_path))
    return file_path


@pytest.fixture
def xlsx_file(tmp_path):
    """Create a workbook with text, numbers and a formula."""
    from openpyxl import Workbook

    wb = Workbook()
    ws = wb.active
    ws.title = "Customers"
    ws.append(["Name", "Amount"])
    ws.append(["raj", 150])
    ws.append(["surat", 250])
    ws.append(["Total", "=SUM(B2:B3)"])

    file_path = tmp_path / "customers.xlsx"
    wb.save(str(file_path))
    return file_path


@pytest.fixture
def pdf_file(tmp_path):
    """Create a one-page PDF with Latin text."""
    import fitz  # pymupdf

    file_path = tmp_path / "receipt.pdf"
    doc = fitz.open()
    page = doc.new_page()
    page.insert_text((72, 72), "raj patel")
    doc.save(str(file_path))
    doc.close()
    return file_path
