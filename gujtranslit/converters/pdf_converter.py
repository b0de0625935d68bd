"""
PDF text transliteration.

PDFs cannot be rewritten in place, so the extracted text of each page is
transliterated and returned as plain text with page markers.
"""

import os

from .text_converter import transliterate_lines


class PDFConverter:
    """Extracts and transliterates text from PDF files."""

    SUPPORTED_EXTENSIONS = {".pdf"}

    @staticmethod
    def can_handle(file_path: str) -> bool:
        _, ext = os.path.splitext(file_path.lower())
        return ext in PDFConverter.SUPPORTED_EXTENSIONS

    @staticmethod
    def convert(file_path: str) -> str:
        """
        Extract the text of a PDF and transliterate it.

        Pages without text are skipped. Each kept page is preceded by an
        HTML comment marker with its 1-based page number.
        """
        if not os.path.isfile(file_path):
            raise FileNotFoundError(f"PDF file not found: {file_path}")

        try:
            import fitz  # pymupdf
        except ImportError:
            raise RuntimeError("pymupdf is not installed. Run: pip install pymupdf")

        pages = []
        with fitz.open(file_path) as doc:
            for i, page in enumerate(doc):
                text = page.get_text("text").strip()
                if text:
                    pages.append(f"<!-- Page {i + 1} -->\n\n{transliterate_lines(text)}")

        return "\n\n---\n\n".join(pages) + "\n"
