"""
Document transliteration engine.

Detects the type of each input file and routes it to the matching
converter, then saves a Gujarati copy next to the other outputs.
Supports single files and whole directories.
"""

import os
import re
import sys
from datetime import datetime, timezone

from .converters.html_converter import HTMLConverter
from .converters.office_converter import OfficeConverter
from .converters.pdf_converter import PDFConverter
from .converters.text_converter import TextConverter, transliterate_lines

OUTPUT_MARKER = ".gu"
_EXTENSION = re.compile(r"\.[A-Za-z0-9]+$")


class ConversionError(ValueError):
    """Raised when a source cannot be transliterated."""
    pass


class DocumentTransliterator:
    """
    Batch transliterator for documents.

    Accepts a file or directory path and writes transliterated copies to
    the output directory.
    """

    def __init__(self, output_dir: str = None):
        self.output_dir = output_dir or os.path.join(os.getcwd(), "gujtranslit_output")

    def convert(self, source: str, save: bool = True) -> str:
        """
        Transliterate a file, every supported file in a directory, or
        literal text.

        Sources that do not look like a path (no separator, no extension)
        are treated as text and never saved.

        Args:
            source: File path, directory path or text
            save: If True, write the transliterated copy to output_dir

        Returns:
            The transliterated text

        Raises:
            FileNotFoundError: If a path-like source does not exist.
            ConversionError: If the file type is not supported.
        """
        source = source.strip()

        if os.path.isdir(source):
            print(f"[DIR] Transliterating all supported files in: {source}")
            return self.convert_directory(source, save=save)

        if not os.path.isfile(source):
            if not _looks_like_path(source):
                print("[TEXT] Transliterating literal text")
                return transliterate_lines(source)
            raise FileNotFoundError(f"Source not found: {source}")

        return self._convert_file(source, save=save)

    def convert_directory(self, dir_path: str, save: bool = True) -> str:
        """Transliterate all supported files in a directory."""
        results = []
        converted_count = 0
        error_count = 0

        for filename in sorted(os.listdir(dir_path)):
            file_path = os.path.join(dir_path, filename)
            if not os.path.isfile(file_path) or not self.can_handle(file_path):
                continue
            # Skip outputs of an earlier run written into the same directory
            if OUTPUT_MARKER + "." in filename:
                continue

            try:
                results.append(self._convert_file(file_path, save=save))
                converted_count += 1
            except Exception as e:
                print(f"[ERROR] Failed to transliterate {filename}: {e}", file=sys.stderr)
                error_count += 1

        summary = (
            f"<!-- batch: {dir_path} | files: {converted_count} | errors: {error_count} "
            f"| {datetime.now(timezone.utc).isoformat()} -->\n\n"
        )
        return summary + "\n\n---\n\n".join(results)

    @staticmethod
    def can_handle(file_path: str) -> bool:
        return any(
            converter.can_handle(file_path)
            for converter in (TextConverter, HTMLConverter, OfficeConverter, PDFConverter)
        )

    def _convert_file(self, file_path: str, save: bool) -> str:
        """Route a file to the appropriate converter."""
        out_path = os.path.join(self.output_dir, output_name(file_path)) if save else None
        if out_path:
            os.makedirs(self.output_dir, exist_ok=True)

        if OfficeConverter.can_handle(file_path):
            ext = os.path.splitext(file_path)[1].lower()
            print(f"[{ext.upper().lstrip('.')}] Transliterating: {file_path}")
            text = OfficeConverter.convert(file_path, out_path)
        else:
            if PDFConverter.can_handle(file_path):
                print(f"[PDF] Transliterating: {file_path}")
                text = PDFConverter.convert(file_path)
            elif HTMLConverter.can_handle(file_path):
                print(f"[HTML] Transliterating: {file_path}")
                text = HTMLConverter.convert(file_path)
            elif TextConverter.can_handle(file_path):
                print(f"[TXT] Transliterating: {file_path}")
                text = TextConverter.convert(file_path)
            else:
                raise ConversionError(
                    f"Unsupported file type: {file_path}\n"
                    f"Supported: {', '.join(sorted(_all_extensions()))}"
                )
            if out_path:
                with open(out_path, "w", encoding="utf-8", newline="") as f:
                    f.write(text)

        if out_path:
            print(f"[SAVED] {out_path}")
        return text

    @staticmethod
    def supported_formats() -> dict:
        """Return a dictionary of all supported formats."""
        return {
            "Plain Text": sorted(TextConverter.SUPPORTED_EXTENSIONS),
            "HTML": sorted(HTMLConverter.SUPPORTED_EXTENSIONS),
            "Office Documents": sorted(OfficeConverter.SUPPORTED_EXTENSIONS),
            "PDF (text output)": sorted(PDFConverter.SUPPORTED_EXTENSIONS),
        }


def _looks_like_path(source: str) -> bool:
    return os.sep in source or "/" in source or bool(_EXTENSION.search(source))


def _all_extensions() -> set:
    return (
        TextConverter.SUPPORTED_EXTENSIONS
        | HTMLConverter.SUPPORTED_EXTENSIONS
        | OfficeConverter.SUPPORTED_EXTENSIONS
        | PDFConverter.SUPPORTED_EXTENSIONS
    )


def output_name(file_path: str) -> str:
    """
    Name of the transliterated copy: customers.xlsx -> customers.gu.xlsx.

    PDFs produce text, so report.pdf -> report.gu.txt.
    """
    basename = os.path.basename(file_path)
    name, ext = os.path.splitext(basename)
    safe_name = "".join(c if c.isalnum() or c in "-_ " else "_" for c in name)
    if ext.lower() in PDFConverter.SUPPORTED_EXTENSIONS:
        ext = ".txt"
    return f"{safe_name}{OUTPUT_MARKER}{ext.lower()}"
