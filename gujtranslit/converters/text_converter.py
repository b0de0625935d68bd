"""
Plain text and CSV transliteration.

Text files are converted line by line. CSV files are converted cell by
cell so delimiters and quoting survive; numeric cells are left alone.
"""

import csv
import io
import os
import re

from ..transliteration import transliterate_segment

_FENCE = "```"
_NUMERIC_TEXT = re.compile(r"^\s*[+-]?(?:\d[\d,]*(?:\.\d*)?|\.\d+)\s*$")


class TextConverter:
    """Transliterates .txt, .md and .csv files."""

    SUPPORTED_EXTENSIONS = {".txt", ".md", ".csv"}

    @staticmethod
    def can_handle(file_path: str) -> bool:
        _, ext = os.path.splitext(file_path.lower())
        return ext in TextConverter.SUPPORTED_EXTENSIONS

    @staticmethod
    def convert(file_path: str) -> str:
        """Return the transliterated contents of a text file."""
        if not os.path.isfile(file_path):
            raise FileNotFoundError(f"File not found: {file_path}")

        with open(file_path, "r", encoding="utf-8", errors="replace", newline="") as f:
            content = f.read()

        _, ext = os.path.splitext(file_path.lower())
        if ext == ".csv":
            return transliterate_csv(content)
        return transliterate_lines(content, skip_code_fences=(ext == ".md"))


def transliterate_lines(content: str, skip_code_fences: bool = False) -> str:
    """Transliterate each line, keeping line endings and fenced code blocks."""
    out = []
    in_fence = False
    for line in content.splitlines(keepends=True):
        if skip_code_fences and line.lstrip().startswith(_FENCE):
            in_fence = not in_fence
            out.append(line)
        elif in_fence:
            out.append(line)
        else:
            out.append(transliterate_segment(line))
    return "".join(out)


def transliterate_csv(content: str) -> str:
    """Transliterate text cells of CSV content."""
    reader = csv.reader(io.StringIO(content))
    buffer = io.StringIO()
    writer = csv.writer(buffer, lineterminator="\n")
    for row in reader:
        writer.writerow([cell if is_numeric_text(cell) else transliterate_segment(cell) for cell in row])
    return buffer.getvalue()


def is_numeric_text(value: str) -> bool:
    """True for plain digit strings such as "395003", "-12.5" or "1,50,000"."""
    return bool(_NUMERIC_TEXT.match(value))
