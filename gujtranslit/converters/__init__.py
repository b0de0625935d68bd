from .text_converter import TextConverter
from .html_converter import HTMLConverter
from .office_converter import OfficeConverter
from .pdf_converter import PDFConverter

__all__ = ["TextConverter", "HTMLConverter", "OfficeConverter", "PDFConverter"]
