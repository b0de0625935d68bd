# Test fixtures
from .sample_records import (
    SAMPLE_INVOICE_BUNDLE,
    SAMPLE_NOTES_TXT,
    SAMPLE_CUSTOMERS_CSV,
    SAMPLE_HTML,
    create_sample_customer,
    create_sample_work_order,
    create_sample_invoice,
)

__all__ = [
    "SAMPLE_INVOICE_BUNDLE",
    "SAMPLE_NOTES_TXT",
    "SAMPLE_CUSTOMERS_CSV",
    "SAMPLE_HTML",
    "create_sample_customer",
    "create_sample_work_order",
    "create_sample_invoice",
]
