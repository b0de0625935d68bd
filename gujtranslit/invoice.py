"""
Bilingual (English + Gujarati) invoice rendering.

Customer-entered text (names, addresses, problem descriptions) is shown
as typed and again transliterated to Gujarati underneath. Fixed labels
carry both languages side by side.
"""

import html
import json
from dataclasses import dataclass
from datetime import date, datetime
from decimal import Decimal
from enum import Enum
from pathlib import Path
from typing import Optional, Union

from .formatting import (
    INDIA_GST_RATE,
    format_currency,
    format_invoice_date,
    to_date,
    to_decimal,
)
from .i18n import Language, status_label
from .transliteration import transliterate_to_gujarati


class InvoiceDataError(ValueError):
    """Raised when invoice input data is missing or malformed."""
    pass


class PaymentStatus(Enum):
    PENDING = "pending"
    PAID = "paid"
    OVERDUE = "overdue"
    CANCELLED = "cancelled"


class WorkOrderStatus(Enum):
    PENDING = "pending"
    IN_PROGRESS = "in_progress"
    COMPLETED = "completed"
    CANCELLED = "cancelled"
    ON_HOLD = "on_hold"


PAYMENT_LABELS = {
    PaymentStatus.PAID: "Paid / ચૂકવ્યું",
    PaymentStatus.OVERDUE: "Overdue / મુદત વીતેલ",
}
DEFAULT_PAYMENT_LABEL = "Pending / બાકી"


def _require(data: dict, key: str, record: str):
    value = data.get(key)
    if value is None or value == "":
        raise InvoiceDataError(f"{record} is missing required field '{key}'")
    return value


def _optional_date(value) -> Optional[date]:
    if value in (None, ""):
        return None
    return to_date(value)


@dataclass
class Customer:
    """A shop customer as shown on the invoice."""
    first_name: str
    last_name: str
    phone: str
    email: Optional[str] = None
    address: Optional[str] = None
    city: Optional[str] = None
    state: Optional[str] = None
    zip_code: Optional[str] = None

    def __post_init__(self):
        if not self.first_name or not self.last_name:
            raise ValueError("Customer first and last name are required")
        if not self.phone:
            raise ValueError("Customer phone is required")

    @property
    def full_name(self) -> str:
        return f"{self.first_name} {self.last_name}"

    @classmethod
    def from_dict(cls, data: dict) -> "Customer":
        """Build a customer from API-style camelCase JSON."""
        return cls(
            first_name=_require(data, "firstName", "Customer"),
            last_name=_require(data, "lastName", "Customer"),
            phone=_require(data, "phone", "Customer"),
            email=data.get("email"),
            address=data.get("address"),
            city=data.get("city"),
            state=data.get("state"),
            zip_code=data.get("zipCode"),
        )


@dataclass
class WorkOrder:
    """A repair job linked to an invoice."""
    order_number: str
    problem_description: str
    status: WorkOrderStatus = WorkOrderStatus.PENDING
    due_date: Optional[date] = None

    def __post_init__(self):
        if not self.order_number:
            raise ValueError("Work order number is required")
        if isinstance(self.status, str):
            self.status = WorkOrderStatus(self.status)

    @classmethod
    def from_dict(cls, data: dict) -> "WorkOrder":
        try:
            status = WorkOrderStatus(data.get("status") or "pending")
        except ValueError:
            raise InvoiceDataError(f"Unknown work order status: {data.get('status')}")
        return cls(
            order_number=_require(data, "orderNumber", "Work order"),
            problem_description=data.get("problemDescription") or "",
            status=status,
            due_date=_optional_date(data.get("dueDate")),
        )


@dataclass
class Invoice:
    """
    Billing record for a sale or a completed repair.

    Amounts are Decimal rupees; tax_rate is a fraction (0.18 for 18% GST).
    """
    invoice_number: str
    subtotal: Decimal
    tax_amount: Decimal
    total: Decimal
    created_at: datetime
    tax_rate: Decimal = INDIA_GST_RATE
    payment_status: PaymentStatus = PaymentStatus.PENDING
    due_date: Optional[date] = None
    notes: Optional[str] = None

    def __post_init__(self):
        if not self.invoice_number:
            raise ValueError("Invoice number is required")
        self.subtotal = to_decimal(self.subtotal)
        self.tax_amount = to_decimal(self.tax_amount)
        self.total = to_decimal(self.total)
        self.tax_rate = to_decimal(self.tax_rate)
        for name in ("subtotal", "tax_amount", "total"):
            if getattr(self, name) < 0:
                raise ValueError(f"Invoice {name} cannot be negative, got {getattr(self, name)}")
        if not 0 <= self.tax_rate <= 1:
            raise ValueError(f"Tax rate must be between 0 and 1, got {self.tax_rate}")
        if isinstance(self.payment_status, str):
            self.payment_status = PaymentStatus(self.payment_status)

    @classmethod
    def from_subtotal(
        cls,
        invoice_number: str,
        subtotal,
        created_at: datetime,
        tax_rate=INDIA_GST_RATE,
        **kwargs,
    ) -> "Invoice":
        """Create an invoice, computing tax and total from the subtotal."""
        subtotal = to_decimal(subtotal)
        tax_rate = to_decimal(tax_rate)
        tax_amount = (subtotal * tax_rate).quantize(Decimal("0.01"))
        return cls(
            invoice_number=invoice_number,
            subtotal=subtotal,
            tax_amount=tax_amount,
            total=subtotal + tax_amount,
            created_at=created_at,
            tax_rate=tax_rate,
            **kwargs,
        )

    @property
    def tax_percent(self) -> str:
        return f"{(self.tax_rate * 100).quantize(Decimal('0.01'))}%"

    @property
    def payment_label(self) -> str:
        return PAYMENT_LABELS.get(self.payment_status, DEFAULT_PAYMENT_LABEL)

    @classmethod
    def from_dict(cls, data: dict) -> "Invoice":
        try:
            payment_status = PaymentStatus(data.get("paymentStatus") or "pending")
        except ValueError:
            raise InvoiceDataError(f"Unknown payment status: {data.get('paymentStatus')}")
        try:
            created_at = data.get("createdAt") or datetime.now()
            if not isinstance(created_at, datetime):
                created_at = datetime.combine(to_date(created_at), datetime.min.time())
            return cls(
                invoice_number=_require(data, "invoiceNumber", "Invoice"),
                subtotal=_require(data, "subtotal", "Invoice"),
                tax_amount=_require(data, "taxAmount", "Invoice"),
                total=_require(data, "total", "Invoice"),
                created_at=created_at,
                tax_rate=INDIA_GST_RATE if data.get("taxRate") in (None, "") else data["taxRate"],
                payment_status=payment_status,
                due_date=_optional_date(data.get("dueDate")),
                notes=data.get("notes"),
            )
        except InvoiceDataError:
            raise
        except ValueError as e:
            raise InvoiceDataError(f"Invalid invoice data: {e}")


@dataclass
class BusinessProfile:
    """Shop identity printed in the invoice header and footer."""
    name: str = "SewCraft Pro"
    name_gujarati: str = "સ્યૂક્રાફ્ટ પ્રો"
    tagline: str = "Professional Sewing Machine Service"


class BilingualInvoice:
    """
    Renders an invoice with English and Gujarati side by side.

    Produces HTML for printing, Markdown (converted from the HTML) for
    sharing in chat apps, and plain text for receipt printers.
    """

    def __init__(
        self,
        invoice: Invoice,
        customer: Customer,
        work_order: Optional[WorkOrder] = None,
        business: Optional[BusinessProfile] = None,
    ):
        self.invoice = invoice
        self.customer = customer
        self.work_order = work_order
        self.business = business or BusinessProfile()

    # ------------------------------------------------------------------
    # Content
    # ------------------------------------------------------------------

    def customer_lines(self) -> list[tuple[str, Optional[str]]]:
        """Bill-to lines as (english, gujarati) pairs; gujarati may be None."""
        c = self.customer
        lines = [(c.full_name, transliterate_to_gujarati(c.full_name))]

        if c.address:
            lines.append((c.address, transliterate_to_gujarati(c.address)))

        if c.city and c.state:
            zip_suffix = f" {c.zip_code}" if c.zip_code else ""
            lines.append((
                f"{c.city}, {c.state}{zip_suffix}",
                transliterate_to_gujarati(f"{c.city}, {c.state}") + zip_suffix,
            ))

        lines.append((f"Phone: {c.phone}", None))
        if c.email:
            lines.append((f"Email: {c.email}", None))
        return lines

    def service_lines(self) -> list[tuple[str, Optional[str]]]:
        """Work order lines as (english, gujarati) pairs; empty without one."""
        wo = self.work_order
        if wo is None:
            return []

        due = format_invoice_date(wo.due_date) if wo.due_date else "N/A"
        return [
            (f"Work Order: {wo.order_number}", f"કાર્ય ઓર્ડર: {wo.order_number}"),
            (
                f"Problem: {wo.problem_description}",
                f"સમસ્યા: {transliterate_to_gujarati(wo.problem_description)}",
            ),
            (
                f"Status: {status_label(wo.status.value)}",
                f"સ્થિતિ: {status_label(wo.status.value, Language.GUJARATI)}",
            ),
            (f"Due Date: {due}", None),
        ]

    def summary_lines(self) -> list[tuple[str, str]]:
        inv = self.invoice
        return [
            ("Subtotal / પેટાયોગ:", format_currency(inv.subtotal)),
            (f"Tax ({inv.tax_percent}) / કર:", format_currency(inv.tax_amount)),
            ("Total / કુલ:", format_currency(inv.total)),
        ]

    # ------------------------------------------------------------------
    # Output formats
    # ------------------------------------------------------------------

    def render_html(self) -> str:
        """Render a self-contained HTML fragment for printing."""
        e = html.escape
        inv = self.invoice
        parts = [
            '<div class="invoice">',
            '<header>',
            f"<h1>{e(self.business.name)}</h1>",
            f'<h2 class="gu">{e(self.business.name_gujarati)}</h2>',
            "<h3>Invoice / ભરતિયું</h3>",
            f'<p class="invoice-number">#{e(inv.invoice_number)}</p>',
            f"<p>Date / તારીખ: <strong>{format_invoice_date(inv.created_at)}</strong></p>",
            "</header>",
            '<section class="bill-to">',
            "<h3>Bill To / બિલ:</h3>",
        ]
        parts.extend(_html_pairs(self.customer_lines()))
        parts.append("</section>")

        parts.append('<section class="service">')
        parts.append("<h3>Service Details / સેવા વિગતો:</h3>")
        parts.extend(_html_pairs(self.service_lines()))
        parts.append("</section>")

        parts.append('<section class="summary">')
        parts.append("<h3>Invoice Summary / ભરતિયું સારાંશ</h3>")
        parts.append("<table>")
        for label, amount in self.summary_lines():
            parts.append(f"<tr><td>{e(label)}</td><td>{e(amount)}</td></tr>")
        parts.append("</table>")
        parts.append(
            f'<p class="payment-status">Payment Status / ચુકવણીની સ્થિતિ: '
            f"<strong>{e(inv.payment_label)}</strong></p>"
        )
        if inv.due_date:
            parts.append(f"<p>Due Date / મુદત: {format_invoice_date(inv.due_date)}</p>")
        parts.append("</section>")

        parts.extend([
            "<footer>",
            "<p>Thank you for your business! / આપના વ્યવસાય માટે આભાર!</p>",
            f"<p>{e(self.business.name)} - {e(self.business.tagline)}</p>",
            "</footer>",
            "</div>",
        ])
        return "\n".join(parts) + "\n"

    def render_markdown(self) -> str:
        """Render the invoice as Markdown via the HTML rendering."""
        try:
            from markdownify import markdownify as md
        except ImportError:
            raise RuntimeError("markdownify is not installed. Run: pip install markdownify")

        md_text = md(self.render_html(), heading_style="ATX", bullets="-")
        lines = [line.rstrip() for line in md_text.splitlines()]
        cleaned = []
        for line in lines:
            if line or (cleaned and cleaned[-1]):
                cleaned.append(line)
        return "\n".join(cleaned).strip() + "\n"

    def render_text(self) -> str:
        """Render plain text for narrow receipt printers."""
        inv = self.invoice
        rule = "-" * 40
        lines = [
            self.business.name,
            self.business.name_gujarati,
            rule,
            f"Invoice / ભરતિયું #{inv.invoice_number}",
            f"Date / તારીખ: {format_invoice_date(inv.created_at)}",
            rule,
            "Bill To / બિલ:",
        ]
        lines.extend(_text_pairs(self.customer_lines()))

        service = self.service_lines()
        if service:
            lines.append(rule)
            lines.append("Service Details / સેવા વિગતો:")
            lines.extend(_text_pairs(service))

        lines.append(rule)
        for label, amount in self.summary_lines():
            lines.append(f"{label} {amount}")
        lines.append(f"Payment Status / ચુકવણીની સ્થિતિ: {inv.payment_label}")
        if inv.due_date:
            lines.append(f"Due Date / મુદત: {format_invoice_date(inv.due_date)}")
        lines.append(rule)
        lines.append("Thank you for your business! / આપના વ્યવસાય માટે આભાર!")
        return "\n".join(lines) + "\n"

    def render(self, output_format: str = "html") -> str:
        renderers = {
            "html": self.render_html,
            "markdown": self.render_markdown,
            "text": self.render_text,
        }
        if output_format not in renderers:
            raise ValueError(
                f"Unknown invoice format: {output_format}. "
                f"Choose one of: {', '.join(renderers)}"
            )
        return renderers[output_format]()


def _html_pairs(pairs: list[tuple[str, Optional[str]]]) -> list[str]:
    out = []
    for english, gujarati in pairs:
        out.append(f"<p>{html.escape(english)}</p>")
        if gujarati:
            out.append(f'<p class="gu">{html.escape(gujarati)}</p>')
    return out


def _text_pairs(pairs: list[tuple[str, Optional[str]]]) -> list[str]:
    out = []
    for english, gujarati in pairs:
        out.append(f"  {english}")
        if gujarati:
            out.append(f"  {gujarati}")
    return out


def load_invoice_bundle(path: Union[str, Path]) -> BilingualInvoice:
    """
    Load an invoice bundle exported from the shop application.

    The file is JSON with "invoice" and "customer" objects and an optional
    "workOrder" object, using the API's camelCase field names.

    Raises:
        FileNotFoundError: If the file does not exist.
        InvoiceDataError: If the JSON is malformed or fields are missing.
    """
    path = Path(path)
    if not path.exists():
        raise FileNotFoundError(f"Invoice file not found: {path}")

    try:
        data = json.loads(path.read_text(encoding="utf-8"))
    except json.JSONDecodeError as e:
        raise InvoiceDataError(f"Invalid JSON in {path}: {e}")

    if not isinstance(data, dict) or "invoice" not in data or "customer" not in data:
        raise InvoiceDataError(f"{path} must contain 'invoice' and 'customer' objects")

    work_order = data.get("workOrder")
    return BilingualInvoice(
        invoice=Invoice.from_dict(data["invoice"]),
        customer=Customer.from_dict(data["customer"]),
        work_order=WorkOrder.from_dict(work_order) if work_order else None,
    )
