"""Invoice domain models.

InvoiceApplication: pending-review → approved | rejected; approved → invoiced
once its InvoiceItem is issued. Each approval spawns exactly one InvoiceItem.
"""

from dataclasses import dataclass

from src.lng_common.enums import InvoiceApplicationStatus, InvoiceStatus, ReviewAction


@dataclass(frozen=True)
class InvoiceItem:
    id: str
    number: str
    customer_name: str
    amount: float
    issue_date: str
    statement_no: str
    status: InvoiceStatus
    application_id: str | None = None
    tax_rate: float | None = None
    attachment_name: str | None = None
    issued_by: str | None = None


@dataclass(frozen=True)
class InvoiceApplication:
    id: str
    number: str
    statement_id: str
    statement_no: str
    customer_name: str
    order_numbers: tuple[str, ...]
    original_amount: float
    discount_enabled: bool
    discount_amount: float
    requested_amount: float
    invoice_title: str
    tax_no: str
    applicant: str
    applied_at: str
    status: InvoiceApplicationStatus
    reviewer: str | None = None
    reviewed_at: str | None = None
    reject_reason: str | None = None
    note: str | None = None
    invoice_id: str | None = None


@dataclass(frozen=True)
class CreateInvoiceApplicationInput:
    statement_id: str
    discount_enabled: bool
    discount_amount: float
    invoice_title: str
    tax_no: str
    applicant: str
    note: str | None = None


@dataclass(frozen=True)
class ReviewInvoiceApplicationInput:
    application_id: str
    action: ReviewAction
    reviewer: str
    reason: str | None = None


@dataclass(frozen=True)
class IssueInvoiceInput:
    invoice_id: str
    issuer: str
    invoice_no: str | None = None
    issue_date: str | None = None
    tax_rate: float | None = None
    attachment_name: str | None = None
