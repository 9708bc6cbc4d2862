"""Pydantic request schemas for invoicing endpoints."""

from pydantic import BaseModel, Field

from src.lng_common.enums import ReviewAction
from src.lng_invoice.domain.models import (
    CreateInvoiceApplicationInput,
    IssueInvoiceInput,
    ReviewInvoiceApplicationInput,
)


class CreateInvoiceApplicationRequest(BaseModel):
    statement_id: str
    discount_enabled: bool = False
    discount_amount: float = 0.0
    invoice_title: str = ""
    tax_no: str = ""
    applicant: str = ""
    note: str | None = None

    def to_input(self) -> CreateInvoiceApplicationInput:
        return CreateInvoiceApplicationInput(**self.model_dump())


class ReviewInvoiceApplicationRequest(BaseModel):
    action: ReviewAction
    reviewer: str = Field(..., min_length=1, max_length=64)
    reason: str | None = None

    def to_input(self, application_id: str) -> ReviewInvoiceApplicationInput:
        return ReviewInvoiceApplicationInput(application_id=application_id, **self.model_dump())


class IssueInvoiceRequest(BaseModel):
    issuer: str = Field(..., min_length=1, max_length=64)
    invoice_no: str | None = None
    issue_date: str | None = Field(None, description="YYYY-MM-DD; defaults to today")
    tax_rate: float | None = Field(None, ge=0, le=1)
    attachment_name: str | None = None

    def to_input(self, invoice_id: str) -> IssueInvoiceInput:
        return IssueInvoiceInput(invoice_id=invoice_id, **self.model_dump())
