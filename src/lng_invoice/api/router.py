"""lng_invoice REST API: invoice applications and issuance."""

from typing import Annotated

from fastapi import APIRouter, Depends, Request

from src.lng_common.errors import ErrorDomain, raise_for_result
from src.lng_common.response import ApiResponse, records_payload, respond
from src.lng_invoice.application.schemas import (
    CreateInvoiceApplicationRequest,
    IssueInvoiceRequest,
    ReviewInvoiceApplicationRequest,
)
from src.lng_store.store import DomainStore, get_domain_store

router = APIRouter(prefix="/invoices", tags=["invoices"])

StoreDep = Annotated[DomainStore, Depends(get_domain_store)]


@router.get("")
async def list_invoices(store: StoreDep, request: Request) -> ApiResponse:
    return respond(request, records_payload(store.state.invoices))


@router.get("/applications")
async def list_applications(store: StoreDep, request: Request) -> ApiResponse:
    return respond(request, records_payload(store.state.invoice_applications))


@router.post("/applications", status_code=201)
async def create_application(
    body: CreateInvoiceApplicationRequest, store: StoreDep, request: Request
) -> ApiResponse:
    result = store.create_invoice_application(body.to_input())
    raise_for_result(result, ErrorDomain.SETTLEMENT)
    return respond(request, {"id": result.entity_id})


@router.post("/applications/{application_id}/review")
async def review_application(
    application_id: str, body: ReviewInvoiceApplicationRequest, store: StoreDep, request: Request
) -> ApiResponse:
    """On approve, ``id`` is the pending invoice created for the application."""
    result = store.review_invoice_application(body.to_input(application_id))
    raise_for_result(result, ErrorDomain.SETTLEMENT)
    return respond(request, {"id": result.entity_id})


@router.post("/{invoice_id}/issue")
async def issue_invoice(
    invoice_id: str, body: IssueInvoiceRequest, store: StoreDep, request: Request
) -> ApiResponse:
    result = store.issue_invoice(body.to_input(invoice_id))
    raise_for_result(result, ErrorDomain.SETTLEMENT)
    return respond(request, {"id": result.entity_id})
