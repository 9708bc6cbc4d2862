"""lng_account REST API: fund buckets, ledger, deposits, order receipts."""

from typing import Annotated

from fastapi import APIRouter, Depends, Query, Request

from src.lng_account.application.schemas import (
    AccountResponse,
    DepositRequest,
    OrderReceiptRequest,
    ReviewDepositRequest,
)
from src.lng_common.enums import LedgerType
from src.lng_common.errors import ErrorDomain, raise_for_result
from src.lng_common.response import ApiResponse, records_payload, respond
from src.lng_store.store import DomainStore, get_domain_store

router = APIRouter(prefix="/account", tags=["account"])

StoreDep = Annotated[DomainStore, Depends(get_domain_store)]


@router.get("")
async def get_account(store: StoreDep, request: Request) -> ApiResponse:
    return respond(request, AccountResponse.from_domain(store.state.account).model_dump())


@router.get("/ledger")
async def list_ledger(
    store: StoreDep,
    request: Request,
    entry_type: LedgerType | None = Query(None, description="Filter by LedgerType"),
) -> ApiResponse:
    entries = store.state.ledgers
    if entry_type is not None:
        entries = tuple(entry for entry in entries if entry.type == entry_type)
    return respond(request, records_payload(entries))


@router.get("/deposits")
async def list_deposits(store: StoreDep, request: Request) -> ApiResponse:
    return respond(request, records_payload(store.state.deposits))


@router.post("/deposits", status_code=201)
async def register_deposit(body: DepositRequest, store: StoreDep, request: Request) -> ApiResponse:
    result = store.register_deposit(body.to_input())
    raise_for_result(result, ErrorDomain.FINANCE)
    return respond(request, {"id": result.entity_id})


@router.post("/deposits/{deposit_id}/review")
async def review_deposit(
    deposit_id: str, body: ReviewDepositRequest, store: StoreDep, request: Request
) -> ApiResponse:
    result = store.review_deposit(deposit_id, body.action, body.reviewer, body.reason)
    raise_for_result(result, ErrorDomain.FINANCE)
    return respond(request, AccountResponse.from_domain(store.state.account).model_dump())


@router.get("/receivables")
async def list_receivables(store: StoreDep, request: Request) -> ApiResponse:
    return respond(request, records_payload(store.receivables()))


@router.post("/receipts")
async def confirm_order_receipt(body: OrderReceiptRequest, store: StoreDep, request: Request) -> ApiResponse:
    result = store.confirm_order_receipt(body.to_input())
    raise_for_result(result, ErrorDomain.FINANCE)
    return respond(request, {"id": result.entity_id})
