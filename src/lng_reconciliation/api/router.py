"""lng_reconciliation REST API: statements, two-phase stamping, upstream archives."""

from typing import Annotated

from fastapi import APIRouter, Depends, Request

from src.lng_common.errors import ErrorDomain, raise_for_result
from src.lng_common.records import find_by_id
from src.lng_common.response import ApiResponse, record_payload, records_payload, respond
from src.lng_reconciliation.application.schemas import StampRequest, UpstreamArchiveRequest
from src.lng_store.store import DomainStore, get_domain_store

router = APIRouter(prefix="/reconciliations", tags=["reconciliation"])

StoreDep = Annotated[DomainStore, Depends(get_domain_store)]


@router.get("")
async def list_statements(store: StoreDep, request: Request) -> ApiResponse:
    return respond(request, records_payload(store.state.reconciliations))


@router.post("/{statement_id}/stamp")
async def apply_stamp(statement_id: str, body: StampRequest, store: StoreDep, request: Request) -> ApiResponse:
    result = store.apply_stamp(statement_id, body.actor_type, body.actor)
    raise_for_result(result, ErrorDomain.SETTLEMENT)
    return respond(request, record_payload(find_by_id(store.state.reconciliations, statement_id)))


@router.get("/upstream-archives")
async def list_upstream_archives(store: StoreDep, request: Request) -> ApiResponse:
    return respond(request, records_payload(store.state.upstream_archives))


@router.post("/upstream-archives", status_code=201)
async def upload_upstream_archive(
    body: UpstreamArchiveRequest, store: StoreDep, request: Request
) -> ApiResponse:
    result = store.upload_upstream_archive(body.to_input())
    raise_for_result(result, ErrorDomain.SETTLEMENT)
    return respond(request, {"id": result.entity_id})
