"""lng_exception REST API: exception cases against plans and orders."""

from typing import Annotated

from fastapi import APIRouter, Depends, Request

from src.lng_common.errors import ErrorDomain, raise_for_result
from src.lng_common.response import ApiResponse, records_payload, respond
from src.lng_exception.application.schemas import CreateExceptionRequest, ProcessExceptionRequest
from src.lng_store.store import DomainStore, get_domain_store

router = APIRouter(prefix="/exceptions", tags=["exceptions"])

StoreDep = Annotated[DomainStore, Depends(get_domain_store)]


@router.get("")
async def list_exceptions(store: StoreDep, request: Request) -> ApiResponse:
    return respond(request, records_payload(store.state.exceptions))


@router.post("", status_code=201)
async def create_exception(body: CreateExceptionRequest, store: StoreDep, request: Request) -> ApiResponse:
    result = store.create_exception(body.to_input())
    raise_for_result(result, ErrorDomain.ONBOARDING)
    return respond(request, {"id": result.entity_id})


@router.post("/{exception_id}/process")
async def process_exception(
    exception_id: str, body: ProcessExceptionRequest, store: StoreDep, request: Request
) -> ApiResponse:
    result = store.process_exception(body.to_input(exception_id))
    raise_for_result(result, ErrorDomain.ONBOARDING)
    return respond(request, {"id": result.entity_id})
