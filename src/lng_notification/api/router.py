"""lng_notification REST API: message center."""

from typing import Annotated

from fastapi import APIRouter, Depends, Query, Request

from src.lng_common.errors import ErrorDomain, raise_for_result
from src.lng_common.response import ApiResponse, records_payload, respond
from src.lng_store.store import DomainStore, get_domain_store

router = APIRouter(prefix="/notifications", tags=["notifications"])

StoreDep = Annotated[DomainStore, Depends(get_domain_store)]


@router.get("")
async def list_notifications(
    store: StoreDep,
    request: Request,
    unread_only: bool = Query(False),
) -> ApiResponse:
    items = store.state.notifications
    if unread_only:
        items = tuple(item for item in items if not item.read)
    return respond(request, records_payload(items))


@router.post("/{notification_id}/read")
async def mark_read(notification_id: str, store: StoreDep, request: Request) -> ApiResponse:
    result = store.mark_notification_read(notification_id)
    raise_for_result(result, ErrorDomain.SYSTEM)
    return respond(request, {"id": result.entity_id})
