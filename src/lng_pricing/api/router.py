"""lng_pricing REST API: gas price drafts, publishing, visibility."""

from typing import Annotated

from fastapi import APIRouter, Depends, Request

from src.lng_common.errors import ErrorDomain, raise_for_result
from src.lng_common.response import ApiResponse, records_payload, respond
from src.lng_pricing.application.schemas import GasPriceDraftRequest, OperatorRequest
from src.lng_store.store import DomainStore, get_domain_store

router = APIRouter(prefix="/gas-prices", tags=["pricing"])

StoreDep = Annotated[DomainStore, Depends(get_domain_store)]


@router.get("")
async def list_gas_prices(store: StoreDep, request: Request) -> ApiResponse:
    """Prices visible to the current role; terminal users see their own subset."""
    return respond(request, records_payload(store.visible_gas_prices()))


@router.post("", status_code=201)
async def save_gas_price_draft(body: GasPriceDraftRequest, store: StoreDep, request: Request) -> ApiResponse:
    result = store.save_gas_price_draft(body.to_input())
    raise_for_result(result, ErrorDomain.PLAN)
    return respond(request, {"id": result.entity_id})


@router.post("/{price_id}/publish")
async def publish_gas_price(
    price_id: str, body: OperatorRequest, store: StoreDep, request: Request
) -> ApiResponse:
    result = store.publish_gas_price(price_id, body.operator)
    raise_for_result(result, ErrorDomain.PLAN)
    return respond(request, {"id": result.entity_id})


@router.post("/{price_id}/take-down")
async def take_down_gas_price(
    price_id: str, body: OperatorRequest, store: StoreDep, request: Request
) -> ApiResponse:
    result = store.take_down_gas_price(price_id, body.operator)
    raise_for_result(result, ErrorDomain.PLAN)
    return respond(request, {"id": result.entity_id})
