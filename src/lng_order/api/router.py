"""lng_order REST API: supplement, weighing, acceptance, settlement, archive."""

from typing import Annotated

from fastapi import APIRouter, Depends, Request

from src.lng_common.errors import EntityNotFoundError, ErrorDomain, raise_for_result
from src.lng_common.records import find_by_id
from src.lng_common.response import ApiResponse, record_payload, records_payload, respond
from src.lng_common.results import ActionResult
from src.lng_order.application.schemas import (
    AcceptOrderRequest,
    OperatorRequest,
    ResolveDiffRequest,
    ReviewSupplementRequest,
    SubmitSupplementRequest,
    WeighRequest,
)
from src.lng_store.store import DomainStore, get_domain_store

router = APIRouter(prefix="/orders", tags=["orders"])

StoreDep = Annotated[DomainStore, Depends(get_domain_store)]


def _order_response(store: DomainStore, request: Request, result: ActionResult) -> ApiResponse:
    raise_for_result(result, ErrorDomain.ORDER)
    order = find_by_id(store.state.orders, result.entity_id)
    return respond(request, record_payload(order) if order else {"id": result.entity_id})


@router.get("")
async def list_orders(store: StoreDep, request: Request) -> ApiResponse:
    return respond(request, records_payload(store.state.orders))


@router.get("/{order_id}")
async def get_order(order_id: str, store: StoreDep, request: Request) -> ApiResponse:
    order = find_by_id(store.state.orders, order_id)
    if order is None:
        raise EntityNotFoundError(ErrorDomain.ORDER, "订单不存在")
    return respond(request, record_payload(order))


@router.post("/{order_id}/supplement")
async def submit_supplement(
    order_id: str, body: SubmitSupplementRequest, store: StoreDep, request: Request
) -> ApiResponse:
    return _order_response(store, request, store.submit_order_supplement(body.to_input(order_id)))


@router.post("/{order_id}/supplement/review")
async def review_supplement(
    order_id: str, body: ReviewSupplementRequest, store: StoreDep, request: Request
) -> ApiResponse:
    return _order_response(store, request, store.review_order_supplement(body.to_input(order_id)))


@router.post("/{order_id}/load")
async def confirm_load(order_id: str, body: WeighRequest, store: StoreDep, request: Request) -> ApiResponse:
    return _order_response(store, request, store.confirm_load(body.to_input(order_id)))


@router.post("/{order_id}/depart")
async def depart_order(order_id: str, store: StoreDep, request: Request) -> ApiResponse:
    return _order_response(store, request, store.depart_order(order_id))


@router.post("/{order_id}/unload")
async def confirm_unload(order_id: str, body: WeighRequest, store: StoreDep, request: Request) -> ApiResponse:
    return _order_response(store, request, store.confirm_unload(body.to_input(order_id)))


@router.post("/{order_id}/resolve-diff")
async def resolve_diff(
    order_id: str, body: ResolveDiffRequest, store: StoreDep, request: Request
) -> ApiResponse:
    result = store.resolve_diff_exception(order_id, body.settlement_weight, body.note)
    return _order_response(store, request, result)


@router.post("/{order_id}/accept")
async def accept_order(
    order_id: str, body: AcceptOrderRequest, store: StoreDep, request: Request
) -> ApiResponse:
    result = store.accept_order(order_id, body.accepted, body.settlement_weight)
    return _order_response(store, request, result)


@router.post("/{order_id}/settle")
async def settle_order(order_id: str, body: OperatorRequest, store: StoreDep, request: Request) -> ApiResponse:
    return _order_response(store, request, store.settle_order(order_id, body.operator))


@router.post("/{order_id}/archive")
async def archive_order(order_id: str, body: OperatorRequest, store: StoreDep, request: Request) -> ApiResponse:
    return _order_response(store, request, store.archive_order(order_id, body.operator))


@router.post("/{order_id}/unarchive")
async def unarchive_order(
    order_id: str, body: OperatorRequest, store: StoreDep, request: Request
) -> ApiResponse:
    return _order_response(store, request, store.unarchive_order(order_id, body.operator))
