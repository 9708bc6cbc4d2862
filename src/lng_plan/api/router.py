"""lng_plan REST API: plan declaration, review, cancellation, daily report."""

from typing import Annotated

from fastapi import APIRouter, Depends, Request

from src.lng_common.errors import EntityNotFoundError, ErrorDomain, raise_for_result
from src.lng_common.records import find_by_id
from src.lng_common.response import ApiResponse, record_payload, records_payload, respond
from src.lng_plan.application.schemas import (
    CancelPlanRequest,
    CreatePlanRequest,
    DailyPlanReportRequest,
    PlanAmountsResponse,
    ReviewPlanRequest,
)
from src.lng_store.store import DomainStore, get_domain_store

router = APIRouter(prefix="/plans", tags=["plans"])

StoreDep = Annotated[DomainStore, Depends(get_domain_store)]


@router.get("")
async def list_plans(store: StoreDep, request: Request) -> ApiResponse:
    return respond(request, records_payload(store.state.plans))


@router.post("", status_code=201)
async def create_plan(body: CreatePlanRequest, store: StoreDep, request: Request) -> ApiResponse:
    """Submit a plan. A rejection lists every validation problem at once."""
    result = store.create_plan(body.to_input())
    raise_for_result(result, ErrorDomain.PLAN)
    plan = find_by_id(store.state.plans, result.entity_id)
    amounts = PlanAmountsResponse.from_domain(plan).model_dump() if plan else {}
    return respond(request, {"id": result.entity_id, "number": plan.number if plan else None, **amounts})


@router.get("/daily-reports")
async def list_daily_reports(store: StoreDep, request: Request) -> ApiResponse:
    return respond(request, records_payload(store.state.daily_plan_reports))


@router.post("/daily-reports", status_code=201)
async def generate_daily_report(body: DailyPlanReportRequest, store: StoreDep, request: Request) -> ApiResponse:
    result = store.generate_daily_plan_report(body.report_date, body.generated_by)
    raise_for_result(result, ErrorDomain.PLAN)
    return respond(request, {"id": result.entity_id})


@router.get("/{plan_id}")
async def get_plan(plan_id: str, store: StoreDep, request: Request) -> ApiResponse:
    plan = find_by_id(store.state.plans, plan_id)
    if plan is None:
        raise EntityNotFoundError(ErrorDomain.PLAN, "计划不存在")
    return respond(request, record_payload(plan))


@router.post("/{plan_id}/review")
async def review_plan(plan_id: str, body: ReviewPlanRequest, store: StoreDep, request: Request) -> ApiResponse:
    """On approve, ``id`` is the spawned order."""
    result = store.review_plan(body.to_input(plan_id))
    raise_for_result(result, ErrorDomain.PLAN)
    return respond(request, {"id": result.entity_id})


@router.post("/{plan_id}/cancel")
async def cancel_plan(plan_id: str, body: CancelPlanRequest, store: StoreDep, request: Request) -> ApiResponse:
    result = store.cancel_plan(plan_id, body.reason)
    raise_for_result(result, ErrorDomain.PLAN)
    return respond(request, {"id": result.entity_id})


@router.post("/{plan_id}/resubmit")
async def resubmit_plan(plan_id: str, store: StoreDep, request: Request) -> ApiResponse:
    result = store.resubmit_plan(plan_id)
    raise_for_result(result, ErrorDomain.PLAN)
    return respond(request, {"id": result.entity_id})
