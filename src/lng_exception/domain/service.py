"""Exception cases and their approval side effects.

Targets are referenced by business number and resolved through the
``plan_numbers`` / ``order_numbers`` indexes on the state snapshot. An
unknown target number leaves plans and orders untouched; the case itself is
still approved.
"""

import logging
from dataclasses import replace

from src.lng_common.enums import (
    ExceptionStatus,
    ExceptionType,
    NotificationCategory,
    OrderStatus,
    PlanStatus,
    ReviewAction,
)
from src.lng_common.records import find_by_id, prepend, replace_by_id
from src.lng_common.results import ActionResult
from src.lng_exception.domain.models import (
    PLAN_TARGET_TYPES,
    CreateExceptionInput,
    ExceptionCase,
    ProcessExceptionInput,
)
from src.lng_notification.domain.service import notify
from src.lng_store.state import AppState, StoreContext, Transition

logger = logging.getLogger(__name__)


def create_exception(state: AppState, ctx: StoreContext, data: CreateExceptionInput) -> Transition:
    case = ExceptionCase(
        id=ctx.ids.next_id("exception"),
        number=ctx.ids.next_no("EX"),
        type=data.type,
        target_no=data.target_no,
        reason=data.reason,
        responsibility_party=data.responsibility_party,
        amount=data.amount,
        status=ExceptionStatus.PENDING,
        created_at=ctx.now_iso(),
    )
    next_state = replace(
        state,
        exceptions=prepend(state.exceptions, case),
        notifications=notify(
            state,
            ctx,
            NotificationCategory.SYSTEM,
            "新增异常单待处理",
            f"{case.number} 已创建，目标单据 {case.target_no}",
        ),
    )
    return next_state, ActionResult.ok(case.id)


def _apply_to_plan(state: AppState, case: ExceptionCase, note: str | None) -> AppState:
    plan_id = state.plan_numbers.get(case.target_no)
    plan = find_by_id(state.plans, plan_id) if plan_id else None
    if plan is None:
        logger.info("Exception %s: no plan numbered %s", case.number, case.target_no)
        return state
    if case.type == ExceptionType.PLAN_TERMINATE:
        updated = replace(plan, status=PlanStatus.CANCELLED, reject_reason=note or case.reason)
    else:
        updated = replace(plan, status=PlanStatus.CHANGED, reject_reason=note)
    return replace(state, plans=replace_by_id(state.plans, updated))


def _apply_to_order(state: AppState, case: ExceptionCase, note: str | None) -> AppState:
    # order-terminate, order-change and delta-adjustment all send the order to settling
    order_id = state.order_numbers.get(case.target_no)
    order = find_by_id(state.orders, order_id) if order_id else None
    if order is None:
        logger.info("Exception %s: no order numbered %s", case.number, case.target_no)
        return state
    updated = replace(order, status=OrderStatus.SETTLING, exception_note=note or case.reason)
    return replace(state, orders=replace_by_id(state.orders, updated))


def process_exception(state: AppState, ctx: StoreContext, data: ProcessExceptionInput) -> Transition:
    case = find_by_id(state.exceptions, data.exception_id)
    if case is None:
        return state, ActionResult.not_found("异常单不存在")
    if case.status != ExceptionStatus.PENDING:
        return state, ActionResult.precondition_failed(f"{case.number} 已处理，不可重复审批")

    approved = data.action == ReviewAction.APPROVE
    processed = replace(
        case,
        status=ExceptionStatus.APPROVED if approved else ExceptionStatus.REJECTED,
        reviewer=data.reviewer,
        reviewed_at=ctx.now_iso(),
        note=data.note,
    )
    next_state = replace(state, exceptions=replace_by_id(state.exceptions, processed))
    if approved:
        if case.type in PLAN_TARGET_TYPES:
            next_state = _apply_to_plan(next_state, case, data.note)
        else:
            next_state = _apply_to_order(next_state, case, data.note)

    next_state = replace(
        next_state,
        notifications=notify(
            state,
            ctx,
            NotificationCategory.SYSTEM,
            "异常单已审批通过" if approved else "异常单已驳回",
            f"{case.number} 已由 {data.reviewer} 处理。",
        ),
    )
    return next_state, ActionResult.ok(case.id)
