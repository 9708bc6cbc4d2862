"""Plan lifecycle and fund reservation.

    submitted --approve--> approved (spawns one Order, occupied -> frozen)
    submitted --reject---> returned (occupied -> available)
    returned  --resubmit-> submitted (available -> occupied)
    submitted|returned|draft|changed --cancel--> cancelled

Every fund movement is paired with one ledger record and goes through
lng_account.domain.ledger so each touched field is rounded once.
"""

import logging
from dataclasses import replace

from src.lng_account.domain.ledger import freeze, make_ledger_record, occupy, release
from src.lng_common.enums import (
    GasPriceStatus,
    LedgerType,
    NotificationCategory,
    PlanStatus,
    ReviewAction,
    SiteStatus,
    TransportMode,
)
from src.lng_common.money import money_to_display, round2
from src.lng_common.records import find_by_id, index_with, prepend, replace_by_id
from src.lng_common.results import ActionResult
from src.lng_notification.domain.service import notify
from src.lng_order.domain.service import new_order_for_plan
from src.lng_plan.domain.models import (
    RESERVING_STATUSES,
    DailyPlanReport,
    DailyPlanReportPlan,
    Plan,
    PlanInput,
    ReviewPlanInput,
)
from src.lng_store.state import AppState, StoreContext, Transition

logger = logging.getLogger(__name__)

DEFAULT_RETURN_REASON = "信息需补充"


def compute_amounts(unit_price: float, planned_volume: float, freight_fee: float) -> tuple[float, float]:
    """Return (estimated_amount, total_amount), each rounded to 2 decimals."""
    estimated = round2(unit_price * planned_volume)
    total = round2(estimated + freight_fee)
    return estimated, total


def _transport_errors(state: AppState, data: PlanInput) -> list[str]:
    errors: list[str] = []
    vehicle = find_by_id(state.vehicles, data.vehicle_id) if data.vehicle_id else None
    driver = find_by_id(state.personnel, data.driver_id) if data.driver_id else None
    escort = find_by_id(state.personnel, data.escort_id) if data.escort_id else None

    if vehicle is None:
        errors.append("自提/承运模式必须选择车辆")
    elif not vehicle.valid:
        errors.append(f"车辆 [{vehicle.plate_no}] 运输资质已过期（{vehicle.cert_expiry}）")

    if driver is None:
        errors.append("请选择司机")
    elif not driver.valid:
        errors.append(f"司机 [{driver.name}] 资质已过期（{driver.cert_expiry}）")

    if escort is None:
        errors.append("请选择押运员")
    elif not escort.valid:
        errors.append(f"押运员 [{escort.name}] 资质已过期（{escort.cert_expiry}）")
    return errors


def create_plan(state: AppState, ctx: StoreContext, data: PlanInput) -> Transition:
    """Validate everything, then submit the plan and occupy its total amount.

    All applicable errors are collected; on any error nothing changes.
    Plans priced against a draft or taken-down gas price are refused here too,
    a store-level guard on top of the price picker.
    """
    errors: list[str] = []
    site = find_by_id(state.sites, data.site_id)
    gas_price = find_by_id(state.gas_prices, data.price_id)

    if site is None:
        errors.append("请选择有效站点")
    elif site.is_maintenance_blocked:
        errors.append(f"站点 [{site.name}] 当前处于维护中（{site.maintenance_window or '维护中'}）")
    elif site.status == SiteStatus.DISABLED:
        errors.append(f"站点 [{site.name}] 已停用")

    if gas_price is None:
        errors.append("请选择有效气价")
    elif gas_price.status != GasPriceStatus.PUBLISHED:
        errors.append("所选气价未发布，不可用于计划申报")

    if data.planned_volume <= 0:
        errors.append("计划量必须大于 0")

    if not data.agreement_checked:
        errors.append("请先勾选费用确认条款")

    if data.transport_mode != TransportMode.UPSTREAM:
        errors.extend(_transport_errors(state, data))

    unit_price = gas_price.price if gas_price is not None else 0.0
    estimated_amount, total_amount = compute_amounts(unit_price, data.planned_volume, data.freight_fee)

    if state.account.available < total_amount:
        errors.append(
            f"可用余额不足：需要 {money_to_display(total_amount)}，"
            f"当前可用 {money_to_display(state.account.available)}"
        )

    if errors or site is None or gas_price is None:
        logger.info("Plan rejected with %d error(s)", len(errors))
        return state, ActionResult.invalid(errors)

    plan = Plan(
        id=ctx.ids.next_id("plan"),
        number=ctx.ids.next_no("PL"),
        customer_id=state.active_customer_id,
        customer_name=state.active_customer_name,
        site_id=site.id,
        site_name=site.name,
        price_id=gas_price.id,
        planned_volume=data.planned_volume,
        unit_price=unit_price,
        estimated_amount=estimated_amount,
        freight_fee=data.freight_fee,
        total_amount=total_amount,
        transport_mode=data.transport_mode,
        payment_method=data.payment_method,
        weigh_diff_rule=data.weigh_diff_rule,
        agreement_checked=data.agreement_checked,
        carrier_id=data.carrier_id,
        vehicle_id=data.vehicle_id,
        driver_id=data.driver_id,
        escort_id=data.escort_id,
        status=PlanStatus.SUBMITTED,
        submitted_at=ctx.now_iso(),
    )

    next_state = replace(
        state,
        plans=prepend(state.plans, plan),
        plan_numbers=index_with(state.plan_numbers, plan.number, plan.id),
        account=occupy(state.account, total_amount),
        ledgers=prepend(
            state.ledgers,
            make_ledger_record(ctx, LedgerType.OCCUPY, total_amount, plan.number, "计划提交占用资金"),
        ),
        notifications=notify(
            state, ctx, NotificationCategory.APPROVAL, "新计划待审批", f"{plan.number} 已提交，待市场部审批。"
        ),
    )
    return next_state, ActionResult.ok(plan.id)


def review_plan(state: AppState, ctx: StoreContext, data: ReviewPlanInput) -> Transition:
    plan = find_by_id(state.plans, data.plan_id)
    if plan is None:
        return state, ActionResult.not_found("计划不存在")
    if plan.status not in RESERVING_STATUSES:
        return state, ActionResult.precondition_failed(f"计划 {plan.number} 当前状态不可审批")

    if data.action == ReviewAction.REJECT:
        reason = data.reason or DEFAULT_RETURN_REASON
        returned = replace(plan, status=PlanStatus.RETURNED, reviewer=data.reviewer, reject_reason=reason)
        next_state = replace(
            state,
            plans=replace_by_id(state.plans, returned),
            account=release(state.account, plan.total_amount),
            ledgers=prepend(
                state.ledgers,
                make_ledger_record(ctx, LedgerType.RELEASE, plan.total_amount, plan.number, "计划退回释放占用资金"),
            ),
            notifications=notify(
                state, ctx, NotificationCategory.APPROVAL, "计划已退回", f"{plan.number} 已退回，原因：{reason}"
            ),
        )
        return next_state, ActionResult.ok(plan.id)

    approved = replace(plan, status=PlanStatus.APPROVED, reviewer=data.reviewer, reject_reason=None)
    order = new_order_for_plan(ctx, approved)
    next_state = replace(
        state,
        plans=replace_by_id(state.plans, approved),
        orders=prepend(state.orders, order),
        order_numbers=index_with(state.order_numbers, order.number, order.id),
        account=freeze(state.account, approved.total_amount),
        ledgers=prepend(
            state.ledgers,
            make_ledger_record(ctx, LedgerType.FREEZE, approved.total_amount, order.number, "审批通过转冻结"),
        ),
        notifications=notify(
            state,
            ctx,
            NotificationCategory.APPROVAL,
            "计划已审批通过",
            f"{approved.number} 已通过审批并生成订单 {order.number}",
        ),
    )
    return next_state, ActionResult.ok(order.id)


def cancel_plan(state: AppState, ctx: StoreContext, plan_id: str, reason: str) -> Transition:
    plan = find_by_id(state.plans, plan_id)
    if plan is None:
        return state, ActionResult.not_found("计划不存在")
    if plan.status in (PlanStatus.APPROVED, PlanStatus.CANCELLED):
        return state, ActionResult.precondition_failed(f"计划 {plan.number} 已审批或已取消，不可取消")

    cancelled = replace(plan, status=PlanStatus.CANCELLED, reject_reason=reason)
    next_state = replace(state, plans=replace_by_id(state.plans, cancelled))
    # draft/changed plans are never released; returned plans are released again
    if plan.status in RESERVING_STATUSES:
        next_state = replace(
            next_state,
            account=release(state.account, plan.total_amount),
            ledgers=prepend(
                state.ledgers,
                make_ledger_record(ctx, LedgerType.RELEASE, plan.total_amount, plan.number, "计划取消释放占用"),
            ),
        )
    return next_state, ActionResult.ok(plan.id)


def resubmit_plan(state: AppState, ctx: StoreContext, plan_id: str) -> Transition:
    """Put a returned plan back into review, occupying its funds again."""
    plan = find_by_id(state.plans, plan_id)
    if plan is None:
        return state, ActionResult.not_found("计划不存在")
    if plan.status != PlanStatus.RETURNED:
        return state, ActionResult.precondition_failed("仅已退回计划可重新提交")
    if state.account.available < plan.total_amount:
        return state, ActionResult.invalid(
            [
                f"可用余额不足：需要 {money_to_display(plan.total_amount)}，"
                f"当前可用 {money_to_display(state.account.available)}"
            ]
        )

    resubmitted = replace(
        plan, status=PlanStatus.SUBMITTED, reject_reason=None, submitted_at=ctx.now_iso()
    )
    next_state = replace(
        state,
        plans=replace_by_id(state.plans, resubmitted),
        account=occupy(state.account, plan.total_amount),
        ledgers=prepend(
            state.ledgers,
            make_ledger_record(ctx, LedgerType.OCCUPY, plan.total_amount, plan.number, "计划重新提交占用资金"),
        ),
        notifications=notify(
            state, ctx, NotificationCategory.APPROVAL, "计划重新提交", f"{plan.number} 已重新提交，待市场部审批。"
        ),
    )
    return next_state, ActionResult.ok(plan.id)


def generate_daily_plan_report(
    state: AppState, ctx: StoreContext, report_date: str, generated_by: str
) -> Transition:
    rows = tuple(
        DailyPlanReportPlan(
            plan_id=plan.id,
            number=plan.number,
            customer_name=plan.customer_name,
            site_name=plan.site_name,
            planned_volume=plan.planned_volume,
            transport_mode=plan.transport_mode,
            status=plan.status,
            submitted_at=plan.submitted_at,
        )
        for plan in state.plans
        if plan.submitted_at[:10] == report_date
    )
    report = DailyPlanReport(
        id=ctx.ids.next_id("dpr"),
        report_date=report_date,
        generated_at=ctx.now_iso(),
        generated_by=generated_by,
        plans=rows,
    )
    next_state = replace(state, daily_plan_reports=prepend(state.daily_plan_reports, report))
    return next_state, ActionResult.ok(report.id)
