"""Order fulfillment: weighing, weigh-difference handling, acceptance, archive."""

import logging
from dataclasses import replace

from config.settings import settings
from src.lng_common.enums import (
    NotificationCategory,
    OrderStatus,
    ReviewAction,
    SupplementStatus,
    WeighDiffRule,
)
from src.lng_common.money import round2
from src.lng_common.records import find_by_id, replace_by_id
from src.lng_common.results import ActionResult
from src.lng_notification.domain.service import notify
from src.lng_order.domain.models import (
    Order,
    ReviewOrderSupplementInput,
    SubmitOrderSupplementInput,
    WeighInput,
)
from src.lng_plan.domain.models import Plan
from src.lng_store.state import AppState, StoreContext, Transition

logger = logging.getLogger(__name__)

ORDER_NOT_FOUND = "订单不存在"
ARCHIVE_REFUSED = "仅已验收/已结算订单可归档"
UNARCHIVE_REFUSED = "仅已归档订单支持取消归档"


def new_order_for_plan(ctx: StoreContext, plan: Plan) -> Order:
    """The single order an approved plan spawns."""
    return Order(
        id=ctx.ids.next_id("order"),
        number=ctx.ids.next_no("OD"),
        plan_id=plan.id,
        customer_name=plan.customer_name,
        site_name=plan.site_name,
        transport_mode=plan.transport_mode,
        weigh_diff_rule=plan.weigh_diff_rule,
        status=OrderStatus.ORDERED,
        threshold=settings.WEIGH_DIFF_THRESHOLD,
        settlement_weight=plan.planned_volume,
        diff_abnormal=False,
    )


def settlement_weight_for(rule: WeighDiffRule, load_weight: float, unload_weight: float) -> float:
    if rule == WeighDiffRule.LOAD:
        return load_weight
    if rule == WeighDiffRule.UNLOAD:
        return unload_weight
    return round2((load_weight + unload_weight) / 2)


def _commit(state: AppState, order: Order) -> AppState:
    return replace(state, orders=replace_by_id(state.orders, order))


def confirm_load(state: AppState, ctx: StoreContext, data: WeighInput) -> Transition:
    order = find_by_id(state.orders, data.order_id)
    if order is None:
        return state, ActionResult.not_found(ORDER_NOT_FOUND)
    loaded = replace(order, load_weight=data.weight, status=OrderStatus.LOADED)
    return _commit(state, loaded), ActionResult.ok(order.id)


def depart_order(state: AppState, ctx: StoreContext, order_id: str) -> Transition:
    order = find_by_id(state.orders, order_id)
    if order is None:
        return state, ActionResult.not_found(ORDER_NOT_FOUND)
    if order.status != OrderStatus.LOADED:
        return state, ActionResult.precondition_failed("仅已装车订单可发车")
    return _commit(state, replace(order, status=OrderStatus.TRANSPORTING)), ActionResult.ok(order.id)


def confirm_unload(state: AppState, ctx: StoreContext, data: WeighInput) -> Transition:
    """Record the unload weight and route the order by weigh difference.

    Without a load record the load weight is taken to equal the unload weight,
    so the difference is 0.
    """
    order = find_by_id(state.orders, data.order_id)
    if order is None:
        return state, ActionResult.not_found(ORDER_NOT_FOUND)

    load_weight = order.load_weight if order.load_weight is not None else data.weight
    diff = abs(load_weight - data.weight)
    abnormal = diff > order.threshold

    unloaded = replace(
        order,
        unload_weight=data.weight,
        diff_abnormal=abnormal,
        status=OrderStatus.SETTLING if abnormal else OrderStatus.PENDING_ACCEPTANCE,
        settlement_weight=settlement_weight_for(order.weigh_diff_rule, load_weight, data.weight),
    )
    next_state = _commit(state, unloaded)
    if abnormal:
        logger.info("Weigh difference %.3f t over threshold on %s", diff, order.number)
        next_state = replace(
            next_state,
            notifications=notify(
                state,
                ctx,
                NotificationCategory.FULFILLMENT,
                "磅差异常提醒",
                f"{order.number} 检测到磅差异常，请调度处理结算量。",
            ),
        )
    return next_state, ActionResult.ok(order.id)


def resolve_diff_exception(
    state: AppState, ctx: StoreContext, order_id: str, settlement_weight: float, note: str
) -> Transition:
    """Override the settlement weight and send the order to acceptance.

    Accepted from any status; a warning is logged when the order is not settling.
    """
    order = find_by_id(state.orders, order_id)
    if order is None:
        return state, ActionResult.not_found(ORDER_NOT_FOUND)
    if order.status != OrderStatus.SETTLING:
        logger.warning(
            "Settlement weight overridden on %s while in status %s", order.number, order.status.value
        )
    resolved = replace(
        order,
        settlement_weight=settlement_weight,
        exception_note=note,
        diff_abnormal=False,
        status=OrderStatus.PENDING_ACCEPTANCE,
    )
    return _commit(state, resolved), ActionResult.ok(order.id)


def accept_order(
    state: AppState, ctx: StoreContext, order_id: str, accepted: bool, settlement_weight: float
) -> Transition:
    """Accept the delivery, or send it back to settling for reprocessing."""
    order = find_by_id(state.orders, order_id)
    if order is None:
        return state, ActionResult.not_found(ORDER_NOT_FOUND)

    next_status = OrderStatus.ACCEPTED if accepted else OrderStatus.SETTLING
    updated = replace(order, status=next_status, settlement_weight=settlement_weight)
    next_state = replace(
        _commit(state, updated),
        notifications=notify(
            state,
            ctx,
            NotificationCategory.FULFILLMENT,
            "订单已验收" if accepted else "验收未通过",
            f"{order.number} {'已完成验收' if accepted else '验收不通过，待处理'}",
        ),
    )
    return next_state, ActionResult.ok(order.id)


def settle_order(state: AppState, ctx: StoreContext, order_id: str, operator: str) -> Transition:
    order = find_by_id(state.orders, order_id)
    if order is None:
        return state, ActionResult.not_found(ORDER_NOT_FOUND)
    if order.status != OrderStatus.ACCEPTED:
        return state, ActionResult.precondition_failed("仅已验收订单可结算")
    next_state = replace(
        _commit(state, replace(order, status=OrderStatus.SETTLED)),
        notifications=notify(
            state, ctx, NotificationCategory.FULFILLMENT, "订单已结算", f"{order.number} 已由 {operator} 完成结算。"
        ),
    )
    return next_state, ActionResult.ok(order.id)


def archive_order(state: AppState, ctx: StoreContext, order_id: str, operator: str) -> Transition:
    order = find_by_id(state.orders, order_id)
    if order is None:
        return state, ActionResult.not_found(ORDER_NOT_FOUND)
    if not order.is_archivable:
        return state, ActionResult.precondition_failed(ARCHIVE_REFUSED)
    next_state = replace(
        _commit(state, replace(order, status=OrderStatus.ARCHIVED)),
        notifications=notify(
            state,
            ctx,
            NotificationCategory.SYSTEM,
            "订单已归档",
            f"{order.number} 已由 {operator} 归档，核心字段转为只读。",
        ),
    )
    return next_state, ActionResult.ok(order.id)


def unarchive_order(state: AppState, ctx: StoreContext, order_id: str, operator: str) -> Transition:
    """archived -> settled, whatever the status before archiving was."""
    order = find_by_id(state.orders, order_id)
    if order is None:
        return state, ActionResult.not_found(ORDER_NOT_FOUND)
    if order.status != OrderStatus.ARCHIVED:
        return state, ActionResult.precondition_failed(UNARCHIVE_REFUSED)
    next_state = replace(
        _commit(state, replace(order, status=OrderStatus.SETTLED)),
        notifications=notify(
            state, ctx, NotificationCategory.SYSTEM, "订单取消归档", f"{order.number} 已由 {operator} 取消归档。"
        ),
    )
    return next_state, ActionResult.ok(order.id)


def submit_order_supplement(
    state: AppState, ctx: StoreContext, data: SubmitOrderSupplementInput
) -> Transition:
    order = find_by_id(state.orders, data.order_id)
    if order is None:
        return state, ActionResult.not_found(ORDER_NOT_FOUND)

    updated = replace(
        order,
        upstream_order_no=data.upstream_order_no.strip(),
        load_site_name=data.load_site_name.strip(),
        estimated_load_at=data.estimated_load_at.strip(),
        supplement_doc_name=(data.supplement_doc_name or "").strip() or None,
        supplement_status=SupplementStatus.PENDING,
        supplement_reviewer=None,
        supplement_note=None,
        status=OrderStatus.PENDING_SUPPLEMENT,
    )
    next_state = replace(
        _commit(state, updated),
        notifications=notify(
            state,
            ctx,
            NotificationCategory.APPROVAL,
            "订单补录待审核",
            f"{order.number} 已提交补录信息，待调度审核。",
        ),
    )
    return next_state, ActionResult.ok(order.id)


def review_order_supplement(
    state: AppState, ctx: StoreContext, data: ReviewOrderSupplementInput
) -> Transition:
    order = find_by_id(state.orders, data.order_id)
    if order is None:
        return state, ActionResult.not_found(ORDER_NOT_FOUND)
    if order.supplement_status != SupplementStatus.PENDING:
        return state, ActionResult.precondition_failed("该订单没有待审核的补录信息")

    approved = data.action == ReviewAction.APPROVE
    updated = replace(
        order,
        supplement_status=SupplementStatus.APPROVED if approved else SupplementStatus.REJECTED,
        supplement_reviewer=data.reviewer,
        supplement_note=data.reason,
        status=OrderStatus.STOCKING if approved else OrderStatus.PENDING_SUPPLEMENT,
    )
    next_state = replace(
        _commit(state, updated),
        notifications=notify(
            state,
            ctx,
            NotificationCategory.APPROVAL,
            "订单补录已通过" if approved else "订单补录已驳回",
            f"{order.number} 补录审核结果：{'通过，进入备货' if approved else '驳回，待修改后重提'}",
        ),
    )
    return next_state, ActionResult.ok(order.id)
