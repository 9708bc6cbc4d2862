"""Finance transitions: deposits and order receivables."""

import logging
from dataclasses import dataclass, replace

from src.lng_account.domain.ledger import credit, make_ledger_record
from src.lng_account.domain.models import DepositInput, DepositRecord, OrderReceiptInput
from src.lng_common.enums import (
    DepositAction,
    DepositStatus,
    LedgerType,
    NotificationCategory,
    PaymentStatus,
)
from src.lng_common.money import round2
from src.lng_common.records import find_by_id, prepend, replace_by_id
from src.lng_common.results import ActionResult
from src.lng_notification.domain.service import notify
from src.lng_order.domain.models import Order
from src.lng_store.state import AppState, StoreContext, Transition

logger = logging.getLogger(__name__)

# Tolerance on the outstanding amount, in yuan
RECEIPT_TOLERANCE = 0.01


@dataclass(frozen=True)
class Receivable:
    order_id: str
    order_no: str
    receivable_amount: float
    received_amount: float
    outstanding_amount: float
    payment_status: PaymentStatus


def register_deposit(state: AppState, ctx: StoreContext, data: DepositInput) -> Transition:
    """Record a pending prepayment claim. The account is untouched until review."""
    if data.amount <= 0:
        return state, ActionResult.invalid(["预存金额必须大于 0"])

    deposit = DepositRecord(
        id=ctx.ids.next_id("dep"),
        customer_name=data.customer_name,
        amount=data.amount,
        paid_at=data.paid_at,
        receipt_name=data.receipt_name,
        status=DepositStatus.PENDING,
    )
    next_state = replace(
        state,
        deposits=prepend(state.deposits, deposit),
        notifications=notify(
            state, ctx, NotificationCategory.FINANCE, "收到预存登记", f"{deposit.customer_name} 提交了预存登记"
        ),
    )
    return next_state, ActionResult.ok(deposit.id)


def review_deposit(
    state: AppState,
    ctx: StoreContext,
    deposit_id: str,
    action: DepositAction,
    reviewer: str,
    reason: str | None = None,
) -> Transition:
    """Confirm or reject a pending deposit.

    Confirming is the only way Account.total grows; it credits total and
    available together and appends a deposit ledger record.
    """
    deposit = find_by_id(state.deposits, deposit_id)
    if deposit is None:
        return state, ActionResult.not_found("预存记录不存在")
    if deposit.status != DepositStatus.PENDING:
        return state, ActionResult.precondition_failed("该预存登记已处理")

    confirmed = action == DepositAction.CONFIRM
    reviewed = replace(
        deposit,
        status=DepositStatus.CONFIRMED if confirmed else DepositStatus.REJECTED,
        reviewer=reviewer,
        reject_reason=None if confirmed else reason,
    )
    next_state = replace(state, deposits=replace_by_id(state.deposits, reviewed))
    if confirmed:
        next_state = replace(
            next_state,
            account=credit(state.account, deposit.amount),
            ledgers=prepend(
                state.ledgers,
                make_ledger_record(ctx, LedgerType.DEPOSIT, deposit.amount, deposit.id, "财务确认预存到账"),
            ),
        )
        logger.info("Deposit %s confirmed by %s", deposit.id, reviewer)
    return next_state, ActionResult.ok(deposit.id)


def receivable_for(state: AppState, order: Order) -> Receivable:
    """What the customer owes on one order, scaled by the settled weight."""
    plan = find_by_id(state.plans, order.plan_id)
    base_amount = plan.total_amount if plan is not None else 0.0
    if plan is not None and order.settlement_weight is not None and plan.planned_volume > 0:
        ratio = order.settlement_weight / plan.planned_volume
    else:
        ratio = 1.0
    receivable_amount = round2(base_amount * ratio)
    return Receivable(
        order_id=order.id,
        order_no=order.number,
        receivable_amount=receivable_amount,
        received_amount=order.received_amount,
        outstanding_amount=round2(max(0.0, receivable_amount - order.received_amount)),
        payment_status=order.payment_status,
    )


def confirm_order_receipt(state: AppState, ctx: StoreContext, data: OrderReceiptInput) -> Transition:
    """Book a customer payment against an order receivable.

    Tracks the order's payment progress only; no account movement, no ledger.
    """
    order = find_by_id(state.orders, data.order_id)
    if order is None:
        return state, ActionResult.not_found("订单不存在")

    receivable = receivable_for(state, order)
    if data.amount <= 0:
        return state, ActionResult.invalid(["请输入本次到账金额"])
    if data.amount > receivable.outstanding_amount + RECEIPT_TOLERANCE:
        return state, ActionResult.invalid(["本次到账金额不能超过剩余应收"])

    received = round2(order.received_amount + data.amount)
    paid = received >= receivable.receivable_amount - RECEIPT_TOLERANCE
    updated = replace(
        order,
        received_amount=received,
        payment_status=PaymentStatus.PAID if paid else PaymentStatus.PARTIAL,
        last_received_at=data.received_at,
        received_by=data.receiver,
        receipt_note=data.note.strip() or None,
    )
    next_state = replace(
        state,
        orders=replace_by_id(state.orders, updated),
        notifications=notify(
            state,
            ctx,
            NotificationCategory.FINANCE,
            "订单到款已确认",
            f"{order.number} 本次到账 {data.amount:.2f} 元，累计 {received:.2f} 元。",
        ),
    )
    return next_state, ActionResult.ok(order.id)
