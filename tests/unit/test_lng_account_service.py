"""Unit tests for deposits, order receivables and fund conservation."""

import pytest

from src.lng_account.domain.ledger import credit, freeze, occupy, release
from src.lng_account.domain.models import Account, DepositInput, OrderReceiptInput
from src.lng_common.enums import (
    DepositAction,
    DepositStatus,
    LedgerType,
    PaymentStatus,
)
from src.lng_common.records import find_by_id
from src.lng_common.results import Outcome
from src.lng_store.store import DomainStore


class TestLedgerMovements:
    @pytest.mark.parametrize("move", [occupy, release, freeze])
    def test_internal_moves_keep_total(self, move) -> None:
        account = Account(total=100.3, available=50.1, occupied=30.1, frozen=20.1)
        moved = move(account, 10.1)
        assert moved.total == 100.3
        assert moved.is_balanced

    def test_credit_grows_total_and_available(self) -> None:
        account = credit(Account(100, 60, 20, 20), 0.1 + 0.2)
        assert account == Account(100.3, 60.3, 20, 20)

    def test_each_field_rounded(self) -> None:
        account = occupy(Account(1, 1, 0, 0), 0.105)
        assert account.available == 0.9
        assert account.occupied == 0.11


class TestDeposits:
    def test_register_is_pending_and_leaves_account(self, store: DomainStore) -> None:
        account = store.state.account
        result = store.register_deposit(DepositInput("华东能源科技有限公司", 80000, "2026-02-10", "回单.pdf"))
        deposit = store.state.deposits[0]
        assert deposit.id == result.entity_id
        assert deposit.status == DepositStatus.PENDING
        assert store.state.account == account
        assert store.state.notifications[0].title == "收到预存登记"

    @pytest.mark.parametrize("amount", [0, -5])
    def test_register_rejects_non_positive(self, store: DomainStore, amount: float) -> None:
        result = store.register_deposit(DepositInput("x", amount, "2026-02-10", "r.pdf"))
        assert result.outcome is Outcome.INVALID
        assert result.error == "预存金额必须大于 0"

    def test_confirm_credits_account(self, store: DomainStore) -> None:
        account = store.state.account
        notifications = store.state.notifications
        assert store.review_deposit("dep-1", DepositAction.CONFIRM, "陈会计").success

        assert store.state.account.total == account.total + 50000
        assert store.state.account.available == account.available + 50000
        assert store.state.account.occupied == account.occupied
        assert store.state.account.frozen == account.frozen
        ledger = store.state.ledgers[0]
        assert ledger.type == LedgerType.DEPOSIT
        assert ledger.related_no == "dep-1"
        assert ledger.note == "财务确认预存到账"
        deposit = find_by_id(store.state.deposits, "dep-1")
        assert deposit.status == DepositStatus.CONFIRMED
        assert deposit.reviewer == "陈会计"
        assert store.state.notifications == notifications

    def test_confirm_ledger_amount_is_rounded(self, store: DomainStore) -> None:
        account = store.state.account
        deposit_id = store.register_deposit(
            DepositInput("华东能源科技有限公司", 0.1 + 0.2, "2026-02-10", "回单.pdf")
        ).entity_id
        assert store.review_deposit(deposit_id, DepositAction.CONFIRM, "陈会计").success

        assert store.state.ledgers[0].amount == 0.3
        assert store.state.account.total == account.total + 0.3

    def test_reject_keeps_account(self, store: DomainStore) -> None:
        account = store.state.account
        store.review_deposit("dep-1", DepositAction.REJECT, "陈会计", "回单不清晰")
        deposit = find_by_id(store.state.deposits, "dep-1")
        assert deposit.status == DepositStatus.REJECTED
        assert deposit.reject_reason == "回单不清晰"
        assert store.state.account == account

    def test_review_twice_refused(self, store: DomainStore) -> None:
        store.review_deposit("dep-1", DepositAction.CONFIRM, "陈会计")
        before = store.state
        result = store.review_deposit("dep-1", DepositAction.CONFIRM, "陈会计")
        assert result.outcome is Outcome.PRECONDITION_FAILED
        assert store.state is before

    def test_unknown_deposit(self, store: DomainStore) -> None:
        assert store.review_deposit("nope", DepositAction.CONFIRM, "x").error == "预存记录不存在"


class TestReceivables:
    def test_scaled_by_settlement_weight(self, store: DomainStore) -> None:
        (receivable,) = store.receivables()
        assert receivable.order_no == "OD-20260209-001"
        assert receivable.receivable_amount == 72287.78
        assert receivable.outstanding_amount == 72287.78
        assert receivable.payment_status == PaymentStatus.PENDING

    def test_partial_then_paid(self, store: DomainStore) -> None:
        account = store.state.account
        ledgers = store.state.ledgers

        store.confirm_order_receipt(OrderReceiptInput("order-2001", 50000, "2026-02-10", "陈会计"))
        order = find_by_id(store.state.orders, "order-2001")
        assert order.payment_status == PaymentStatus.PARTIAL
        assert order.received_amount == 50000
        assert store.receivables()[0].outstanding_amount == 22287.78

        store.confirm_order_receipt(
            OrderReceiptInput("order-2001", 22287.78, "2026-02-11", "陈会计", "尾款")
        )
        order = find_by_id(store.state.orders, "order-2001")
        assert order.payment_status == PaymentStatus.PAID
        assert order.receipt_note == "尾款"
        assert order.last_received_at == "2026-02-11"
        assert store.state.account == account
        assert store.state.ledgers == ledgers

    def test_over_payment_rejected(self, store: DomainStore) -> None:
        before = store.state
        result = store.confirm_order_receipt(OrderReceiptInput("order-2001", 72287.80, "2026-02-10", "x"))
        assert result.error == "本次到账金额不能超过剩余应收"
        assert store.state is before

    def test_zero_amount(self, store: DomainStore) -> None:
        result = store.confirm_order_receipt(OrderReceiptInput("order-2001", 0, "2026-02-10", "x"))
        assert result.error == "请输入本次到账金额"

    def test_unknown_order(self, store: DomainStore) -> None:
        result = store.confirm_order_receipt(OrderReceiptInput("nope", 1, "2026-02-10", "x"))
        assert result.outcome is Outcome.NOT_FOUND
