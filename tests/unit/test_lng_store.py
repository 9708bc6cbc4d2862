"""Unit tests for the DomainStore commit path and snapshot immutability."""

import dataclasses
from dataclasses import replace

import pytest

from src.lng_account.domain.models import Account, DepositInput
from src.lng_common.results import ActionResult, Outcome
from src.lng_store.invariants import verify_account_invariant
from src.lng_store.state import AppState, StoreContext
from src.lng_store.store import DomainStore, get_domain_store


class TestInvariant:
    def test_seed_balanced(self, seed: AppState) -> None:
        verify_account_invariant(seed.account)
        assert seed.account.is_balanced

    def test_unbalanced_account_raises(self) -> None:
        with pytest.raises(AssertionError, match="Account invariant violated"):
            verify_account_invariant(Account(total=100, available=50, occupied=0, frozen=0))

    def test_store_refuses_unbalanced_seed(self, seed: AppState, ctx: StoreContext) -> None:
        with pytest.raises(AssertionError):
            DomainStore(replace(seed, account=Account(1, 0, 0, 0)), ctx)

    def test_unbalanced_transition_not_committed(self, store: DomainStore) -> None:
        before = store.state

        def leak(state: AppState, ctx: StoreContext):
            return replace(state, account=replace(state.account, available=0)), ActionResult.ok()

        with pytest.raises(AssertionError):
            store._apply("leak", leak)
        assert store.state is before


class TestSnapshots:
    def test_records_are_frozen(self, store: DomainStore) -> None:
        with pytest.raises(dataclasses.FrozenInstanceError):
            store.state.account.available = 0  # type: ignore[misc]
        with pytest.raises(dataclasses.FrozenInstanceError):
            store.state.orders[0].status = "archived"  # type: ignore[misc]

    def test_indexes_are_read_only(self, store: DomainStore) -> None:
        with pytest.raises(TypeError):
            store.state.plan_numbers["PL-X"] = "plan-x"  # type: ignore[index]
        assert store.state.order_numbers["OD-20260209-001"] == "order-2001"

    def test_old_snapshot_survives_commit(self, store: DomainStore) -> None:
        old = store.state
        store.mark_notification_read("msg-init-1")
        assert old.notifications[0].read is False
        assert store.state.notifications[0].read is True

    def test_refusal_logged(self, store: DomainStore, caplog) -> None:
        with caplog.at_level("INFO", logger="src.lng_store.store"):
            store.depart_order("order-2001")
        assert "depart_order refused (PRECONDITION_FAILED)" in caplog.text


class TestNotifications:
    def test_mark_read_is_idempotent(self, store: DomainStore) -> None:
        assert store.mark_notification_read("msg-init-1").success
        after_first = store.state
        assert store.mark_notification_read("msg-init-1").success
        assert store.state is after_first

    def test_unknown_notification(self, store: DomainStore) -> None:
        result = store.mark_notification_read("nope")
        assert result.outcome is Outcome.NOT_FOUND


class TestIds:
    def test_ids_unique_across_operations(self, store: DomainStore) -> None:
        store.mark_notification_read("msg-init-1")
        for _ in range(3):
            store.register_deposit(DepositInput("x", 1, "2026-02-10", "r.pdf"))
        ids = [n.id for n in store.state.notifications] + [d.id for d in store.state.deposits]
        assert len(ids) == len(set(ids))


def test_reset_restores_seed(store: DomainStore) -> None:
    store.disable_site("site-01")
    store.reset()
    assert store.state.sites[0].status.value == "enabled"


def test_get_domain_store_is_singleton() -> None:
    assert get_domain_store() is get_domain_store()
