"""Unit tests for the plan lifecycle and fund reservation."""

from dataclasses import replace

import pytest

from src.lng_account.domain.models import Account
from src.lng_common.enums import (
    LedgerType,
    OrderStatus,
    PaymentMethod,
    PlanStatus,
    ReviewAction,
    TransportMode,
    WeighDiffRule,
)
from src.lng_common.records import find_by_id
from src.lng_common.results import Outcome
from src.lng_plan.domain.models import PlanInput, ReviewPlanInput
from src.lng_plan.domain.service import compute_amounts, create_plan, review_plan
from src.lng_store.state import AppState, StoreContext
from src.lng_store.store import DomainStore


def _plan_input(**overrides) -> PlanInput:
    base = dict(
        site_id="site-01",
        price_id="price-public-1",
        planned_volume=30,
        freight_fee=1000,
        transport_mode=TransportMode.UPSTREAM,
        payment_method=PaymentMethod.PREPAID,
        weigh_diff_rule=WeighDiffRule.UNLOAD,
        agreement_checked=True,
    )
    base.update(overrides)
    return PlanInput(**base)


def _carrier_input(**overrides) -> PlanInput:
    return _plan_input(
        **{
            "transport_mode": TransportMode.CARRIER,
            "vehicle_id": "vehicle-01",
            "driver_id": "person-01",
            "escort_id": "person-02",
            **overrides,
        }
    )


class TestComputeAmounts:
    def test_estimated_and_total(self) -> None:
        assert compute_amounts(3950, 30, 1000) == (118500.0, 119500.0)

    def test_rounded_once(self) -> None:
        assert compute_amounts(3950.55, 1.333, 0.1) == (5266.08, 5266.18)


class TestCreatePlan:
    def test_over_balance_rejected(self, store: DomainStore) -> None:
        before = store.state
        result = store.create_plan(
            _carrier_input(price_id="price-exclusive-a", planned_volume=120, freight_fee=3000)
        )
        assert result.outcome is Outcome.INVALID
        assert "余额不足" in result.errors[0]
        assert "¥507,000.00" in result.errors[0]
        assert store.state is before

    def test_success_occupies_total(self, store: DomainStore) -> None:
        result = store.create_plan(_plan_input())
        assert result.success
        plan = find_by_id(store.state.plans, result.entity_id)
        assert plan is not None
        assert plan.status == PlanStatus.SUBMITTED
        assert plan.estimated_amount == 118500
        assert plan.total_amount == 119500
        assert plan.customer_id == "customer-a"
        assert store.state.account.available == 40500
        assert store.state.account.occupied == 159500
        assert store.state.account.total == 520000

    def test_success_writes_ledger_and_notification(self, store: DomainStore) -> None:
        result = store.create_plan(_plan_input())
        plan = find_by_id(store.state.plans, result.entity_id)
        ledger = store.state.ledgers[0]
        assert ledger.type == LedgerType.OCCUPY
        assert ledger.amount == 119500
        assert ledger.related_no == plan.number
        assert store.state.notifications[0].title == "新计划待审批"

    def test_plan_number_format_and_index(self, store: DomainStore) -> None:
        old_index = store.state.plan_numbers
        result = store.create_plan(_plan_input())
        plan = find_by_id(store.state.plans, result.entity_id)
        assert plan.number.startswith("PL-20260210-")
        assert store.state.plan_numbers[plan.number] == plan.id
        assert plan.number not in old_index

    def test_collects_all_errors(self, store: DomainStore) -> None:
        before = store.state
        result = store.create_plan(
            _plan_input(
                site_id="site-02",
                price_id="missing",
                planned_volume=0,
                agreement_checked=False,
                transport_mode=TransportMode.CARRIER,
                driver_id="person-03",
            )
        )
        assert result.errors == (
            "站点 [常州西港卸气站] 当前处于维护中（2026-02-08 ~ 2026-02-12）",
            "请选择有效气价",
            "计划量必须大于 0",
            "请先勾选费用确认条款",
            "自提/承运模式必须选择车辆",
            "司机 [李凯] 资质已过期（2025-12-31）",
            "请选择押运员",
        )
        assert store.state is before

    def test_invalid_vehicle_rejected(self, store: DomainStore) -> None:
        result = store.create_plan(_carrier_input(vehicle_id="vehicle-02"))
        assert result.errors == ("车辆 [苏B·LNG12] 运输资质已过期（2026-01-15）",)

    def test_disabled_site_rejected(self, store: DomainStore) -> None:
        store.disable_site("site-01")
        result = store.create_plan(_plan_input())
        assert result.errors == ("站点 [苏州工业园卸气站] 已停用",)

    def test_unpublished_price_rejected(self, store: DomainStore) -> None:
        store.take_down_gas_price("price-public-1", "市场部-周婷")
        result = store.create_plan(_plan_input())
        assert result.errors == ("所选气价未发布，不可用于计划申报",)

    def test_upstream_mode_skips_transport_checks(self, store: DomainStore) -> None:
        assert store.create_plan(_plan_input(vehicle_id="vehicle-02")).success

    def test_pure_function_returns_same_state_on_failure(
        self, seed: AppState, ctx: StoreContext
    ) -> None:
        next_state, result = create_plan(seed, ctx, _plan_input(planned_volume=-1))
        assert next_state is seed
        assert not result.success


class TestReviewPlan:
    def test_approve_spawns_one_order_and_freezes(self, store: DomainStore) -> None:
        plan_id = store.create_plan(_plan_input()).entity_id
        orders_before = len(store.state.orders)
        account = store.state.account

        result = store.review_plan(ReviewPlanInput(plan_id, ReviewAction.APPROVE, "市场部-周婷"))

        assert result.success
        assert len(store.state.orders) == orders_before + 1
        order = find_by_id(store.state.orders, result.entity_id)
        assert order.plan_id == plan_id
        assert order.status == OrderStatus.ORDERED
        assert order.settlement_weight == 30
        assert order.threshold == 0.5
        assert order.diff_abnormal is False
        assert store.state.order_numbers[order.number] == order.id
        assert store.state.account.frozen - account.frozen == 119500
        assert account.occupied - store.state.account.occupied == 119500
        assert store.state.account.available == account.available

    def test_approve_ledger_references_order(self, store: DomainStore) -> None:
        plan_id = store.create_plan(_plan_input()).entity_id
        order_id = store.review_plan(ReviewPlanInput(plan_id, ReviewAction.APPROVE, "周婷")).entity_id
        order = find_by_id(store.state.orders, order_id)
        assert store.state.ledgers[0].type == LedgerType.FREEZE
        assert store.state.ledgers[0].related_no == order.number

    def test_reject_releases_and_defaults_reason(self, store: DomainStore) -> None:
        account = store.state.account
        result = store.review_plan(ReviewPlanInput("plan-1001", ReviewAction.REJECT, "周婷"))
        assert result.success
        plan = find_by_id(store.state.plans, "plan-1001")
        assert plan.status == PlanStatus.RETURNED
        assert plan.reject_reason == "信息需补充"
        assert plan.reviewer == "周婷"
        assert store.state.account.available - account.available == 95600
        assert account.occupied - store.state.account.occupied == 95600
        assert store.state.ledgers[0].type == LedgerType.RELEASE

    def test_approve_returned_freezes_again(self, store: DomainStore) -> None:
        plan_id = store.create_plan(_plan_input()).entity_id
        store.review_plan(ReviewPlanInput(plan_id, ReviewAction.REJECT, "周婷"))
        account = store.state.account

        result = store.review_plan(ReviewPlanInput(plan_id, ReviewAction.APPROVE, "周婷"))

        assert result.success
        assert find_by_id(store.state.plans, plan_id).status == PlanStatus.APPROVED
        assert account.occupied - store.state.account.occupied == 119500
        assert store.state.account.frozen - account.frozen == 119500
        assert store.state.account == Account(520000, 160000, -79500, 439500)
        assert store.state.account.is_balanced

    def test_approved_plan_cannot_be_reviewed(self, store: DomainStore) -> None:
        before = store.state
        result = store.review_plan(ReviewPlanInput("plan-1002", ReviewAction.REJECT, "周婷"))
        assert result.outcome is Outcome.PRECONDITION_FAILED
        assert store.state is before

    def test_missing_plan(self, seed: AppState, ctx: StoreContext) -> None:
        next_state, result = review_plan(seed, ctx, ReviewPlanInput("nope", ReviewAction.APPROVE, "x"))
        assert result.outcome is Outcome.NOT_FOUND
        assert next_state is seed


class TestCancelPlan:
    def test_cancel_submitted_releases(self, store: DomainStore) -> None:
        account = store.state.account
        assert store.cancel_plan("plan-1001", "客户取消").success
        plan = find_by_id(store.state.plans, "plan-1001")
        assert plan.status == PlanStatus.CANCELLED
        assert plan.reject_reason == "客户取消"
        assert store.state.account.available - account.available == 95600
        assert store.state.ledgers[0].note == "计划取消释放占用"

    def test_cancel_returned_releases_again(self, store: DomainStore) -> None:
        plan_id = store.create_plan(_plan_input()).entity_id
        store.review_plan(ReviewPlanInput(plan_id, ReviewAction.REJECT, "周婷"))
        account = store.state.account
        assert account == Account(520000, 160000, 40000, 320000)

        assert store.cancel_plan(plan_id, "客户取消").success

        assert store.state.account.available - account.available == 119500
        assert account.occupied - store.state.account.occupied == 119500
        assert store.state.account == Account(520000, 279500, -79500, 320000)
        assert store.state.ledgers[0].type == LedgerType.RELEASE
        assert store.state.ledgers[0].amount == 119500

    @pytest.mark.parametrize("status", [PlanStatus.APPROVED, PlanStatus.CANCELLED])
    def test_cancel_refused(self, seed: AppState, ctx: StoreContext, status: PlanStatus) -> None:
        plan = replace(find_by_id(seed.plans, "plan-1001"), status=status)
        state = replace(seed, plans=(plan,))
        store = DomainStore(state, ctx)
        result = store.cancel_plan(plan.id, "x")
        assert result.outcome is Outcome.PRECONDITION_FAILED
        assert store.state is state

    def test_cancel_draft_moves_no_money(self, seed: AppState, ctx: StoreContext) -> None:
        draft = replace(find_by_id(seed.plans, "plan-1001"), status=PlanStatus.DRAFT)
        store = DomainStore(replace(seed, plans=(draft,)), ctx)
        ledgers_before = store.state.ledgers
        assert store.cancel_plan(draft.id, "不需要了").success
        assert store.state.account == seed.account
        assert store.state.ledgers == ledgers_before
        assert find_by_id(store.state.plans, draft.id).status == PlanStatus.CANCELLED


class TestResubmitPlan:
    def test_returned_plan_occupies_again(self, store: DomainStore) -> None:
        plan_id = store.create_plan(_plan_input()).entity_id
        store.review_plan(ReviewPlanInput(plan_id, ReviewAction.REJECT, "周婷", "补充资料"))
        account = store.state.account

        assert store.resubmit_plan(plan_id).success

        plan = find_by_id(store.state.plans, plan_id)
        assert plan.status == PlanStatus.SUBMITTED
        assert plan.reject_reason is None
        assert account.available - store.state.account.available == 119500
        assert store.state.ledgers[0].type == LedgerType.OCCUPY

    def test_only_returned_plans(self, store: DomainStore) -> None:
        assert store.resubmit_plan("plan-1001").outcome is Outcome.PRECONDITION_FAILED

    def test_insufficient_balance(self, store: DomainStore) -> None:
        plan_id = store.create_plan(_plan_input()).entity_id
        store.review_plan(ReviewPlanInput(plan_id, ReviewAction.REJECT, "周婷"))
        # spend the released funds on another plan
        store.create_plan(_plan_input(planned_volume=35, freight_fee=0))
        before = store.state
        result = store.resubmit_plan(plan_id)
        assert result.outcome is Outcome.INVALID
        assert "余额不足" in result.error
        assert store.state is before


class TestDailyPlanReport:
    def test_snapshots_plans_of_the_day(self, store: DomainStore) -> None:
        plan_id = store.create_plan(_plan_input()).entity_id
        result = store.generate_daily_plan_report("2026-02-10", "市场部-系统任务")
        report = store.state.daily_plan_reports[0]
        assert report.id == result.entity_id
        assert [row.plan_id for row in report.plans] == [plan_id]
        assert report.generated_at == "2026-02-10T09:00:00.000Z"

    def test_seeded_day(self, store: DomainStore) -> None:
        store.generate_daily_plan_report("2026-02-09", "x")
        assert [row.number for row in store.state.daily_plan_reports[0].plans] == ["PL-20260209-001"]
