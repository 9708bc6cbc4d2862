"""Plan domain models: pure dataclasses, no framework dependency."""

from dataclasses import dataclass

from src.lng_common.enums import (
    PaymentMethod,
    PlanStatus,
    ReviewAction,
    TransportMode,
    WeighDiffRule,
)

# Statuses from which review releases or freezes totalAmount out of occupied.
# A returned plan no longer holds a reservation, so cancelling or approving it
# moves the amount out of occupied a second time and occupied can go negative.
RESERVING_STATUSES = (PlanStatus.SUBMITTED, PlanStatus.RETURNED)


@dataclass(frozen=True)
class Plan:
    id: str
    number: str
    customer_id: str
    customer_name: str
    site_id: str
    site_name: str
    price_id: str
    planned_volume: float  # tonnes
    unit_price: float
    estimated_amount: float  # round2(unit_price * planned_volume)
    freight_fee: float
    total_amount: float  # round2(estimated_amount + freight_fee)
    transport_mode: TransportMode
    payment_method: PaymentMethod
    weigh_diff_rule: WeighDiffRule
    agreement_checked: bool
    status: PlanStatus
    submitted_at: str
    carrier_id: str | None = None
    vehicle_id: str | None = None
    driver_id: str | None = None
    escort_id: str | None = None
    reviewer: str | None = None
    reject_reason: str | None = None


@dataclass(frozen=True)
class PlanInput:
    site_id: str
    price_id: str
    planned_volume: float
    freight_fee: float
    transport_mode: TransportMode
    payment_method: PaymentMethod
    weigh_diff_rule: WeighDiffRule
    agreement_checked: bool
    carrier_id: str | None = None
    vehicle_id: str | None = None
    driver_id: str | None = None
    escort_id: str | None = None


@dataclass(frozen=True)
class ReviewPlanInput:
    plan_id: str
    action: ReviewAction
    reviewer: str
    reason: str | None = None


@dataclass(frozen=True)
class DailyPlanReportPlan:
    plan_id: str
    number: str
    customer_name: str
    site_name: str
    planned_volume: float
    transport_mode: TransportMode
    status: PlanStatus
    submitted_at: str


@dataclass(frozen=True)
class DailyPlanReport:
    id: str
    report_date: str  # YYYY-MM-DD
    generated_at: str
    generated_by: str
    plans: tuple[DailyPlanReportPlan, ...] = ()
