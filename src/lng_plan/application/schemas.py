"""Pydantic schemas for lng_plan API."""

from pydantic import BaseModel, Field

from src.lng_common.enums import PaymentMethod, ReviewAction, TransportMode, WeighDiffRule
from src.lng_common.money import money_to_display
from src.lng_plan.domain.models import Plan, PlanInput, ReviewPlanInput

# ---------------------------------------------------------------------------
# Request schemas
# ---------------------------------------------------------------------------


class CreatePlanRequest(BaseModel):
    site_id: str
    price_id: str
    planned_volume: float = Field(..., description="Tonnes; must be > 0")
    freight_fee: float = Field(0.0, ge=0)
    transport_mode: TransportMode
    payment_method: PaymentMethod = PaymentMethod.PREPAID
    weigh_diff_rule: WeighDiffRule = WeighDiffRule.UNLOAD
    agreement_checked: bool = False
    carrier_id: str | None = None
    vehicle_id: str | None = None
    driver_id: str | None = None
    escort_id: str | None = None

    def to_input(self) -> PlanInput:
        return PlanInput(**self.model_dump())


class ReviewPlanRequest(BaseModel):
    action: ReviewAction
    reviewer: str = Field(..., min_length=1, max_length=64)
    reason: str | None = None

    def to_input(self, plan_id: str) -> ReviewPlanInput:
        return ReviewPlanInput(plan_id=plan_id, action=self.action, reviewer=self.reviewer, reason=self.reason)


class CancelPlanRequest(BaseModel):
    reason: str = Field(..., min_length=1, max_length=256)


class DailyPlanReportRequest(BaseModel):
    report_date: str = Field(..., description="YYYY-MM-DD")
    generated_by: str = Field(..., min_length=1, max_length=64)


# ---------------------------------------------------------------------------
# Response schemas
# ---------------------------------------------------------------------------


class PlanAmountsResponse(BaseModel):
    estimated_amount: float
    estimated_amount_display: str
    total_amount: float
    total_amount_display: str

    @classmethod
    def from_domain(cls, plan: Plan) -> "PlanAmountsResponse":
        return cls(
            estimated_amount=plan.estimated_amount,
            estimated_amount_display=money_to_display(plan.estimated_amount),
            total_amount=plan.total_amount,
            total_amount_display=money_to_display(plan.total_amount),
        )
