"""Pydantic request schemas for order fulfillment endpoints."""

from pydantic import BaseModel, Field

from src.lng_common.enums import ReviewAction
from src.lng_order.domain.models import (
    ReviewOrderSupplementInput,
    SubmitOrderSupplementInput,
    WeighInput,
)


class WeighRequest(BaseModel):
    weight: float = Field(..., ge=0, description="Tonnes")

    def to_input(self, order_id: str) -> WeighInput:
        return WeighInput(order_id=order_id, weight=self.weight)


class ResolveDiffRequest(BaseModel):
    settlement_weight: float = Field(..., ge=0)
    note: str = ""


class AcceptOrderRequest(BaseModel):
    accepted: bool
    settlement_weight: float = Field(..., ge=0)


class OperatorRequest(BaseModel):
    operator: str = Field(..., min_length=1, max_length=64)


class SubmitSupplementRequest(BaseModel):
    upstream_order_no: str = Field(..., max_length=64)
    load_site_name: str = Field(..., max_length=64)
    estimated_load_at: str
    supplement_doc_name: str | None = None

    def to_input(self, order_id: str) -> SubmitOrderSupplementInput:
        return SubmitOrderSupplementInput(order_id=order_id, **self.model_dump())


class ReviewSupplementRequest(BaseModel):
    action: ReviewAction
    reviewer: str = Field(..., min_length=1, max_length=64)
    reason: str | None = None

    def to_input(self, order_id: str) -> ReviewOrderSupplementInput:
        return ReviewOrderSupplementInput(order_id=order_id, **self.model_dump())
