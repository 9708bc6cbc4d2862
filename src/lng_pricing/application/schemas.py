"""Pydantic request schemas for gas price endpoints."""

from pydantic import BaseModel, Field

from src.lng_common.enums import PriceScope
from src.lng_pricing.domain.models import GasPriceDraftInput


class GasPriceDraftRequest(BaseModel):
    source_company: str = Field(..., max_length=64)
    source_site: str = Field(..., max_length=64)
    scope: PriceScope
    price: float = Field(..., description="Yuan per tonne; must be > 0")
    valid_from: str = Field(..., description="YYYY-MM-DD")
    valid_to: str = Field(..., description="YYYY-MM-DD")
    tax_included: bool = True
    note: str = ""
    customer_id: str | None = None

    def to_input(self) -> GasPriceDraftInput:
        return GasPriceDraftInput(**self.model_dump())


class OperatorRequest(BaseModel):
    operator: str = Field(..., min_length=1, max_length=64)
