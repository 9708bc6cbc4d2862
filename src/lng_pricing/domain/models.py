"""Gas price domain model: pure dataclass."""

from dataclasses import dataclass

from src.lng_common.enums import GasPriceStatus, PriceScope


@dataclass(frozen=True)
class GasPrice:
    id: str
    source_company: str
    source_site: str
    scope: PriceScope
    price: float  # yuan per tonne
    valid_from: str  # YYYY-MM-DD
    valid_to: str
    tax_included: bool
    note: str
    status: GasPriceStatus
    customer_id: str | None = None  # required when scope is exclusive
    updated_by: str | None = None
    updated_at: str | None = None

    def is_visible_to(self, customer_id: str) -> bool:
        """Terminal visibility: published, and public or exclusive to this customer."""
        if self.status != GasPriceStatus.PUBLISHED:
            return False
        if self.scope == PriceScope.PUBLIC:
            return True
        return self.customer_id == customer_id


@dataclass(frozen=True)
class GasPriceDraftInput:
    source_company: str
    source_site: str
    scope: PriceScope
    price: float
    valid_from: str
    valid_to: str
    tax_included: bool = True
    note: str = ""
    customer_id: str | None = None
