"""Pydantic schemas for lng_account API."""

from pydantic import BaseModel, Field

from src.lng_account.domain.models import Account, DepositInput, OrderReceiptInput
from src.lng_common.enums import DepositAction
from src.lng_common.money import money_to_display

# ---------------------------------------------------------------------------
# Request schemas
# ---------------------------------------------------------------------------


class DepositRequest(BaseModel):
    customer_name: str = Field(..., min_length=1, max_length=128)
    amount: float = Field(..., description="Yuan; must be > 0")
    paid_at: str = Field(..., description="YYYY-MM-DD")
    receipt_name: str = Field(..., max_length=128)

    def to_input(self) -> DepositInput:
        return DepositInput(**self.model_dump())


class ReviewDepositRequest(BaseModel):
    action: DepositAction
    reviewer: str = Field(..., min_length=1, max_length=64)
    reason: str | None = None


class OrderReceiptRequest(BaseModel):
    order_id: str
    amount: float
    received_at: str = Field(..., description="YYYY-MM-DD")
    receiver: str = Field(..., min_length=1, max_length=64)
    note: str = ""

    def to_input(self) -> OrderReceiptInput:
        return OrderReceiptInput(**self.model_dump())


# ---------------------------------------------------------------------------
# Response schemas
# ---------------------------------------------------------------------------


class AccountResponse(BaseModel):
    total: float
    total_display: str
    available: float
    available_display: str
    occupied: float
    occupied_display: str
    frozen: float
    frozen_display: str

    @classmethod
    def from_domain(cls, account: Account) -> "AccountResponse":
        return cls(
            total=account.total,
            total_display=money_to_display(account.total),
            available=account.available,
            available_display=money_to_display(account.available),
            occupied=account.occupied,
            occupied_display=money_to_display(account.occupied),
            frozen=account.frozen,
            frozen_display=money_to_display(account.frozen),
        )
