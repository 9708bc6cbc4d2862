"""Finance domain models: pure dataclasses, no framework dependency."""

from dataclasses import dataclass

from src.lng_common.enums import DepositStatus, LedgerType
from src.lng_common.money import round2


@dataclass(frozen=True)
class Account:
    """Funds of the active customer, in yuan.

    Invariant: total == round2(available + occupied + frozen).
    occupied: reserved by submitted plans; frozen: held by approved plans.
    """

    total: float
    available: float
    occupied: float
    frozen: float

    @property
    def is_balanced(self) -> bool:
        return round2(self.total) == round2(self.available + self.occupied + self.frozen)


@dataclass(frozen=True)
class LedgerRecord:
    id: str
    type: LedgerType
    amount: float
    related_no: str  # plan/order number or deposit id
    note: str
    created_at: str


@dataclass(frozen=True)
class DepositRecord:
    id: str
    customer_name: str
    amount: float
    paid_at: str
    receipt_name: str
    status: DepositStatus
    reviewer: str | None = None
    reject_reason: str | None = None


@dataclass(frozen=True)
class DepositInput:
    customer_name: str
    amount: float
    paid_at: str
    receipt_name: str


@dataclass(frozen=True)
class OrderReceiptInput:
    order_id: str
    amount: float
    received_at: str
    receiver: str
    note: str = ""
