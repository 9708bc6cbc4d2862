"""Order domain model: pure dataclass, no framework dependency.

Status flow:
    ordered → (pending-supplement → stocking) → loaded → transporting
      → pending-acceptance → accepted → settled → archived
    settling is the exception branch: weigh difference over threshold,
    rejected acceptance, or an approved exception case.
"""

from dataclasses import dataclass

from src.lng_common.enums import (
    OrderStatus,
    PaymentStatus,
    ReviewAction,
    SupplementStatus,
    TransportMode,
    WeighDiffRule,
)

ARCHIVABLE_STATUSES = (OrderStatus.ACCEPTED, OrderStatus.SETTLED)


@dataclass(frozen=True)
class Order:
    id: str
    number: str
    plan_id: str
    customer_name: str
    site_name: str
    transport_mode: TransportMode
    weigh_diff_rule: WeighDiffRule
    status: OrderStatus
    threshold: float  # tonnes
    diff_abnormal: bool = False
    # Upstream supplement (filled by the upstream/dispatch side)
    upstream_order_no: str | None = None
    load_site_name: str | None = None
    estimated_load_at: str | None = None
    supplement_doc_name: str | None = None
    supplement_status: SupplementStatus | None = None
    supplement_reviewer: str | None = None
    supplement_note: str | None = None
    # Weighing
    load_weight: float | None = None
    unload_weight: float | None = None
    settlement_weight: float | None = None
    exception_note: str | None = None
    # Receivable tracking
    payment_status: PaymentStatus = PaymentStatus.PENDING
    received_amount: float = 0.0
    last_received_at: str | None = None
    received_by: str | None = None
    receipt_note: str | None = None

    @property
    def is_archivable(self) -> bool:
        return self.status in ARCHIVABLE_STATUSES


@dataclass(frozen=True)
class WeighInput:
    order_id: str
    weight: float  # tonnes


@dataclass(frozen=True)
class SubmitOrderSupplementInput:
    order_id: str
    upstream_order_no: str
    load_site_name: str
    estimated_load_at: str
    supplement_doc_name: str | None = None


@dataclass(frozen=True)
class ReviewOrderSupplementInput:
    order_id: str
    action: ReviewAction
    reviewer: str
    reason: str | None = None
