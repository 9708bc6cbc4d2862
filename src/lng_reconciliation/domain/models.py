"""Reconciliation domain models.

Statement signature protocol:
    draft --platform stamp--> platform-stamped --customer stamp--> double-confirmed
offline-confirmed is only ever seeded (signed paper copy).
"""

from dataclasses import dataclass

from src.lng_common.enums import StampActor, StatementStatus

INVOICEABLE_STATUSES = (StatementStatus.DOUBLE_CONFIRMED, StatementStatus.OFFLINE_CONFIRMED)


@dataclass(frozen=True)
class StampLog:
    actor_type: StampActor
    actor: str
    stamped_at: str


@dataclass(frozen=True)
class ReconciliationStatement:
    id: str
    number: str
    customer_name: str
    period: str
    status: StatementStatus
    total_amount: float
    order_numbers: tuple[str, ...] = ()
    stamp_logs: tuple[StampLog, ...] = ()

    @property
    def is_invoiceable(self) -> bool:
        return self.status in INVOICEABLE_STATUSES


@dataclass(frozen=True)
class UpstreamArchive:
    id: str
    upstream_company: str
    period: str
    file_name: str
    archived_by: str
    archived_at: str
    note: str | None = None
    status: str = "archived"


@dataclass(frozen=True)
class UploadUpstreamArchiveInput:
    upstream_company: str
    period: str
    file_name: str
    archived_by: str
    note: str | None = None
