"""Immutable state snapshot and the context every transition runs in.

A transition is a pure function ``(state, ctx, ...) -> (next_state, result)``.
It never mutates ``state``; when it fails it hands back the very same
snapshot object, so callers can compare by identity.
"""

from collections.abc import Callable, Iterable, Mapping
from dataclasses import dataclass, field
from datetime import datetime

from src.lng_account.domain.models import Account, DepositRecord, LedgerRecord
from src.lng_auth.domain.models import AuthUser
from src.lng_common.datetime_utils import iso_date, to_iso, utc_now
from src.lng_common.enums import RoleKey
from src.lng_common.id_generator import IdFactory, SequenceCounter
from src.lng_common.records import frozen_index
from src.lng_common.results import ActionResult
from src.lng_exception.domain.models import ExceptionCase
from src.lng_invoice.domain.models import InvoiceApplication, InvoiceItem
from src.lng_masterdata.domain.models import Person, Site, Vehicle
from src.lng_notification.domain.models import NotificationItem
from src.lng_onboarding.domain.models import OnboardingApplication
from src.lng_order.domain.models import Order
from src.lng_plan.domain.models import DailyPlanReport, Plan
from src.lng_pricing.domain.models import GasPrice
from src.lng_reconciliation.domain.models import ReconciliationStatement, UpstreamArchive


@dataclass(frozen=True)
class AppState:
    account: Account = field(default_factory=lambda: Account(0.0, 0.0, 0.0, 0.0))
    is_authenticated: bool = False
    current_user: AuthUser | None = None
    current_role: RoleKey = RoleKey.TERMINAL
    active_customer_id: str = ""
    active_customer_name: str = ""
    auth_users: tuple[AuthUser, ...] = ()
    sites: tuple[Site, ...] = ()
    vehicles: tuple[Vehicle, ...] = ()
    personnel: tuple[Person, ...] = ()
    gas_prices: tuple[GasPrice, ...] = ()
    plans: tuple[Plan, ...] = ()
    orders: tuple[Order, ...] = ()
    ledgers: tuple[LedgerRecord, ...] = ()
    deposits: tuple[DepositRecord, ...] = ()
    notifications: tuple[NotificationItem, ...] = ()
    reconciliations: tuple[ReconciliationStatement, ...] = ()
    invoices: tuple[InvoiceItem, ...] = ()
    upstream_archives: tuple[UpstreamArchive, ...] = ()
    invoice_applications: tuple[InvoiceApplication, ...] = ()
    onboarding_applications: tuple[OnboardingApplication, ...] = ()
    exceptions: tuple[ExceptionCase, ...] = ()
    daily_plan_reports: tuple[DailyPlanReport, ...] = ()
    # Secondary indexes: business number -> internal id
    plan_numbers: Mapping[str, str] = field(default_factory=frozen_index)
    order_numbers: Mapping[str, str] = field(default_factory=frozen_index)


Transition = tuple[AppState, ActionResult]


def build_number_index(records: Iterable[Plan | Order]) -> Mapping[str, str]:
    return frozen_index({record.number: record.id for record in records})


@dataclass
class StoreContext:
    """Injected id source and clock; one per store instance."""

    ids: IdFactory
    clock: Callable[[], datetime] = utc_now

    @classmethod
    def create(
        cls,
        clock: Callable[[], datetime] = utc_now,
        sequence_start: int = 10,
    ) -> "StoreContext":
        return cls(ids=IdFactory(SequenceCounter(sequence_start), clock), clock=clock)

    def now_iso(self) -> str:
        return to_iso(self.clock())

    def today(self) -> str:
        return iso_date(self.clock())
