"""DomainStore: the single-writer state container.

Each public method runs one transition against the current snapshot, checks
the account invariant on the result and commits it as one replace. Failed
transitions commit nothing. Callers get immutable records back, so nothing
they do to a returned value can reach the stored snapshot.
"""

import logging
import threading
from collections.abc import Callable
from typing import Any

from config.settings import settings
from src.lng_account.domain import service as account_service
from src.lng_account.domain.models import DepositInput, OrderReceiptInput
from src.lng_account.domain.service import Receivable, receivable_for
from src.lng_auth.domain import service as auth_service
from src.lng_auth.domain.models import LoginInput, RegisterInput, ResetPasswordInput
from src.lng_common.enums import DepositAction, RoleKey, StampActor
from src.lng_common.results import ActionResult, Outcome
from src.lng_exception.domain import service as exception_service
from src.lng_exception.domain.models import CreateExceptionInput, ProcessExceptionInput
from src.lng_invoice.domain import service as invoice_service
from src.lng_invoice.domain.models import (
    CreateInvoiceApplicationInput,
    IssueInvoiceInput,
    ReviewInvoiceApplicationInput,
)
from src.lng_masterdata.domain import service as masterdata_service
from src.lng_masterdata.domain.models import (
    AddPersonInput,
    AddSiteInput,
    AddVehicleInput,
    PersonPatch,
    SitePatch,
    VehiclePatch,
)
from src.lng_notification.domain.service import mark_notification_read
from src.lng_onboarding.domain import service as onboarding_service
from src.lng_onboarding.domain.models import (
    ReviewOnboardingInput,
    SubmitOnboardingMaterialsInput,
    UploadOnboardingContractInput,
)
from src.lng_order.domain import service as order_service
from src.lng_order.domain.models import (
    ReviewOrderSupplementInput,
    SubmitOrderSupplementInput,
    WeighInput,
)
from src.lng_plan.domain import service as plan_service
from src.lng_plan.domain.models import PlanInput, ReviewPlanInput
from src.lng_pricing.domain import service as pricing_service
from src.lng_pricing.domain.models import GasPrice, GasPriceDraftInput
from src.lng_reconciliation.domain import service as reconciliation_service
from src.lng_reconciliation.domain.models import UploadUpstreamArchiveInput
from src.lng_store.invariants import verify_account_invariant
from src.lng_store.seed import default_seed
from src.lng_store.state import AppState, StoreContext, Transition

logger = logging.getLogger(__name__)


class DomainStore:
    def __init__(self, state: AppState | None = None, ctx: StoreContext | None = None) -> None:
        self._ctx = ctx or StoreContext.create()
        self._state = state if state is not None else default_seed()
        self._lock = threading.Lock()
        verify_account_invariant(self._state.account)

    @property
    def state(self) -> AppState:
        return self._state

    def reset(self, state: AppState | None = None) -> None:
        """Replace the whole snapshot (demo reset). The id sequence keeps counting."""
        with self._lock:
            next_state = state if state is not None else default_seed()
            verify_account_invariant(next_state.account)
            self._state = next_state
        logger.info("Store reset")

    def _apply(self, name: str, transition: Callable[..., Transition], *args: Any) -> ActionResult:
        with self._lock:
            next_state, result = transition(self._state, self._ctx, *args)
            if result.outcome is not Outcome.OK:
                logger.info("%s refused (%s): %s", name, result.outcome.value, "; ".join(result.errors))
                return result
            verify_account_invariant(next_state.account)
            self._state = next_state
        logger.debug("%s committed -> %s", name, result.entity_id)
        return result

    # --- Selectors ---

    def visible_gas_prices(self) -> tuple[GasPrice, ...]:
        return pricing_service.visible_gas_prices(self._state)

    def receivables(self) -> tuple[Receivable, ...]:
        state = self._state
        return tuple(receivable_for(state, order) for order in state.orders)

    # --- Auth ---

    def login(self, data: LoginInput) -> ActionResult:
        return self._apply("login", auth_service.login, data)

    def register_account(self, data: RegisterInput) -> ActionResult:
        return self._apply("register_account", auth_service.register_account, data)

    def reset_password(self, data: ResetPasswordInput) -> ActionResult:
        return self._apply("reset_password", auth_service.reset_password, data)

    def logout(self) -> ActionResult:
        return self._apply("logout", auth_service.logout)

    def switch_role(self, role: RoleKey) -> ActionResult:
        return self._apply("switch_role", auth_service.switch_role, role)

    # --- Master data ---

    def add_site(self, data: AddSiteInput) -> ActionResult:
        return self._apply("add_site", masterdata_service.add_site, data)

    def update_site(self, site_id: str, patch: SitePatch) -> ActionResult:
        return self._apply("update_site", masterdata_service.update_site, site_id, patch)

    def disable_site(self, site_id: str) -> ActionResult:
        return self._apply("disable_site", masterdata_service.disable_site, site_id)

    def add_vehicle(self, data: AddVehicleInput) -> ActionResult:
        return self._apply("add_vehicle", masterdata_service.add_vehicle, data)

    def update_vehicle(self, vehicle_id: str, patch: VehiclePatch) -> ActionResult:
        return self._apply("update_vehicle", masterdata_service.update_vehicle, vehicle_id, patch)

    def disable_vehicle(self, vehicle_id: str) -> ActionResult:
        return self._apply("disable_vehicle", masterdata_service.disable_vehicle, vehicle_id)

    def add_person(self, data: AddPersonInput) -> ActionResult:
        return self._apply("add_person", masterdata_service.add_person, data)

    def update_person(self, person_id: str, patch: PersonPatch) -> ActionResult:
        return self._apply("update_person", masterdata_service.update_person, person_id, patch)

    def disable_person(self, person_id: str) -> ActionResult:
        return self._apply("disable_person", masterdata_service.disable_person, person_id)

    # --- Gas prices ---

    def save_gas_price_draft(self, data: GasPriceDraftInput) -> ActionResult:
        return self._apply("save_gas_price_draft", pricing_service.save_gas_price_draft, data)

    def publish_gas_price(self, price_id: str, operator: str) -> ActionResult:
        return self._apply("publish_gas_price", pricing_service.publish_gas_price, price_id, operator)

    def take_down_gas_price(self, price_id: str, operator: str) -> ActionResult:
        return self._apply("take_down_gas_price", pricing_service.take_down_gas_price, price_id, operator)

    # --- Plans ---

    def create_plan(self, data: PlanInput) -> ActionResult:
        return self._apply("create_plan", plan_service.create_plan, data)

    def review_plan(self, data: ReviewPlanInput) -> ActionResult:
        return self._apply("review_plan", plan_service.review_plan, data)

    def cancel_plan(self, plan_id: str, reason: str) -> ActionResult:
        return self._apply("cancel_plan", plan_service.cancel_plan, plan_id, reason)

    def resubmit_plan(self, plan_id: str) -> ActionResult:
        return self._apply("resubmit_plan", plan_service.resubmit_plan, plan_id)

    def generate_daily_plan_report(self, report_date: str, generated_by: str) -> ActionResult:
        return self._apply(
            "generate_daily_plan_report", plan_service.generate_daily_plan_report, report_date, generated_by
        )

    # --- Orders ---

    def submit_order_supplement(self, data: SubmitOrderSupplementInput) -> ActionResult:
        return self._apply("submit_order_supplement", order_service.submit_order_supplement, data)

    def review_order_supplement(self, data: ReviewOrderSupplementInput) -> ActionResult:
        return self._apply("review_order_supplement", order_service.review_order_supplement, data)

    def confirm_load(self, data: WeighInput) -> ActionResult:
        return self._apply("confirm_load", order_service.confirm_load, data)

    def depart_order(self, order_id: str) -> ActionResult:
        return self._apply("depart_order", order_service.depart_order, order_id)

    def confirm_unload(self, data: WeighInput) -> ActionResult:
        return self._apply("confirm_unload", order_service.confirm_unload, data)

    def resolve_diff_exception(self, order_id: str, settlement_weight: float, note: str) -> ActionResult:
        return self._apply(
            "resolve_diff_exception", order_service.resolve_diff_exception, order_id, settlement_weight, note
        )

    def accept_order(self, order_id: str, accepted: bool, settlement_weight: float) -> ActionResult:
        return self._apply("accept_order", order_service.accept_order, order_id, accepted, settlement_weight)

    def settle_order(self, order_id: str, operator: str) -> ActionResult:
        return self._apply("settle_order", order_service.settle_order, order_id, operator)

    def archive_order(self, order_id: str, operator: str) -> ActionResult:
        return self._apply("archive_order", order_service.archive_order, order_id, operator)

    def unarchive_order(self, order_id: str, operator: str) -> ActionResult:
        return self._apply("unarchive_order", order_service.unarchive_order, order_id, operator)

    # --- Finance ---

    def register_deposit(self, data: DepositInput) -> ActionResult:
        return self._apply("register_deposit", account_service.register_deposit, data)

    def review_deposit(
        self, deposit_id: str, action: DepositAction, reviewer: str, reason: str | None = None
    ) -> ActionResult:
        return self._apply(
            "review_deposit", account_service.review_deposit, deposit_id, action, reviewer, reason
        )

    def confirm_order_receipt(self, data: OrderReceiptInput) -> ActionResult:
        return self._apply("confirm_order_receipt", account_service.confirm_order_receipt, data)

    # --- Reconciliation / invoicing ---

    def apply_stamp(self, statement_id: str, actor_type: StampActor, actor: str) -> ActionResult:
        return self._apply("apply_stamp", reconciliation_service.apply_stamp, statement_id, actor_type, actor)

    def upload_upstream_archive(self, data: UploadUpstreamArchiveInput) -> ActionResult:
        return self._apply("upload_upstream_archive", reconciliation_service.upload_upstream_archive, data)

    def create_invoice_application(self, data: CreateInvoiceApplicationInput) -> ActionResult:
        return self._apply("create_invoice_application", invoice_service.create_invoice_application, data)

    def review_invoice_application(self, data: ReviewInvoiceApplicationInput) -> ActionResult:
        return self._apply("review_invoice_application", invoice_service.review_invoice_application, data)

    def issue_invoice(self, data: IssueInvoiceInput) -> ActionResult:
        return self._apply("issue_invoice", invoice_service.issue_invoice, data)

    # --- Onboarding ---

    def review_onboarding(self, data: ReviewOnboardingInput) -> ActionResult:
        return self._apply("review_onboarding", onboarding_service.review_onboarding, data)

    def upload_onboarding_contract(self, data: UploadOnboardingContractInput) -> ActionResult:
        return self._apply("upload_onboarding_contract", onboarding_service.upload_onboarding_contract, data)

    def resubmit_onboarding(self, application_id: str) -> ActionResult:
        return self._apply("resubmit_onboarding", onboarding_service.resubmit_onboarding, application_id)

    def submit_onboarding_materials(self, data: SubmitOnboardingMaterialsInput) -> ActionResult:
        return self._apply("submit_onboarding_materials", onboarding_service.submit_onboarding_materials, data)

    # --- Exceptions / notifications ---

    def create_exception(self, data: CreateExceptionInput) -> ActionResult:
        return self._apply("create_exception", exception_service.create_exception, data)

    def process_exception(self, data: ProcessExceptionInput) -> ActionResult:
        return self._apply("process_exception", exception_service.process_exception, data)

    def mark_notification_read(self, notification_id: str) -> ActionResult:
        return self._apply("mark_notification_read", mark_notification_read, notification_id)


_store: DomainStore | None = None


def get_domain_store() -> DomainStore:
    """Process-wide store, created on first use. FastAPI routes depend on this."""
    global _store  # noqa: PLW0603
    if _store is None:
        _store = DomainStore(ctx=StoreContext.create(sequence_start=settings.SEQUENCE_START))
    return _store
