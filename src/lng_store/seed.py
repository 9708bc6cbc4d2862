"""Demo data set loaded into a fresh store.

One user per role (password 123456), customer-a as the active terminal
customer, and a handful of records in every collection so each workflow
has something to act on.
"""

from src.lng_account.domain.models import Account, DepositRecord, LedgerRecord
from src.lng_auth.auth.password import hash_password
from src.lng_auth.domain.models import AuthUser
from src.lng_common.enums import (
    DepositStatus,
    ExceptionStatus,
    ExceptionType,
    GasPriceStatus,
    InvoiceApplicationStatus,
    InvoiceStatus,
    LedgerType,
    MaintenancePolicy,
    NotificationCategory,
    OnboardingStatus,
    OrderStatus,
    OrganizationType,
    PaymentMethod,
    PersonRole,
    PlanStatus,
    PriceScope,
    RoleKey,
    SiteStatus,
    SiteType,
    StampActor,
    StatementStatus,
    TransportMode,
    WeighDiffRule,
)
from src.lng_exception.domain.models import ExceptionCase
from src.lng_invoice.domain.models import InvoiceApplication, InvoiceItem
from src.lng_masterdata.domain.models import Person, Site, Vehicle
from src.lng_notification.domain.models import NotificationItem
from src.lng_onboarding.domain.models import OnboardingApplication
from src.lng_order.domain.models import Order
from src.lng_plan.domain.models import DailyPlanReport, DailyPlanReportPlan, Plan
from src.lng_pricing.domain.models import GasPrice
from src.lng_reconciliation.domain.models import ReconciliationStatement, StampLog, UpstreamArchive
from src.lng_store.state import AppState, build_number_index

DEMO_PASSWORD = "123456"
CUSTOMER_A = "customer-a"
CUSTOMER_A_NAME = "华东能源科技有限公司"


def _users() -> tuple[AuthUser, ...]:
    password_hash = hash_password(DEMO_PASSWORD)
    rows = (
        ("auth-terminal-01", "13800138000", "张三", CUSTOMER_A_NAME, RoleKey.TERMINAL, CUSTOMER_A),
        ("auth-market-01", "13800138001", "周婷", "气源发展-市场部", RoleKey.MARKET, None),
        ("auth-dispatch-01", "13800138002", "刘工", "气源发展-调度中心", RoleKey.DISPATCH, None),
        ("auth-finance-01", "13800138003", "陈会计", "气源发展-财务部", RoleKey.FINANCE, None),
        ("auth-carrier-01", "13800138004", "刘主管", "华东承运物流有限公司", RoleKey.CARRIER, None),
        ("auth-driver-01", "13800138005", "赵强", "华东承运物流有限公司", RoleKey.DRIVER, None),
    )
    return tuple(
        AuthUser(
            id=user_id,
            phone=phone,
            password_hash=password_hash,
            contact_name=contact,
            organization_name=organization,
            role=role,
            customer_id=customer_id,
        )
        for user_id, phone, contact, organization, role, customer_id in rows
    )


def _plans() -> tuple[Plan, ...]:
    return (
        Plan(
            id="plan-1001",
            number="PL-20260209-001",
            customer_id=CUSTOMER_A,
            customer_name=CUSTOMER_A_NAME,
            site_id="site-01",
            site_name="苏州工业园卸气站",
            price_id="price-exclusive-a",
            planned_volume=22,
            unit_price=4200,
            estimated_amount=92400,
            freight_fee=3200,
            total_amount=95600,
            transport_mode=TransportMode.CARRIER,
            payment_method=PaymentMethod.PREPAID,
            weigh_diff_rule=WeighDiffRule.DELTA,
            agreement_checked=True,
            carrier_id="carrier-01",
            vehicle_id="vehicle-01",
            driver_id="person-01",
            escort_id="person-02",
            status=PlanStatus.SUBMITTED,
            submitted_at="2026-02-09T08:30:00.000Z",
        ),
        Plan(
            id="plan-1002",
            number="PL-20260209-002",
            customer_id=CUSTOMER_A,
            customer_name=CUSTOMER_A_NAME,
            site_id="site-03",
            site_name="无锡北站用气点",
            price_id="price-public-1",
            planned_volume=18,
            unit_price=3950,
            estimated_amount=71100,
            freight_fee=2000,
            total_amount=73100,
            transport_mode=TransportMode.UPSTREAM,
            payment_method=PaymentMethod.POSTPAID,
            weigh_diff_rule=WeighDiffRule.UNLOAD,
            agreement_checked=True,
            status=PlanStatus.APPROVED,
            submitted_at="2026-02-08T08:30:00.000Z",
            reviewer="市场部-周婷",
        ),
    )


def _orders() -> tuple[Order, ...]:
    return (
        Order(
            id="order-2001",
            number="OD-20260209-001",
            plan_id="plan-1002",
            customer_name=CUSTOMER_A_NAME,
            site_name="无锡北站用气点",
            transport_mode=TransportMode.UPSTREAM,
            weigh_diff_rule=WeighDiffRule.UNLOAD,
            status=OrderStatus.TRANSPORTING,
            threshold=0.5,
            load_weight=18,
            unload_weight=17.8,
            settlement_weight=17.8,
            diff_abnormal=False,
        ),
    )


def _gas_prices() -> tuple[GasPrice, ...]:
    return (
        GasPrice(
            id="price-public-1",
            source_company="中海气源公司",
            source_site="宁波接收站",
            scope=PriceScope.PUBLIC,
            price=3950,
            valid_from="2026-02-01",
            valid_to="2026-02-15",
            tax_included=True,
            note="公共挂牌价",
            status=GasPriceStatus.PUBLISHED,
        ),
        GasPrice(
            id="price-exclusive-a",
            source_company="中海气源公司",
            source_site="宁波接收站",
            scope=PriceScope.EXCLUSIVE,
            customer_id=CUSTOMER_A,
            price=4200,
            valid_from="2026-02-01",
            valid_to="2026-02-15",
            tax_included=True,
            note="一户一价，覆盖公共价",
            status=GasPriceStatus.PUBLISHED,
        ),
        GasPrice(
            id="price-public-2",
            source_company="华北气源公司",
            source_site="天津港站",
            scope=PriceScope.PUBLIC,
            price=3880,
            valid_from="2026-02-01",
            valid_to="2026-02-20",
            tax_included=False,
            note="公共价，税外",
            status=GasPriceStatus.PUBLISHED,
        ),
    )


def _settlement_records() -> dict:
    reconciliations = (
        ReconciliationStatement(
            id="rc-202602-001",
            number="RC-202602-001",
            customer_name=CUSTOMER_A_NAME,
            period="2026-02-01 ~ 2026-02-15",
            status=StatementStatus.DRAFT,
            total_amount=168700,
            order_numbers=("OD-20260209-001",),
        ),
        ReconciliationStatement(
            id="rc-202601-003",
            number="RC-202601-003",
            customer_name=CUSTOMER_A_NAME,
            period="2026-01-01 ~ 2026-01-31",
            status=StatementStatus.DOUBLE_CONFIRMED,
            total_amount=120000,
            order_numbers=("OD-20260131-008",),
            stamp_logs=(
                StampLog(StampActor.PLATFORM, "市场部-王经理", "2026-02-01T09:30:00.000Z"),
                StampLog(StampActor.CUSTOMER, "终端用户-张三", "2026-02-01T10:10:00.000Z"),
            ),
        ),
    )
    invoices = (
        InvoiceItem(
            id="inv-1",
            number="INV-20260208-001",
            customer_name=CUSTOMER_A_NAME,
            amount=120000,
            issue_date="2026-02-08",
            statement_no="RC-202601-003",
            status=InvoiceStatus.ISSUED,
        ),
        InvoiceItem(
            id="inv-2",
            number="INV-20260209-002",
            customer_name=CUSTOMER_A_NAME,
            amount=48700,
            issue_date="2026-02-09",
            statement_no="RC-202602-001",
            status=InvoiceStatus.PENDING,
        ),
    )
    upstream_archives = (
        UpstreamArchive(
            id="upa-001",
            upstream_company="中海气源公司",
            period="2026-01",
            file_name="upstream-reconciliation-202601.pdf",
            archived_by="市场部-周婷",
            archived_at="2026-02-02T10:40:00.000Z",
            note="线下对账签字版",
        ),
    )
    invoice_applications = (
        InvoiceApplication(
            id="iap-001",
            number="IA-20260209-001",
            statement_id="rc-202601-003",
            statement_no="RC-202601-003",
            customer_name=CUSTOMER_A_NAME,
            order_numbers=("OD-20260131-008",),
            original_amount=120000,
            discount_enabled=False,
            discount_amount=0,
            requested_amount=120000,
            invoice_title=CUSTOMER_A_NAME,
            tax_no="91320000MA1234567X",
            applicant="市场部-王经理",
            applied_at="2026-02-09T09:30:00.000Z",
            status=InvoiceApplicationStatus.PENDING_REVIEW,
        ),
    )
    return {
        "reconciliations": reconciliations,
        "invoices": invoices,
        "upstream_archives": upstream_archives,
        "invoice_applications": invoice_applications,
    }


def default_seed() -> AppState:
    plans = _plans()
    orders = _orders()
    return AppState(
        auth_users=_users(),
        current_role=RoleKey.TERMINAL,
        active_customer_id=CUSTOMER_A,
        active_customer_name=CUSTOMER_A_NAME,
        account=Account(total=520000, available=160000, occupied=40000, frozen=320000),
        sites=(
            Site(id="site-01", name="苏州工业园卸气站", type=SiteType.UNLOAD, status=SiteStatus.ENABLED),
            Site(
                id="site-02",
                name="常州西港卸气站",
                type=SiteType.UNLOAD,
                status=SiteStatus.MAINTENANCE,
                maintenance_policy=MaintenancePolicy.BLOCK,
                maintenance_window="2026-02-08 ~ 2026-02-12",
            ),
            Site(id="site-03", name="无锡北站用气点", type=SiteType.USE, status=SiteStatus.ENABLED),
        ),
        vehicles=(
            Vehicle(id="vehicle-01", plate_no="苏A·LNG88", capacity=35, valid=True, cert_expiry="2026-12-31"),
            Vehicle(id="vehicle-02", plate_no="苏B·LNG12", capacity=25, valid=False, cert_expiry="2026-01-15"),
        ),
        personnel=(
            Person(id="person-01", name="赵强", role=PersonRole.DRIVER, valid=True, cert_expiry="2026-08-31"),
            Person(id="person-02", name="王敏", role=PersonRole.ESCORT, valid=True, cert_expiry="2026-09-30"),
            Person(id="person-03", name="李凯", role=PersonRole.DRIVER, valid=False, cert_expiry="2025-12-31"),
        ),
        gas_prices=_gas_prices(),
        plans=plans,
        orders=orders,
        plan_numbers=build_number_index(plans),
        order_numbers=build_number_index(orders),
        ledgers=(
            LedgerRecord(
                id="ldg-init-1",
                type=LedgerType.FREEZE,
                amount=320000,
                related_no="OD-20260208-001",
                note="历史订单冻结",
                created_at="2026-02-08T11:00:00.000Z",
            ),
            LedgerRecord(
                id="ldg-init-2",
                type=LedgerType.OCCUPY,
                amount=40000,
                related_no="PL-20260209-001",
                note="计划提交占用",
                created_at="2026-02-09T08:30:00.000Z",
            ),
        ),
        deposits=(
            DepositRecord(
                id="dep-1",
                customer_name=CUSTOMER_A_NAME,
                amount=50000,
                paid_at="2026-02-09",
                receipt_name="回单-0209.pdf",
                status=DepositStatus.PENDING,
            ),
        ),
        notifications=(
            NotificationItem(
                id="msg-init-1",
                category=NotificationCategory.APPROVAL,
                title="计划待审批",
                content="PL-20260209-001 已提交，请市场部处理。",
                created_at="2026-02-09T08:31:00.000Z",
            ),
        ),
        onboarding_applications=(
            OnboardingApplication(
                id="onb-001",
                organization_name="江苏中海清洁能源有限公司",
                organization_type=OrganizationType.TERMINAL,
                contact_name="张经理",
                contact_phone="13800138000",
                submitted_at="2026-02-09T02:30:00.000Z",
                status=OnboardingStatus.PENDING,
            ),
            OnboardingApplication(
                id="onb-002",
                organization_name="华东承运物流有限公司",
                organization_type=OrganizationType.CARRIER,
                contact_name="刘主管",
                contact_phone="13900139000",
                submitted_at="2026-02-08T05:20:00.000Z",
                status=OnboardingStatus.REJECTED,
                reject_reason="运输资质附件不完整",
                reviewer="市场部-周婷",
            ),
        ),
        exceptions=(
            ExceptionCase(
                id="ex-001",
                number="EX-20260209-001",
                type=ExceptionType.DELTA_ADJUSTMENT,
                target_no="OD-20260209-001",
                reason="装卸磅差超阈值，需多退少补",
                responsibility_party="承运商",
                amount=3200,
                status=ExceptionStatus.PENDING,
                created_at="2026-02-09T09:20:00.000Z",
            ),
        ),
        daily_plan_reports=(
            DailyPlanReport(
                id="dpr-20260209",
                report_date="2026-02-09",
                generated_at="2026-02-09T21:30:00.000Z",
                generated_by="市场部-系统任务",
                plans=(
                    DailyPlanReportPlan(
                        plan_id="plan-1001",
                        number="PL-20260209-001",
                        customer_name=CUSTOMER_A_NAME,
                        site_name="苏州工业园卸气站",
                        planned_volume=22,
                        transport_mode=TransportMode.CARRIER,
                        status=PlanStatus.SUBMITTED,
                        submitted_at="2026-02-09T08:30:00.000Z",
                    ),
                ),
            ),
        ),
        **_settlement_records(),
    )
