"""Global enums: values are the wire strings used by the dashboards.

All enums inherit from (str, Enum) so records serialize without conversion.
"""

from enum import Enum


class RoleKey(str, Enum):
    TERMINAL = "terminal"
    MARKET = "market"
    DISPATCH = "dispatch"
    FINANCE = "finance"
    CARRIER = "carrier"
    DRIVER = "driver"


class ReviewAction(str, Enum):
    APPROVE = "approve"
    REJECT = "reject"


class DepositAction(str, Enum):
    CONFIRM = "confirm"
    REJECT = "reject"


# --- Master data ---

class SiteType(str, Enum):
    LOAD = "load"
    UNLOAD = "unload"
    USE = "use"


class SiteStatus(str, Enum):
    ENABLED = "enabled"
    DISABLED = "disabled"
    MAINTENANCE = "maintenance"


class MaintenancePolicy(str, Enum):
    """block: plans refused during maintenance; manual: dispatcher decides"""
    BLOCK = "block"
    MANUAL = "manual"


class PersonRole(str, Enum):
    DRIVER = "driver"
    ESCORT = "escort"


# --- Pricing ---

class PriceScope(str, Enum):
    PUBLIC = "public"
    EXCLUSIVE = "exclusive"


class GasPriceStatus(str, Enum):
    DRAFT = "draft"
    PUBLISHED = "published"
    OFF_SHELF = "off-shelf"


# --- Plan / Order ---

class PlanStatus(str, Enum):
    DRAFT = "draft"
    SUBMITTED = "submitted"
    RETURNED = "returned"
    APPROVED = "approved"
    CANCELLED = "cancelled"
    CHANGED = "changed"


class OrderStatus(str, Enum):
    PENDING_SUPPLEMENT = "pending-supplement"
    ORDERED = "ordered"
    STOCKING = "stocking"
    LOADED = "loaded"
    TRANSPORTING = "transporting"
    ARRIVED = "arrived"
    PENDING_ACCEPTANCE = "pending-acceptance"
    ACCEPTED = "accepted"
    SETTLING = "settling"
    SETTLED = "settled"
    ARCHIVED = "archived"


class TransportMode(str, Enum):
    UPSTREAM = "upstream"
    SELF = "self"
    CARRIER = "carrier"


class PaymentMethod(str, Enum):
    PREPAID = "prepaid"
    POSTPAID = "postpaid"


class WeighDiffRule(str, Enum):
    """Which weighing settles the order: load, unload, or their average (delta)"""
    LOAD = "load"
    UNLOAD = "unload"
    DELTA = "delta"


class SupplementStatus(str, Enum):
    PENDING = "pending"
    APPROVED = "approved"
    REJECTED = "rejected"


class PaymentStatus(str, Enum):
    PENDING = "pending"
    PARTIAL = "partial"
    PAID = "paid"


# --- Finance ---

class LedgerType(str, Enum):
    DEPOSIT = "deposit"
    OCCUPY = "occupy"
    RELEASE = "release"
    FREEZE = "freeze"
    # Declared for the settlement/refund flows; no store operation produces them yet
    DEDUCT = "deduct"
    REFUND = "refund"


class DepositStatus(str, Enum):
    PENDING = "pending"
    CONFIRMED = "confirmed"
    REJECTED = "rejected"


class NotificationCategory(str, Enum):
    APPROVAL = "approval"
    FULFILLMENT = "fulfillment"
    FINANCE = "finance"
    SYSTEM = "system"


# --- Reconciliation / Invoice ---

class StatementStatus(str, Enum):
    DRAFT = "draft"
    PLATFORM_STAMPED = "platform-stamped"
    DOUBLE_CONFIRMED = "double-confirmed"
    OFFLINE_CONFIRMED = "offline-confirmed"


class StampActor(str, Enum):
    PLATFORM = "platform"
    CUSTOMER = "customer"


class InvoiceApplicationStatus(str, Enum):
    PENDING_REVIEW = "pending-review"
    APPROVED = "approved"
    REJECTED = "rejected"
    INVOICED = "invoiced"


class InvoiceStatus(str, Enum):
    PENDING = "pending"
    ISSUED = "issued"


# --- Onboarding / Exceptions ---

class OrganizationType(str, Enum):
    UPSTREAM = "upstream"
    TERMINAL = "terminal"
    CARRIER = "carrier"


class CustomerLevel(str, Enum):
    A = "A"
    B = "B"
    C = "C"


class OnboardingStatus(str, Enum):
    PENDING = "pending"
    APPROVED = "approved"
    REJECTED = "rejected"
    ACTIVATED = "activated"


class ExceptionType(str, Enum):
    PLAN_TERMINATE = "plan-terminate"
    ORDER_TERMINATE = "order-terminate"
    PLAN_CHANGE = "plan-change"
    ORDER_CHANGE = "order-change"
    DELTA_ADJUSTMENT = "delta-adjustment"


class ExceptionStatus(str, Enum):
    PENDING = "pending"
    APPROVED = "approved"
    REJECTED = "rejected"
