"""Unified error codes and custom exceptions for the HTTP edge.

The store itself never raises for business-rule violations (it returns an
ActionResult). Routers turn a failed result into one of these errors and the
global handler renders it as an ApiResponse.

Error code ranges:
  1xxx: Auth/User
  2xxx: Finance (account, deposits, receipts)
  3xxx: Plan, pricing, master data
  4xxx: Order
  5xxx: Reconciliation/Invoice
  6xxx: Onboarding/Exception cases
  9xxx: System

Within a range: xx01 input rejected, xx02 not found, xx03 wrong state.
"""

from enum import IntEnum

from src.lng_common.results import ActionResult, Outcome


class ErrorDomain(IntEnum):
    AUTH = 1000
    FINANCE = 2000
    PLAN = 3000
    ORDER = 4000
    SETTLEMENT = 5000
    ONBOARDING = 6000
    SYSTEM = 9000


class AppError(Exception):
    """Base application error."""

    def __init__(
        self,
        code: int,
        message: str,
        http_status: int = 500,
        errors: list[str] | None = None,
    ) -> None:
        self.code = code
        self.message = message
        self.http_status = http_status
        self.errors = errors or [message]
        super().__init__(message)


class ValidationRejectedError(AppError):
    def __init__(self, domain: ErrorDomain, errors: list[str]) -> None:
        message = errors[0] if errors else "Request rejected"
        super().__init__(domain + 1, message, 422, errors)


class EntityNotFoundError(AppError):
    def __init__(self, domain: ErrorDomain, message: str) -> None:
        super().__init__(domain + 2, message, 404)


class PreconditionFailedError(AppError):
    def __init__(self, domain: ErrorDomain, message: str) -> None:
        super().__init__(domain + 3, message, 409)


class AuthenticationFailedError(AppError):
    """Login rejected. Always 401 whatever the reason."""

    def __init__(self, message: str) -> None:
        super().__init__(ErrorDomain.AUTH + 4, message, 401)


class InternalError(AppError):
    def __init__(self, detail: str = "Internal server error") -> None:
        super().__init__(9002, detail, 500)


def raise_for_result(result: ActionResult, domain: ErrorDomain) -> None:
    """Raise the AppError matching a failed result; return silently on OK."""
    if result.outcome is Outcome.OK:
        return
    if result.outcome is Outcome.NOT_FOUND:
        raise EntityNotFoundError(domain, result.error or "Not found")
    if result.outcome is Outcome.PRECONDITION_FAILED:
        raise PreconditionFailedError(domain, result.error or "Operation not allowed")
    raise ValidationRejectedError(domain, list(result.errors))
