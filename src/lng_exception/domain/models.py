"""Exception case domain models."""

from dataclasses import dataclass

from src.lng_common.enums import ExceptionStatus, ExceptionType, ReviewAction

PLAN_TARGET_TYPES = (ExceptionType.PLAN_TERMINATE, ExceptionType.PLAN_CHANGE)


@dataclass(frozen=True)
class ExceptionCase:
    id: str
    number: str
    type: ExceptionType
    target_no: str  # business number of the plan or order, not its id
    reason: str
    responsibility_party: str
    amount: float
    status: ExceptionStatus
    created_at: str
    reviewer: str | None = None
    reviewed_at: str | None = None
    note: str | None = None


@dataclass(frozen=True)
class CreateExceptionInput:
    type: ExceptionType
    target_no: str
    reason: str
    responsibility_party: str
    amount: float


@dataclass(frozen=True)
class ProcessExceptionInput:
    exception_id: str
    action: ReviewAction
    reviewer: str
    note: str | None = None
