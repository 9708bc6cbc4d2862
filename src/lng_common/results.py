"""Tagged results returned by every store operation.

Store operations never raise for business-rule violations. Instead they
return an ActionResult whose outcome tells the caller what happened:

  OK                   transition committed
  NOT_FOUND            target entity does not exist, state unchanged
  PRECONDITION_FAILED  entity is in the wrong state, state unchanged
  INVALID              input rejected, ``errors`` lists every problem found
"""

from dataclasses import dataclass
from enum import Enum


class Outcome(str, Enum):
    OK = "OK"
    NOT_FOUND = "NOT_FOUND"
    PRECONDITION_FAILED = "PRECONDITION_FAILED"
    INVALID = "INVALID"


@dataclass(frozen=True)
class ActionResult:
    outcome: Outcome
    errors: tuple[str, ...] = ()
    entity_id: str | None = None  # id created by the operation, if any

    @property
    def success(self) -> bool:
        return self.outcome is Outcome.OK

    @property
    def error(self) -> str | None:
        return self.errors[0] if self.errors else None

    @classmethod
    def ok(cls, entity_id: str | None = None) -> "ActionResult":
        return cls(Outcome.OK, (), entity_id)

    @classmethod
    def not_found(cls, message: str) -> "ActionResult":
        return cls(Outcome.NOT_FOUND, (message,))

    @classmethod
    def precondition_failed(cls, message: str) -> "ActionResult":
        return cls(Outcome.PRECONDITION_FAILED, (message,))

    @classmethod
    def invalid(cls, errors: list[str] | tuple[str, ...]) -> "ActionResult":
        return cls(Outcome.INVALID, tuple(errors))
