"""Pydantic request schemas for exception case endpoints."""

from pydantic import BaseModel, Field

from src.lng_common.enums import ExceptionType, ReviewAction
from src.lng_exception.domain.models import CreateExceptionInput, ProcessExceptionInput


class CreateExceptionRequest(BaseModel):
    type: ExceptionType
    target_no: str = Field(..., min_length=1, description="Plan or order business number")
    reason: str = Field(..., min_length=1, max_length=512)
    responsibility_party: str = Field(..., max_length=64)
    amount: float = 0.0

    def to_input(self) -> CreateExceptionInput:
        return CreateExceptionInput(**self.model_dump())


class ProcessExceptionRequest(BaseModel):
    action: ReviewAction
    reviewer: str = Field(..., min_length=1, max_length=64)
    note: str | None = None

    def to_input(self, exception_id: str) -> ProcessExceptionInput:
        return ProcessExceptionInput(exception_id=exception_id, **self.model_dump())
