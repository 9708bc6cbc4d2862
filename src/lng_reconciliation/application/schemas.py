"""Pydantic request schemas for reconciliation endpoints."""

from pydantic import BaseModel, Field

from src.lng_common.enums import StampActor
from src.lng_reconciliation.domain.models import UploadUpstreamArchiveInput


class StampRequest(BaseModel):
    actor_type: StampActor
    actor: str = Field(..., min_length=1, max_length=64)


class UpstreamArchiveRequest(BaseModel):
    upstream_company: str = Field(..., min_length=1, max_length=128)
    period: str = Field(..., max_length=32)
    file_name: str = Field(..., min_length=1, max_length=256)
    archived_by: str = Field(..., min_length=1, max_length=64)
    note: str | None = None

    def to_input(self) -> UploadUpstreamArchiveInput:
        return UploadUpstreamArchiveInput(**self.model_dump())
