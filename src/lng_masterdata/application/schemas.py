"""Pydantic request schemas for master data endpoints."""

from pydantic import BaseModel, Field

from src.lng_common.enums import MaintenancePolicy, PersonRole, SiteStatus, SiteType
from src.lng_masterdata.domain.models import (
    AddPersonInput,
    AddSiteInput,
    AddVehicleInput,
    PersonPatch,
    SitePatch,
    VehiclePatch,
)


class AddSiteRequest(BaseModel):
    name: str = Field(..., min_length=1, max_length=64)
    type: SiteType
    status: SiteStatus = SiteStatus.ENABLED
    maintenance_policy: MaintenancePolicy | None = None
    maintenance_window: str | None = None

    def to_input(self) -> AddSiteInput:
        return AddSiteInput(**self.model_dump())


class UpdateSiteRequest(BaseModel):
    name: str | None = None
    type: SiteType | None = None
    status: SiteStatus | None = None
    maintenance_policy: MaintenancePolicy | None = None
    maintenance_window: str | None = None

    def to_patch(self) -> SitePatch:
        return SitePatch(**self.model_dump())


class AddVehicleRequest(BaseModel):
    plate_no: str = Field(..., min_length=1, max_length=20)
    capacity: float = Field(..., gt=0, description="Tonnes")
    cert_expiry: str = Field(..., description="YYYY-MM-DD")
    valid: bool = True

    def to_input(self) -> AddVehicleInput:
        return AddVehicleInput(**self.model_dump())


class UpdateVehicleRequest(BaseModel):
    plate_no: str | None = None
    capacity: float | None = Field(None, gt=0)
    cert_expiry: str | None = None
    valid: bool | None = None

    def to_patch(self) -> VehiclePatch:
        return VehiclePatch(**self.model_dump())


class AddPersonRequest(BaseModel):
    name: str = Field(..., min_length=1, max_length=32)
    role: PersonRole
    cert_expiry: str = Field(..., description="YYYY-MM-DD")
    valid: bool = True

    def to_input(self) -> AddPersonInput:
        return AddPersonInput(**self.model_dump())


class UpdatePersonRequest(BaseModel):
    name: str | None = None
    role: PersonRole | None = None
    cert_expiry: str | None = None
    valid: bool | None = None

    def to_patch(self) -> PersonPatch:
        return PersonPatch(**self.model_dump())
