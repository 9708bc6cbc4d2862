"""Master data: sites, vehicles, personnel.

Records are never removed. disable_* flips the status flag so historical
plans and orders still resolve their references.
"""

from dataclasses import dataclass

from src.lng_common.enums import MaintenancePolicy, PersonRole, SiteStatus, SiteType


@dataclass(frozen=True)
class Site:
    id: str
    name: str
    type: SiteType
    status: SiteStatus
    maintenance_policy: MaintenancePolicy | None = None
    maintenance_window: str | None = None

    @property
    def is_maintenance_blocked(self) -> bool:
        return (
            self.status == SiteStatus.MAINTENANCE
            and self.maintenance_policy == MaintenancePolicy.BLOCK
        )


@dataclass(frozen=True)
class Vehicle:
    id: str
    plate_no: str
    capacity: float  # tonnes
    valid: bool
    cert_expiry: str  # YYYY-MM-DD


@dataclass(frozen=True)
class Person:
    id: str
    name: str
    role: PersonRole
    valid: bool
    cert_expiry: str  # YYYY-MM-DD


@dataclass(frozen=True)
class AddSiteInput:
    name: str
    type: SiteType
    status: SiteStatus = SiteStatus.ENABLED
    maintenance_policy: MaintenancePolicy | None = None
    maintenance_window: str | None = None


@dataclass(frozen=True)
class SitePatch:
    """None means keep the current value."""
    name: str | None = None
    type: SiteType | None = None
    status: SiteStatus | None = None
    maintenance_policy: MaintenancePolicy | None = None
    maintenance_window: str | None = None  # "" clears the window


@dataclass(frozen=True)
class AddVehicleInput:
    plate_no: str
    capacity: float
    cert_expiry: str
    valid: bool


@dataclass(frozen=True)
class VehiclePatch:
    plate_no: str | None = None
    capacity: float | None = None
    cert_expiry: str | None = None
    valid: bool | None = None


@dataclass(frozen=True)
class AddPersonInput:
    name: str
    role: PersonRole
    cert_expiry: str
    valid: bool


@dataclass(frozen=True)
class PersonPatch:
    name: str | None = None
    role: PersonRole | None = None
    cert_expiry: str | None = None
    valid: bool | None = None
