"""Master data transitions: add / update / disable for sites, vehicles, personnel."""

from dataclasses import replace

from src.lng_common.enums import SiteStatus
from src.lng_common.records import find_by_id, prepend, replace_by_id
from src.lng_common.results import ActionResult
from src.lng_masterdata.domain.models import (
    AddPersonInput,
    AddSiteInput,
    AddVehicleInput,
    Person,
    PersonPatch,
    Site,
    SitePatch,
    Vehicle,
    VehiclePatch,
)
from src.lng_store.state import AppState, StoreContext, Transition


def _keep_or_trimmed(value: str | None, current: str) -> str:
    # Blank names keep the old one
    if value is None or not value.strip():
        return current
    return value.strip()


# --- Sites ---

def add_site(state: AppState, ctx: StoreContext, data: AddSiteInput) -> Transition:
    site = Site(
        id=ctx.ids.next_id("site"),
        name=data.name.strip(),
        type=data.type,
        status=data.status,
        maintenance_policy=data.maintenance_policy,
        maintenance_window=(data.maintenance_window or "").strip() or None,
    )
    return replace(state, sites=prepend(state.sites, site)), ActionResult.ok(site.id)


def update_site(state: AppState, ctx: StoreContext, site_id: str, patch: SitePatch) -> Transition:
    site = find_by_id(state.sites, site_id)
    if site is None:
        return state, ActionResult.not_found("站点不存在")

    window = site.maintenance_window
    if patch.maintenance_window is not None:
        window = patch.maintenance_window.strip() or None

    updated = replace(
        site,
        name=_keep_or_trimmed(patch.name, site.name),
        type=patch.type or site.type,
        status=patch.status or site.status,
        maintenance_policy=patch.maintenance_policy or site.maintenance_policy,
        maintenance_window=window,
    )
    return replace(state, sites=replace_by_id(state.sites, updated)), ActionResult.ok(site.id)


def disable_site(state: AppState, ctx: StoreContext, site_id: str) -> Transition:
    site = find_by_id(state.sites, site_id)
    if site is None:
        return state, ActionResult.not_found("站点不存在")
    updated = replace(site, status=SiteStatus.DISABLED)
    return replace(state, sites=replace_by_id(state.sites, updated)), ActionResult.ok(site.id)


# --- Vehicles ---

def add_vehicle(state: AppState, ctx: StoreContext, data: AddVehicleInput) -> Transition:
    vehicle = Vehicle(
        id=ctx.ids.next_id("vehicle"),
        plate_no=data.plate_no.strip(),
        capacity=data.capacity,
        valid=data.valid,
        cert_expiry=data.cert_expiry,
    )
    return replace(state, vehicles=prepend(state.vehicles, vehicle)), ActionResult.ok(vehicle.id)


def update_vehicle(
    state: AppState, ctx: StoreContext, vehicle_id: str, patch: VehiclePatch
) -> Transition:
    vehicle = find_by_id(state.vehicles, vehicle_id)
    if vehicle is None:
        return state, ActionResult.not_found("车辆不存在")
    updated = replace(
        vehicle,
        plate_no=_keep_or_trimmed(patch.plate_no, vehicle.plate_no),
        capacity=vehicle.capacity if patch.capacity is None else patch.capacity,
        cert_expiry=patch.cert_expiry or vehicle.cert_expiry,
        valid=vehicle.valid if patch.valid is None else patch.valid,
    )
    return replace(state, vehicles=replace_by_id(state.vehicles, updated)), ActionResult.ok(vehicle.id)


def disable_vehicle(state: AppState, ctx: StoreContext, vehicle_id: str) -> Transition:
    vehicle = find_by_id(state.vehicles, vehicle_id)
    if vehicle is None:
        return state, ActionResult.not_found("车辆不存在")
    updated = replace(vehicle, valid=False)
    return replace(state, vehicles=replace_by_id(state.vehicles, updated)), ActionResult.ok(vehicle.id)


# --- Personnel ---

def add_person(state: AppState, ctx: StoreContext, data: AddPersonInput) -> Transition:
    person = Person(
        id=ctx.ids.next_id("person"),
        name=data.name.strip(),
        role=data.role,
        valid=data.valid,
        cert_expiry=data.cert_expiry,
    )
    return replace(state, personnel=prepend(state.personnel, person)), ActionResult.ok(person.id)


def update_person(
    state: AppState, ctx: StoreContext, person_id: str, patch: PersonPatch
) -> Transition:
    person = find_by_id(state.personnel, person_id)
    if person is None:
        return state, ActionResult.not_found("人员不存在")
    updated = replace(
        person,
        name=_keep_or_trimmed(patch.name, person.name),
        role=patch.role or person.role,
        cert_expiry=patch.cert_expiry or person.cert_expiry,
        valid=person.valid if patch.valid is None else patch.valid,
    )
    return replace(state, personnel=replace_by_id(state.personnel, updated)), ActionResult.ok(person.id)


def disable_person(state: AppState, ctx: StoreContext, person_id: str) -> Transition:
    person = find_by_id(state.personnel, person_id)
    if person is None:
        return state, ActionResult.not_found("人员不存在")
    updated = replace(person, valid=False)
    return replace(state, personnel=replace_by_id(state.personnel, updated)), ActionResult.ok(person.id)
