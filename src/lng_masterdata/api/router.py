"""lng_masterdata REST API: sites, vehicles, personnel."""

from typing import Annotated

from fastapi import APIRouter, Depends, Request

from src.lng_common.errors import ErrorDomain, raise_for_result
from src.lng_common.response import ApiResponse, records_payload, respond
from src.lng_masterdata.application.schemas import (
    AddPersonRequest,
    AddSiteRequest,
    AddVehicleRequest,
    UpdatePersonRequest,
    UpdateSiteRequest,
    UpdateVehicleRequest,
)
from src.lng_store.store import DomainStore, get_domain_store

router = APIRouter(tags=["masterdata"])

StoreDep = Annotated[DomainStore, Depends(get_domain_store)]


# --- Sites ---


@router.get("/sites")
async def list_sites(store: StoreDep, request: Request) -> ApiResponse:
    return respond(request, records_payload(store.state.sites))


@router.post("/sites", status_code=201)
async def add_site(body: AddSiteRequest, store: StoreDep, request: Request) -> ApiResponse:
    result = store.add_site(body.to_input())
    raise_for_result(result, ErrorDomain.PLAN)
    return respond(request, {"id": result.entity_id})


@router.patch("/sites/{site_id}")
async def update_site(site_id: str, body: UpdateSiteRequest, store: StoreDep, request: Request) -> ApiResponse:
    result = store.update_site(site_id, body.to_patch())
    raise_for_result(result, ErrorDomain.PLAN)
    return respond(request, {"id": result.entity_id})


@router.post("/sites/{site_id}/disable")
async def disable_site(site_id: str, store: StoreDep, request: Request) -> ApiResponse:
    result = store.disable_site(site_id)
    raise_for_result(result, ErrorDomain.PLAN)
    return respond(request, {"id": result.entity_id})


# --- Vehicles ---


@router.get("/vehicles")
async def list_vehicles(store: StoreDep, request: Request) -> ApiResponse:
    return respond(request, records_payload(store.state.vehicles))


@router.post("/vehicles", status_code=201)
async def add_vehicle(body: AddVehicleRequest, store: StoreDep, request: Request) -> ApiResponse:
    result = store.add_vehicle(body.to_input())
    raise_for_result(result, ErrorDomain.PLAN)
    return respond(request, {"id": result.entity_id})


@router.patch("/vehicles/{vehicle_id}")
async def update_vehicle(
    vehicle_id: str, body: UpdateVehicleRequest, store: StoreDep, request: Request
) -> ApiResponse:
    result = store.update_vehicle(vehicle_id, body.to_patch())
    raise_for_result(result, ErrorDomain.PLAN)
    return respond(request, {"id": result.entity_id})


@router.post("/vehicles/{vehicle_id}/disable")
async def disable_vehicle(vehicle_id: str, store: StoreDep, request: Request) -> ApiResponse:
    result = store.disable_vehicle(vehicle_id)
    raise_for_result(result, ErrorDomain.PLAN)
    return respond(request, {"id": result.entity_id})


# --- Personnel ---


@router.get("/personnel")
async def list_personnel(store: StoreDep, request: Request) -> ApiResponse:
    return respond(request, records_payload(store.state.personnel))


@router.post("/personnel", status_code=201)
async def add_person(body: AddPersonRequest, store: StoreDep, request: Request) -> ApiResponse:
    result = store.add_person(body.to_input())
    raise_for_result(result, ErrorDomain.PLAN)
    return respond(request, {"id": result.entity_id})


@router.patch("/personnel/{person_id}")
async def update_person(
    person_id: str, body: UpdatePersonRequest, store: StoreDep, request: Request
) -> ApiResponse:
    result = store.update_person(person_id, body.to_patch())
    raise_for_result(result, ErrorDomain.PLAN)
    return respond(request, {"id": result.entity_id})


@router.post("/personnel/{person_id}/disable")
async def disable_person(person_id: str, store: StoreDep, request: Request) -> ApiResponse:
    result = store.disable_person(person_id)
    raise_for_result(result, ErrorDomain.PLAN)
    return respond(request, {"id": result.entity_id})
