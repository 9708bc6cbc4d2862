"""lng_onboarding REST API: counterparty review, contract upload, resubmission."""

from typing import Annotated

from fastapi import APIRouter, Depends, Request

from src.lng_common.errors import ErrorDomain, raise_for_result
from src.lng_common.response import ApiResponse, records_payload, respond
from src.lng_onboarding.application.schemas import (
    ReviewOnboardingRequest,
    SubmitMaterialsRequest,
    UploadContractRequest,
)
from src.lng_store.store import DomainStore, get_domain_store

router = APIRouter(prefix="/onboarding", tags=["onboarding"])

StoreDep = Annotated[DomainStore, Depends(get_domain_store)]


@router.get("")
async def list_applications(store: StoreDep, request: Request) -> ApiResponse:
    return respond(request, records_payload(store.state.onboarding_applications))


@router.post("/{application_id}/review")
async def review_application(
    application_id: str, body: ReviewOnboardingRequest, store: StoreDep, request: Request
) -> ApiResponse:
    result = store.review_onboarding(body.to_input(application_id))
    raise_for_result(result, ErrorDomain.ONBOARDING)
    return respond(request, {"id": result.entity_id})


@router.post("/{application_id}/contract")
async def upload_contract(
    application_id: str, body: UploadContractRequest, store: StoreDep, request: Request
) -> ApiResponse:
    result = store.upload_onboarding_contract(body.to_input(application_id))
    raise_for_result(result, ErrorDomain.ONBOARDING)
    return respond(request, {"id": result.entity_id})


@router.post("/{application_id}/resubmit")
async def resubmit_application(application_id: str, store: StoreDep, request: Request) -> ApiResponse:
    result = store.resubmit_onboarding(application_id)
    raise_for_result(result, ErrorDomain.ONBOARDING)
    return respond(request, {"id": result.entity_id})


@router.post("/{application_id}/materials")
async def submit_materials(
    application_id: str, body: SubmitMaterialsRequest, store: StoreDep, request: Request
) -> ApiResponse:
    result = store.submit_onboarding_materials(body.to_input(application_id))
    raise_for_result(result, ErrorDomain.ONBOARDING)
    return respond(request, {"id": result.entity_id})
