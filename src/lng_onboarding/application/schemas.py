"""Pydantic request schemas for onboarding endpoints."""

from pydantic import BaseModel, Field

from src.lng_common.enums import CustomerLevel, ReviewAction
from src.lng_onboarding.domain.models import (
    ReviewOnboardingInput,
    SubmitOnboardingMaterialsInput,
    UploadOnboardingContractInput,
)


class ReviewOnboardingRequest(BaseModel):
    action: ReviewAction
    reviewer: str = Field(..., min_length=1, max_length=64)
    reason: str | None = None
    level: CustomerLevel | None = None

    def to_input(self, application_id: str) -> ReviewOnboardingInput:
        return ReviewOnboardingInput(application_id=application_id, **self.model_dump())


class UploadContractRequest(BaseModel):
    contract_name: str = Field(..., min_length=1, max_length=256)
    effective_date: str = Field(..., description="YYYY-MM-DD")

    def to_input(self, application_id: str) -> UploadOnboardingContractInput:
        return UploadOnboardingContractInput(application_id=application_id, **self.model_dump())


class SubmitMaterialsRequest(BaseModel):
    contact_name: str = ""
    contact_phone: str = ""
    invoice_title: str = ""
    tax_no: str = ""
    business_license_file: str = ""
    qualification_file: str = ""

    def to_input(self, application_id: str) -> SubmitOnboardingMaterialsInput:
        return SubmitOnboardingMaterialsInput(application_id=application_id, **self.model_dump())
