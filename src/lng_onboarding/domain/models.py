"""Onboarding domain models.

pending → approved | rejected; approved + contract → activated (terminal).
rejected may go back to pending (resubmit or new materials).
"""

from dataclasses import dataclass

from src.lng_common.enums import (
    CustomerLevel,
    OnboardingStatus,
    OrganizationType,
    ReviewAction,
)


@dataclass(frozen=True)
class OnboardingApplication:
    id: str
    organization_name: str
    organization_type: OrganizationType
    contact_name: str
    contact_phone: str
    submitted_at: str
    status: OnboardingStatus
    level: CustomerLevel | None = None
    reviewer: str | None = None
    reject_reason: str | None = None
    contract_name: str | None = None
    contract_effective_date: str | None = None
    invoice_title: str | None = None
    tax_no: str | None = None
    business_license_file: str | None = None
    qualification_file: str | None = None


@dataclass(frozen=True)
class ReviewOnboardingInput:
    application_id: str
    action: ReviewAction
    reviewer: str
    reason: str | None = None
    level: CustomerLevel | None = None


@dataclass(frozen=True)
class UploadOnboardingContractInput:
    application_id: str
    contract_name: str
    effective_date: str


@dataclass(frozen=True)
class SubmitOnboardingMaterialsInput:
    application_id: str
    contact_name: str
    contact_phone: str
    invoice_title: str
    tax_no: str
    business_license_file: str
    qualification_file: str
