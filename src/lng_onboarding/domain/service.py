"""Counterparty onboarding: review, contract upload, resubmission.

activated is permanent; no transition here moves an application out of it.
"""

from dataclasses import replace

from src.lng_common.enums import NotificationCategory, OnboardingStatus, ReviewAction
from src.lng_common.records import find_by_id, replace_by_id
from src.lng_common.results import ActionResult
from src.lng_notification.domain.service import notify
from src.lng_onboarding.domain.models import (
    OnboardingApplication,
    ReviewOnboardingInput,
    SubmitOnboardingMaterialsInput,
    UploadOnboardingContractInput,
)
from src.lng_store.state import AppState, StoreContext, Transition

APPLICATION_NOT_FOUND = "未找到可提交的入驻申请"
DEFAULT_REJECT_REASON = "资料不完整"
LOCKED_STATUSES = (OnboardingStatus.APPROVED, OnboardingStatus.ACTIVATED)


def _commit(state: AppState, application: OnboardingApplication) -> AppState:
    return replace(
        state,
        onboarding_applications=replace_by_id(state.onboarding_applications, application),
    )


def review_onboarding(state: AppState, ctx: StoreContext, data: ReviewOnboardingInput) -> Transition:
    application = find_by_id(state.onboarding_applications, data.application_id)
    if application is None:
        return state, ActionResult.not_found(APPLICATION_NOT_FOUND)
    if application.status == OnboardingStatus.ACTIVATED:
        return state, ActionResult.precondition_failed(f"{application.organization_name} 已激活，不可重新审核")

    approved = data.action == ReviewAction.APPROVE
    reviewed = replace(
        application,
        status=OnboardingStatus.APPROVED if approved else OnboardingStatus.REJECTED,
        reviewer=data.reviewer,
        reject_reason=None if approved else (data.reason or DEFAULT_REJECT_REASON),
        level=data.level if approved else application.level,
    )
    next_state = replace(
        _commit(state, reviewed),
        notifications=notify(
            state,
            ctx,
            NotificationCategory.APPROVAL,
            "入驻审核通过" if approved else "入驻审核驳回",
            f"{application.organization_name} {'已审核通过，待上传合同' if approved else '审核未通过'}",
        ),
    )
    return next_state, ActionResult.ok(application.id)


def upload_onboarding_contract(
    state: AppState, ctx: StoreContext, data: UploadOnboardingContractInput
) -> Transition:
    """approved -> activated, recording the service contract."""
    application = find_by_id(state.onboarding_applications, data.application_id)
    if application is None:
        return state, ActionResult.not_found(APPLICATION_NOT_FOUND)
    if application.status != OnboardingStatus.APPROVED:
        return state, ActionResult.precondition_failed("仅审核通过的入驻申请可上传合同")

    activated = replace(
        application,
        contract_name=data.contract_name,
        contract_effective_date=data.effective_date,
        status=OnboardingStatus.ACTIVATED,
    )
    next_state = replace(
        _commit(state, activated),
        notifications=notify(
            state,
            ctx,
            NotificationCategory.SYSTEM,
            "服务合同已上传",
            f"{application.organization_name} 已激活，可进入业务流程。",
        ),
    )
    return next_state, ActionResult.ok(application.id)


def resubmit_onboarding(state: AppState, ctx: StoreContext, application_id: str) -> Transition:
    application = find_by_id(state.onboarding_applications, application_id)
    if application is None:
        return state, ActionResult.not_found(APPLICATION_NOT_FOUND)
    if application.status != OnboardingStatus.REJECTED:
        return state, ActionResult.precondition_failed("仅被驳回的入驻申请可重新提交")

    pending = replace(
        application, status=OnboardingStatus.PENDING, reject_reason=None, submitted_at=ctx.now_iso()
    )
    next_state = replace(
        _commit(state, pending),
        notifications=notify(
            state,
            ctx,
            NotificationCategory.APPROVAL,
            "入驻申请重新提交",
            f"{application.organization_name} 已重新提交入驻申请，待市场部审核。",
        ),
    )
    return next_state, ActionResult.ok(application.id)


def submit_onboarding_materials(
    state: AppState, ctx: StoreContext, data: SubmitOnboardingMaterialsInput
) -> Transition:
    """Replace the organization materials and put the application back to pending."""
    application = find_by_id(state.onboarding_applications, data.application_id)
    if application is None:
        return state, ActionResult.not_found(APPLICATION_NOT_FOUND)
    if application.status in LOCKED_STATUSES:
        return state, ActionResult.precondition_failed("入驻申请已审核通过，资料不可修改")

    required = (
        (data.contact_name, "请输入联系人"),
        (data.contact_phone, "请输入联系电话"),
        (data.invoice_title, "请输入开票抬头"),
        (data.tax_no, "请输入税号"),
        (data.business_license_file, "请上传营业执照"),
        (data.qualification_file, "请上传经营资质"),
    )
    errors = [message for value, message in required if not value.strip()]
    if errors:
        return state, ActionResult.invalid(errors)

    submitted = replace(
        application,
        contact_name=data.contact_name.strip(),
        contact_phone=data.contact_phone.strip(),
        invoice_title=data.invoice_title.strip(),
        tax_no=data.tax_no.strip(),
        business_license_file=data.business_license_file.strip(),
        qualification_file=data.qualification_file.strip(),
        status=OnboardingStatus.PENDING,
        reject_reason=None,
        submitted_at=ctx.now_iso(),
    )
    next_state = replace(
        _commit(state, submitted),
        notifications=notify(
            state,
            ctx,
            NotificationCategory.APPROVAL,
            "入驻资料已提交",
            f"{application.organization_name} 已提交组织资料，待市场部审核。",
        ),
    )
    return next_state, ActionResult.ok(application.id)
