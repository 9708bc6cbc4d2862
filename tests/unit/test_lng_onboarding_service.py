"""Unit tests for counterparty onboarding."""

from src.lng_common.enums import CustomerLevel, OnboardingStatus, ReviewAction
from src.lng_common.records import find_by_id
from src.lng_common.results import Outcome
from src.lng_onboarding.domain.models import (
    ReviewOnboardingInput,
    SubmitOnboardingMaterialsInput,
    UploadOnboardingContractInput,
)
from src.lng_store.store import DomainStore


def _application(store: DomainStore, application_id: str):
    return find_by_id(store.state.onboarding_applications, application_id)


def _materials(application_id: str, **overrides) -> SubmitOnboardingMaterialsInput:
    base = dict(
        application_id=application_id,
        contact_name=" 刘主管 ",
        contact_phone="13900139000",
        invoice_title="华东承运物流有限公司",
        tax_no="91320500MA7654321Y",
        business_license_file="license.pdf",
        qualification_file="transport-cert.pdf",
    )
    base.update(overrides)
    return SubmitOnboardingMaterialsInput(**base)


class TestReview:
    def test_approve_sets_level(self, store: DomainStore) -> None:
        store.review_onboarding(
            ReviewOnboardingInput("onb-001", ReviewAction.APPROVE, "周婷", level=CustomerLevel.A)
        )
        application = _application(store, "onb-001")
        assert application.status == OnboardingStatus.APPROVED
        assert application.level == CustomerLevel.A
        assert application.reviewer == "周婷"
        assert store.state.notifications[0].title == "入驻审核通过"

    def test_reject_default_reason(self, store: DomainStore) -> None:
        store.review_onboarding(ReviewOnboardingInput("onb-001", ReviewAction.REJECT, "周婷"))
        application = _application(store, "onb-001")
        assert application.status == OnboardingStatus.REJECTED
        assert application.reject_reason == "资料不完整"

    def test_activated_is_final(self, store: DomainStore) -> None:
        store.review_onboarding(ReviewOnboardingInput("onb-001", ReviewAction.APPROVE, "周婷"))
        store.upload_onboarding_contract(UploadOnboardingContractInput("onb-001", "服务合同.pdf", "2026-02-15"))
        before = store.state
        result = store.review_onboarding(ReviewOnboardingInput("onb-001", ReviewAction.REJECT, "周婷"))
        assert result.outcome is Outcome.PRECONDITION_FAILED
        assert store.state is before

    def test_unknown_application(self, store: DomainStore) -> None:
        result = store.review_onboarding(ReviewOnboardingInput("nope", ReviewAction.APPROVE, "x"))
        assert result.error == "未找到可提交的入驻申请"


class TestContract:
    def test_upload_activates(self, store: DomainStore) -> None:
        store.review_onboarding(ReviewOnboardingInput("onb-001", ReviewAction.APPROVE, "周婷"))
        assert store.upload_onboarding_contract(
            UploadOnboardingContractInput("onb-001", "服务合同.pdf", "2026-02-15")
        ).success
        application = _application(store, "onb-001")
        assert application.status == OnboardingStatus.ACTIVATED
        assert application.contract_name == "服务合同.pdf"
        assert application.contract_effective_date == "2026-02-15"

    def test_requires_approved(self, store: DomainStore) -> None:
        result = store.upload_onboarding_contract(UploadOnboardingContractInput("onb-001", "c.pdf", "2026-02-15"))
        assert result.outcome is Outcome.PRECONDITION_FAILED


class TestResubmit:
    def test_rejected_back_to_pending(self, store: DomainStore) -> None:
        assert store.resubmit_onboarding("onb-002").success
        application = _application(store, "onb-002")
        assert application.status == OnboardingStatus.PENDING
        assert application.reject_reason is None
        assert application.submitted_at == "2026-02-10T09:00:00.000Z"

    def test_pending_cannot_resubmit(self, store: DomainStore) -> None:
        assert store.resubmit_onboarding("onb-001").outcome is Outcome.PRECONDITION_FAILED


class TestMaterials:
    def test_submit_replaces_materials(self, store: DomainStore) -> None:
        assert store.submit_onboarding_materials(_materials("onb-002")).success
        application = _application(store, "onb-002")
        assert application.status == OnboardingStatus.PENDING
        assert application.contact_name == "刘主管"
        assert application.qualification_file == "transport-cert.pdf"
        assert application.reject_reason is None

    def test_all_missing_fields_reported(self, store: DomainStore) -> None:
        result = store.submit_onboarding_materials(
            _materials("onb-002", contact_phone=" ", tax_no="", qualification_file="")
        )
        assert result.errors == ("请输入联系电话", "请输入税号", "请上传经营资质")

    def test_locked_after_approval(self, store: DomainStore) -> None:
        store.review_onboarding(ReviewOnboardingInput("onb-001", ReviewAction.APPROVE, "周婷"))
        result = store.submit_onboarding_materials(_materials("onb-001"))
        assert result.outcome is Outcome.PRECONDITION_FAILED
