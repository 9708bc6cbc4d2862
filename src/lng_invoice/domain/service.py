"""Invoice application review and invoice issuance."""

from dataclasses import replace

from src.lng_common.enums import (
    InvoiceApplicationStatus,
    InvoiceStatus,
    NotificationCategory,
    ReviewAction,
)
from src.lng_common.money import round2
from src.lng_common.records import find_by_id, prepend, replace_by_id
from src.lng_common.results import ActionResult
from src.lng_invoice.domain.models import (
    CreateInvoiceApplicationInput,
    InvoiceApplication,
    InvoiceItem,
    IssueInvoiceInput,
    ReviewInvoiceApplicationInput,
)
from src.lng_notification.domain.service import notify
from src.lng_store.state import AppState, StoreContext, Transition

DEFAULT_REJECT_REASON = "申请信息不完整"


def create_invoice_application(
    state: AppState, ctx: StoreContext, data: CreateInvoiceApplicationInput
) -> Transition:
    """Validate and file an application against a confirmed statement.

    All applicable errors are collected; on any error nothing changes.
    """
    errors: list[str] = []
    statement = find_by_id(state.reconciliations, data.statement_id)

    if statement is None:
        errors.append("请选择有效的对账单")
    elif not statement.is_invoiceable:
        errors.append("仅双方已确认或线下已确认的对账单可申请开票")
    if not data.invoice_title.strip():
        errors.append("开票抬头不能为空")
    if not data.tax_no.strip():
        errors.append("税号不能为空")
    if data.discount_enabled and data.discount_amount <= 0:
        errors.append("启用优惠时，优惠金额必须大于 0")
    if statement is not None and data.discount_enabled and data.discount_amount > statement.total_amount:
        errors.append("优惠金额不能超过对账金额")
    if not data.applicant.strip():
        errors.append("申请人不能为空")

    if errors or statement is None:
        return state, ActionResult.invalid(errors)

    discount = data.discount_amount if data.discount_enabled else 0.0
    application = InvoiceApplication(
        id=ctx.ids.next_id("iap"),
        number=ctx.ids.next_no("IA"),
        statement_id=statement.id,
        statement_no=statement.number,
        customer_name=statement.customer_name,
        order_numbers=statement.order_numbers,
        original_amount=statement.total_amount,
        discount_enabled=data.discount_enabled,
        discount_amount=discount,
        requested_amount=round2(statement.total_amount - discount),
        invoice_title=data.invoice_title,
        tax_no=data.tax_no,
        applicant=data.applicant,
        applied_at=ctx.now_iso(),
        status=InvoiceApplicationStatus.PENDING_REVIEW,
        note=data.note,
    )
    next_state = replace(
        state,
        invoice_applications=prepend(state.invoice_applications, application),
        notifications=notify(
            state, ctx, NotificationCategory.FINANCE, "新增开票申请待审核", f"{application.number} 已提交，待财务审核。"
        ),
    )
    return next_state, ActionResult.ok(application.id)


def review_invoice_application(
    state: AppState, ctx: StoreContext, data: ReviewInvoiceApplicationInput
) -> Transition:
    """Reject, or approve and spawn exactly one pending InvoiceItem.

    On approve the result carries the new invoice id.
    """
    application = find_by_id(state.invoice_applications, data.application_id)
    if application is None:
        return state, ActionResult.not_found("开票申请不存在")
    if application.status != InvoiceApplicationStatus.PENDING_REVIEW:
        return state, ActionResult.precondition_failed(f"{application.number} 已审核，不可重复处理")

    if data.action == ReviewAction.REJECT:
        reason = data.reason or DEFAULT_REJECT_REASON
        rejected = replace(
            application,
            status=InvoiceApplicationStatus.REJECTED,
            reviewer=data.reviewer,
            reviewed_at=ctx.now_iso(),
            reject_reason=reason,
        )
        next_state = replace(
            state,
            invoice_applications=replace_by_id(state.invoice_applications, rejected),
            notifications=notify(
                state, ctx, NotificationCategory.FINANCE, "开票申请已驳回", f"{application.number} 已驳回，原因：{reason}"
            ),
        )
        return next_state, ActionResult.ok(application.id)

    invoice = InvoiceItem(
        id=ctx.ids.next_id("inv"),
        number=ctx.ids.next_no("INV"),
        customer_name=application.customer_name,
        amount=application.requested_amount,
        issue_date=ctx.today(),
        statement_no=application.statement_no,
        status=InvoiceStatus.PENDING,
        application_id=application.id,
    )
    approved = replace(
        application,
        status=InvoiceApplicationStatus.APPROVED,
        reviewer=data.reviewer,
        reviewed_at=ctx.now_iso(),
        reject_reason=None,
        invoice_id=invoice.id,
    )
    next_state = replace(
        state,
        invoice_applications=replace_by_id(state.invoice_applications, approved),
        invoices=prepend(state.invoices, invoice),
        notifications=notify(
            state,
            ctx,
            NotificationCategory.FINANCE,
            "开票申请已通过",
            f"{application.number} 已通过审核，生成待开票任务 {invoice.number}。",
        ),
    )
    return next_state, ActionResult.ok(invoice.id)


def issue_invoice(state: AppState, ctx: StoreContext, data: IssueInvoiceInput) -> Transition:
    """Mark a pending invoice issued and close its application as invoiced."""
    invoice = find_by_id(state.invoices, data.invoice_id)
    if invoice is None:
        return state, ActionResult.not_found("发票不存在")
    if invoice.status == InvoiceStatus.ISSUED:
        return state, ActionResult.precondition_failed(f"发票 {invoice.number} 已开具")

    invoice_no = (data.invoice_no or "").strip()
    issued = replace(
        invoice,
        number=invoice_no or invoice.number,
        status=InvoiceStatus.ISSUED,
        issue_date=data.issue_date or ctx.today(),
        tax_rate=data.tax_rate,
        attachment_name=data.attachment_name,
        issued_by=data.issuer,
    )
    applications = state.invoice_applications
    application = find_by_id(applications, invoice.application_id) if invoice.application_id else None
    if application is not None:
        applications = replace_by_id(
            applications, replace(application, status=InvoiceApplicationStatus.INVOICED)
        )

    next_state = replace(
        state,
        invoices=replace_by_id(state.invoices, issued),
        invoice_applications=applications,
        notifications=notify(
            state,
            ctx,
            NotificationCategory.FINANCE,
            "发票已开具",
            f"{invoice.number} 已由 {data.issuer} 完成开票并归档。",
        ),
    )
    return next_state, ActionResult.ok(invoice.id)
