"""Statement stamping and upstream archive upload."""

from dataclasses import replace

from src.lng_common.enums import NotificationCategory, StampActor, StatementStatus
from src.lng_common.records import find_by_id, prepend, replace_by_id
from src.lng_common.results import ActionResult
from src.lng_notification.domain.service import notify
from src.lng_reconciliation.domain.models import StampLog, UploadUpstreamArchiveInput, UpstreamArchive
from src.lng_store.state import AppState, StoreContext, Transition

# actor -> (required status, status after stamping)
STAMP_PHASES = {
    StampActor.PLATFORM: (StatementStatus.DRAFT, StatementStatus.PLATFORM_STAMPED),
    StampActor.CUSTOMER: (StatementStatus.PLATFORM_STAMPED, StatementStatus.DOUBLE_CONFIRMED),
}


def apply_stamp(
    state: AppState, ctx: StoreContext, statement_id: str, actor_type: StampActor, actor: str
) -> Transition:
    """Advance a statement by one signature phase.

    Platform stamps only from draft, customer only from platform-stamped.
    Out of phase the statement is left alone and PRECONDITION_FAILED returned.
    """
    statement = find_by_id(state.reconciliations, statement_id)
    if statement is None:
        return state, ActionResult.not_found("对账单不存在")

    required, next_status = STAMP_PHASES[actor_type]
    if statement.status != required:
        return state, ActionResult.precondition_failed(
            f"{statement.number} 当前状态不可{'平台' if actor_type == StampActor.PLATFORM else '客户'}签章"
        )

    stamped = replace(
        statement,
        status=next_status,
        stamp_logs=(*statement.stamp_logs, StampLog(actor_type, actor, ctx.now_iso())),
    )
    platform = actor_type == StampActor.PLATFORM
    next_state = replace(
        state,
        reconciliations=replace_by_id(state.reconciliations, stamped),
        notifications=notify(
            state,
            ctx,
            NotificationCategory.SYSTEM,
            "确认单已加盖公章" if platform else "确认单双方签章完成",
            f"{statement.number} 当前状态：{'待客户签章' if platform else '双方已确认'}",
        ),
    )
    return next_state, ActionResult.ok(statement.id)


def upload_upstream_archive(
    state: AppState, ctx: StoreContext, data: UploadUpstreamArchiveInput
) -> Transition:
    record = UpstreamArchive(
        id=ctx.ids.next_id("upa"),
        upstream_company=data.upstream_company,
        period=data.period,
        file_name=data.file_name,
        archived_by=data.archived_by,
        archived_at=ctx.now_iso(),
        note=data.note,
    )
    next_state = replace(
        state,
        upstream_archives=prepend(state.upstream_archives, record),
        notifications=notify(
            state,
            ctx,
            NotificationCategory.SYSTEM,
            "上游对账已存档",
            f"{record.upstream_company} {record.period} 对账文件已归档。",
        ),
    )
    return next_state, ActionResult.ok(record.id)
