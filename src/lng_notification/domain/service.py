"""Notification factory and the mark-read transition.

Almost every mutating operation emits one NotificationItem; the list is
append-only (newest first) and only the read flag ever changes.
"""

from dataclasses import replace

from src.lng_common.enums import NotificationCategory
from src.lng_common.records import find_by_id, prepend, replace_by_id
from src.lng_common.results import ActionResult
from src.lng_notification.domain.models import NotificationItem
from src.lng_store.state import AppState, StoreContext, Transition


def make_notification(
    ctx: StoreContext,
    category: NotificationCategory,
    title: str,
    content: str,
) -> NotificationItem:
    return NotificationItem(
        id=ctx.ids.next_id("msg"),
        category=category,
        title=title,
        content=content,
        created_at=ctx.now_iso(),
    )


def notify(
    state: AppState,
    ctx: StoreContext,
    category: NotificationCategory,
    title: str,
    content: str,
) -> tuple[NotificationItem, ...]:
    """Notifications of ``state`` with a new item in front."""
    return prepend(state.notifications, make_notification(ctx, category, title, content))


def mark_notification_read(
    state: AppState, ctx: StoreContext, notification_id: str
) -> Transition:
    target = find_by_id(state.notifications, notification_id)
    if target is None:
        return state, ActionResult.not_found("消息不存在")
    if target.read:
        return state, ActionResult.ok(target.id)
    return (
        replace(state, notifications=replace_by_id(state.notifications, replace(target, read=True))),
        ActionResult.ok(target.id),
    )
