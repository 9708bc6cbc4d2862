"""Notification domain model."""

from dataclasses import dataclass

from src.lng_common.enums import NotificationCategory


@dataclass(frozen=True)
class NotificationItem:
    id: str
    category: NotificationCategory
    title: str
    content: str
    created_at: str
    read: bool = False
