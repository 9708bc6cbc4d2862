"""Helpers for immutable record collections.

Collections on the state snapshot are tuples, newest first. Updating one
record means building a new tuple with that record replaced.
"""

from collections.abc import Iterable, Mapping
from types import MappingProxyType
from typing import Protocol, TypeVar


class HasId(Protocol):
    @property
    def id(self) -> str: ...


T = TypeVar("T", bound=HasId)


def find_by_id(items: Iterable[T], entity_id: str) -> T | None:
    for item in items:
        if item.id == entity_id:
            return item
    return None


def replace_by_id(items: tuple[T, ...], updated: T) -> tuple[T, ...]:
    return tuple(updated if item.id == updated.id else item for item in items)


def prepend(items: tuple[T, ...], item: T) -> tuple[T, ...]:
    return (item, *items)


def frozen_index(entries: Mapping[str, str] | None = None) -> Mapping[str, str]:
    """Read-only mapping; writing to it raises TypeError."""
    return MappingProxyType(dict(entries or {}))


def index_with(index: Mapping[str, str], key: str, value: str) -> Mapping[str, str]:
    """Copy of ``index`` with one more entry. The original stays untouched."""
    return MappingProxyType({**index, key: value})
