"""Account invariant verification after each committed transition."""

import logging

from src.lng_account.domain.models import Account
from src.lng_common.money import round2

logger = logging.getLogger(__name__)


def verify_account_invariant(account: Account) -> None:
    """Raise AssertionError if funds leaked between buckets.

    total == round2(available + occupied + frozen)
    """
    parts = round2(account.available + account.occupied + account.frozen)
    assert round2(account.total) == parts, (
        f"Account invariant violated: total={account.total} != available({account.available}) "
        f"+ occupied({account.occupied}) + frozen({account.frozen}) = {parts}"
    )
    logger.debug(
        "Invariants OK: total=%.2f available=%.2f occupied=%.2f frozen=%.2f",
        account.total,
        account.available,
        account.occupied,
        account.frozen,
    )
