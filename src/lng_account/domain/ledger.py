"""Fund movements on the Account and the matching ledger records.

Each movement shifts one amount between two buckets and rounds every touched
field once. Callers pair each movement with exactly one LedgerRecord.

  occupy:  available -> occupied   (plan submitted)
  release: occupied  -> available  (plan returned / cancelled)
  freeze:  occupied  -> frozen     (plan approved)
  credit:  outside   -> total + available (deposit confirmed)
"""

from dataclasses import replace

from src.lng_account.domain.models import Account, LedgerRecord
from src.lng_common.enums import LedgerType
from src.lng_common.money import round2
from src.lng_store.state import StoreContext


def occupy(account: Account, amount: float) -> Account:
    return replace(
        account,
        available=round2(account.available - amount),
        occupied=round2(account.occupied + amount),
    )


def release(account: Account, amount: float) -> Account:
    return replace(
        account,
        available=round2(account.available + amount),
        occupied=round2(account.occupied - amount),
    )


def freeze(account: Account, amount: float) -> Account:
    return replace(
        account,
        occupied=round2(account.occupied - amount),
        frozen=round2(account.frozen + amount),
    )


def credit(account: Account, amount: float) -> Account:
    return replace(
        account,
        total=round2(account.total + amount),
        available=round2(account.available + amount),
    )


def make_ledger_record(
    ctx: StoreContext,
    entry_type: LedgerType,
    amount: float,
    related_no: str,
    note: str,
) -> LedgerRecord:
    return LedgerRecord(
        id=ctx.ids.next_id("ldg"),
        type=entry_type,
        amount=round2(amount),
        related_no=related_no,
        note=note,
        created_at=ctx.now_iso(),
    )
