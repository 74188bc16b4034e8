"""Register report: postings to one account with a running balance."""

from src.domain.models.accounts import AccountPath
from src.domain.models.amount import Amount
from src.domain.models.ledger import Ledger
from src.domain.models.reports import RegisterEntry
from src.domain.policies.account_filters import exact_account


def register(
    ledger: Ledger,
    account: AccountPath | str,
    opening_balance: Amount | None = None,
) -> list[RegisterEntry]:
    """Return the register of an account.

    Args:
        ledger: Parsed ledger.
        account: Account name or path, matched exactly.
        opening_balance: Balance before the first entry; zero when omitted.

    Returns:
        list[RegisterEntry]: One entry per matching posting, in ledger order.
            Empty when the account has no postings or the name is blank.
    """
    if isinstance(account, str) and not account.strip():
        return []
    balance = opening_balance if opening_balance is not None else Amount.zero()
    entries = []
    for index, transaction, posting in ledger.indexed_postings_for(
        exact_account(account)
    ):
        balance = balance + posting.amount
        entries.append(
            RegisterEntry(
                date=transaction.date,
                description=transaction.description,
                account=posting.account.name,
                amount=posting.amount,
                balance_after=balance,
                transaction_index=index,
            )
        )
    return entries


def transaction_count(ledger: Ledger) -> int:
    """Return the number of transactions in the ledger."""
    return ledger.transaction_count()


__all__ = ["register", "transaction_count"]
