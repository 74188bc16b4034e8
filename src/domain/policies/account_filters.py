"""Account matching policies used to select postings for reports."""

from collections.abc import Callable

from src.domain.models.accounts import AccountPath

AccountPredicate = Callable[[AccountPath], bool]


def _as_path(account: AccountPath | str) -> AccountPath:
    if isinstance(account, AccountPath):
        return account
    return AccountPath.parse(account)


def exact_account(account: AccountPath | str) -> AccountPredicate:
    """Return a predicate matching one account exactly.

    Args:
        account: Account name or parsed path to match.

    Returns:
        AccountPredicate: True only for the same account path.
    """
    target = _as_path(account)

    def _matches(candidate: AccountPath) -> bool:
        return candidate == target

    return _matches


def account_subtree(account: AccountPath | str) -> AccountPredicate:
    """Return a predicate matching an account and all of its sub-accounts.

    Args:
        account: Root account name or parsed path.

    Returns:
        AccountPredicate: True for the root and every descendant.
    """
    root = _as_path(account)
    return root.contains


__all__ = ["AccountPredicate", "exact_account", "account_subtree"]
