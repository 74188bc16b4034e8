"""Domain policies package."""

from .account_filters import AccountPredicate, account_subtree, exact_account

__all__ = ["AccountPredicate", "account_subtree", "exact_account"]
