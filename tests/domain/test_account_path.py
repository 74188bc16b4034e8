"""Tests for account paths and account matching policies."""

import pytest

from src.domain.models.accounts import AccountPath
from src.domain.policies.account_filters import account_subtree, exact_account


def test_parse_splits_on_colons() -> None:
    """Account names split into their colon-separated segments."""
    path = AccountPath.parse("expenses:food:coffee")
    assert path.segments == ("expenses", "food", "coffee")
    assert path.name == "expenses:food:coffee"
    assert path.depth == 3
    assert str(path) == "expenses:food:coffee"


def test_parse_rejects_empty_names() -> None:
    """A blank account name is not a path."""
    with pytest.raises(ValueError):
        AccountPath.parse("   ")


def test_parent_and_ancestry() -> None:
    """Parents and ancestors follow whole segments."""
    food = AccountPath.parse("expenses:food")
    coffee = AccountPath.parse("expenses:food:coffee")
    assert coffee.parent == food
    assert AccountPath.parse("expenses").parent is None
    assert food.is_ancestor_of(coffee)
    assert not coffee.is_ancestor_of(food)
    assert not food.is_ancestor_of(food)
    assert food.contains(food)


def test_prefix_of_a_segment_is_not_an_ancestor() -> None:
    """assets:sav must not contain assets:savings."""
    assert not AccountPath.parse("assets:sav").contains(
        AccountPath.parse("assets:savings")
    )


def test_exact_account_matches_only_the_same_path() -> None:
    """Exact matching ignores parents and children."""
    matches = exact_account("assets:savings")
    assert matches(AccountPath.parse("assets:savings"))
    assert not matches(AccountPath.parse("assets:savings:joint"))
    assert not matches(AccountPath.parse("assets"))


def test_account_subtree_matches_descendants() -> None:
    """Subtree matching includes the root and all descendants."""
    matches = account_subtree(AccountPath.parse("expenses"))
    assert matches(AccountPath.parse("expenses"))
    assert matches(AccountPath.parse("expenses:food:coffee"))
    assert not matches(AccountPath.parse("income:salary"))
