"""Exact fixed-point amounts."""

from collections.abc import Iterable
from dataclasses import dataclass
from decimal import Decimal

from src.domain.constants import CURRENCY_SYMBOL, MINOR_UNIT_SCALE
from src.utils.decimal_utils import from_minor_units, to_minor_units


@dataclass(frozen=True, order=True)
class Amount:
    """Signed amount stored as an integer number of minor units.

    Attributes:
        minor_units: Value in the smallest currency subdivision (cents).
        commodity: Commodity symbol the amount is expressed in.
    """

    minor_units: int
    commodity: str = CURRENCY_SYMBOL

    @classmethod
    def zero(cls, commodity: str = CURRENCY_SYMBOL) -> "Amount":
        """Return a zero amount in the given commodity."""
        return cls(0, commodity)

    @classmethod
    def from_decimal(
        cls,
        value: Decimal | int | str,
        commodity: str = CURRENCY_SYMBOL,
    ) -> "Amount":
        """Build an amount from a decimal value.

        Args:
            value: Value in major units, e.g. ``Decimal("10.25")``.
            commodity: Commodity symbol.

        Returns:
            Amount: The equivalent amount in minor units.

        Raises:
            ValueError: If the value is finer than the minor unit.
        """
        return cls(to_minor_units(value, MINOR_UNIT_SCALE), commodity)

    def to_decimal(self) -> Decimal:
        """Return the amount in major units with two fractional digits."""
        return from_minor_units(self.minor_units, MINOR_UNIT_SCALE)

    def is_zero(self) -> bool:
        return self.minor_units == 0

    def _check_commodity(self, other: "Amount") -> None:
        if self.commodity != other.commodity:
            raise ValueError(
                "Cannot combine amounts with different commodities: "
                f"{self.commodity!r} and {other.commodity!r}"
            )

    def __add__(self, other: "Amount") -> "Amount":
        if not isinstance(other, Amount):
            return NotImplemented
        self._check_commodity(other)
        return Amount(self.minor_units + other.minor_units, self.commodity)

    def __sub__(self, other: "Amount") -> "Amount":
        if not isinstance(other, Amount):
            return NotImplemented
        self._check_commodity(other)
        return Amount(self.minor_units - other.minor_units, self.commodity)

    def __neg__(self) -> "Amount":
        return Amount(-self.minor_units, self.commodity)

    def __str__(self) -> str:
        sign = "-" if self.minor_units < 0 else ""
        whole, fraction = divmod(abs(self.minor_units), 10**MINOR_UNIT_SCALE)
        return (
            f"{self.commodity}{sign}{whole}."
            f"{fraction:0{MINOR_UNIT_SCALE}d}"
        )


def sum_amounts(
    amounts: Iterable[Amount],
    commodity: str = CURRENCY_SYMBOL,
) -> Amount:
    """Sum amounts exactly, starting from zero.

    Args:
        amounts: Amounts to add up.
        commodity: Commodity of the starting zero.

    Returns:
        Amount: The total.
    """
    total = Amount.zero(commodity)
    for amount in amounts:
        total = total + amount
    return total


__all__ = ["Amount", "sum_amounts"]
