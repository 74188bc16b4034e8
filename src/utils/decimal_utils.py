"""Helpers for Decimal normalization and minor-unit conversion."""

from decimal import Decimal, localcontext


def coerce_decimal(value) -> Decimal:
    """Normalize numeric values to Decimal.

    Floats are routed through ``str`` so that ``0.1`` becomes ``Decimal("0.1")``
    rather than its binary expansion.

    Args:
        value: Raw numeric value from parsers or adapters.

    Returns:
        Decimal: Normalized numeric value.
    """
    if value is None:
        return Decimal("0")
    if isinstance(value, Decimal):
        return value
    return Decimal(str(value))


def to_minor_units(value, scale: int) -> int:
    """Convert a decimal value to an integer count of minor units.

    The conversion runs with enough context precision for every digit of
    ``value``, so no rounding happens however large the amount is.

    Args:
        value: Numeric value to convert.
        scale: Number of fractional digits of the minor unit (2 for cents).

    Returns:
        int: Value expressed in minor units.

    Raises:
        ValueError: If the value carries more fractional digits than ``scale``.
    """
    decimal_value = coerce_decimal(value)
    digits = len(decimal_value.as_tuple().digits)
    with localcontext() as ctx:
        ctx.prec = max(ctx.prec, digits + abs(scale) + 1)
        scaled = decimal_value.scaleb(scale)
        if scaled != scaled.to_integral_value():
            raise ValueError(
                f"{decimal_value} has more than {scale} fractional digits"
            )
        return int(scaled)


def from_minor_units(units: int, scale: int) -> Decimal:
    """Convert an integer count of minor units back to a Decimal.

    Args:
        units: Value expressed in minor units.
        scale: Number of fractional digits of the minor unit.

    Returns:
        Decimal: Exact value with ``scale`` fractional digits.
    """
    digits = len(str(abs(units)))
    with localcontext() as ctx:
        ctx.prec = max(ctx.prec, digits + abs(scale) + 1)
        return Decimal(units).scaleb(-scale)


__all__ = ["coerce_decimal", "to_minor_units", "from_minor_units"]
