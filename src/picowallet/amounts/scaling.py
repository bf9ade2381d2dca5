"""
Exact decimal <-> minor-unit scaling for token amounts. No binary floats.
"""

from __future__ import annotations

from decimal import (MAX_EMAX, MIN_EMIN, ROUND_HALF_UP, Context, Decimal,
                     InvalidOperation, localcontext)
from typing import Union

from ..errors import AmountError

AmountLike = Union[int, str, Decimal, float]

_MIN_PRECISION = 28
# Upper bound on integer + fractional digits of an amount, and on decimals.
MAX_AMOUNT_DIGITS = 10_000


def _to_decimal(amount: AmountLike) -> Decimal:
    """Exact Decimal for amount; floats go through their shortest repr."""
    if isinstance(amount, Decimal):
        value = amount
    else:
        text = str(amount).strip()
        if "_" in text:
            raise AmountError(f"digit separators are not allowed: {amount!r}")
        try:
            value = Decimal(text)
        except InvalidOperation as e:
            raise AmountError(f"not a decimal amount: {amount!r}") from e
    if not value.is_finite():
        raise AmountError(f"amount must be finite: {amount!r}")
    _, digits, exponent = value.as_tuple()
    if len(digits) + abs(exponent) > MAX_AMOUNT_DIGITS:
        raise AmountError(f"amount exceeds {MAX_AMOUNT_DIGITS} digits: {amount!r}")
    return value


def _check_decimals(decimals: int) -> None:
    if isinstance(decimals, bool) or not isinstance(decimals, int) or decimals < 0:
        raise AmountError(f"decimals must be a non-negative integer: {decimals!r}")
    if decimals > MAX_AMOUNT_DIGITS:
        raise AmountError(f"decimals must be at most {MAX_AMOUNT_DIGITS}: {decimals}")


def _exact_context(value: Decimal, decimals: int) -> Context:
    """Context with enough digits that scaling and rounding value stay exact."""
    sign, digits, exponent = value.as_tuple()
    precision = len(digits) + abs(exponent) + decimals + 2
    return Context(
        prec=max(_MIN_PRECISION, precision),
        rounding=ROUND_HALF_UP,
        Emax=MAX_EMAX,
        Emin=MIN_EMIN,
    )


def parse_amount(amount: AmountLike, decimals: int) -> int:
    """
    Decimal amount -> integer count of minor units.

    Multiplies by 10**decimals and rounds half away from zero.

    Args:
        amount: Decimal value as str, int, Decimal or float.
        decimals: Token decimal count.

    Returns:
        Minor-unit integer, e.g. ``parse_amount("1.23", 6) == 1230000``.
    """
    _check_decimals(decimals)
    value = _to_decimal(amount)
    with localcontext(_exact_context(value, decimals)):
        scaled = value.scaleb(decimals)
        return int(scaled.quantize(Decimal(1), rounding=ROUND_HALF_UP))


def format_amount(amount: AmountLike, decimals: int) -> str:
    """
    Minor units -> decimal string with exactly ``decimals`` fractional digits.

    Args:
        amount: Minor-unit amount (int, or any decimal value).
        decimals: Token decimal count.

    Returns:
        Fixed-point string, e.g. ``format_amount(1230000, 6) == "1.230000"``.
    """
    _check_decimals(decimals)
    value = _to_decimal(amount)
    with localcontext(_exact_context(value, decimals)):
        quantum = Decimal(1).scaleb(-decimals)
        scaled = value.scaleb(-decimals).quantize(quantum, rounding=ROUND_HALF_UP)
    if scaled.is_zero():
        scaled = scaled.copy_abs()
    return format(scaled, "f")


__all__: tuple[str, ...] = (
    "format_amount",
    "parse_amount",
)
