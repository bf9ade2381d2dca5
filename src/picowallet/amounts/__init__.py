"""Token amount scaling between decimal strings and minor units."""

from .scaling import format_amount, parse_amount

__all__: tuple[str, ...] = ("format_amount", "parse_amount")
