"""Rounding helpers for vocab_srs.

All interval and ease-factor rounding goes through ``round_half_up`` so
that schedules are reproducible. Python's built-in ``round`` uses banker's
rounding (``round(32.5) == 32``), which is not the policy here.
"""

from decimal import ROUND_HALF_UP, Decimal, localcontext

__all__ = [
    "round_half_up",
    "round_to_int",
]


def _quantize(value: float, quantum: Decimal) -> Decimal:
    exact = Decimal(value)
    with localcontext() as ctx:
        # Enough digits for every finite float; the default 28 overflows above ~1e26
        ctx.prec = max(ctx.prec, exact.adjusted() - quantum.adjusted() + 2)
        return exact.quantize(quantum, rounding=ROUND_HALF_UP)


def round_half_up(value: float, ndigits: int = 0) -> float:
    """Round to ``ndigits`` decimals, ties away from zero.

    The exact binary value of ``value`` is rounded, so ``2.675`` (stored as
    2.67499999...) rounds to ``2.67``.

    Args:
        value: Finite number to round
        ndigits: Number of decimal places to keep

    Returns:
        Rounded value as float
    """
    return float(_quantize(value, Decimal(1).scaleb(-ndigits)))


def round_to_int(value: float) -> int:
    """Round to the nearest integer, ties away from zero."""
    return int(_quantize(value, Decimal(1)))
