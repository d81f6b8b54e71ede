from __future__ import annotations

from decimal import ROUND_HALF_UP, Decimal, localcontext


def format_num(value: float | int | Decimal, decimals: int) -> str:
    """Round ``value`` to ``decimals`` fractional digits and drop trailing zeros.

    ``format_num(10, 6) == "10"``, ``format_num(10.5, 3) == "10.5"``,
    ``format_num(10.505, 5) == "10.505"``.

    Floats go through their shortest ``repr`` before rounding, so a literal
    like ``10.505`` is rounded as written rather than as its binary expansion.
    NaN and infinities raise ``ValueError``.
    """
    if isinstance(value, bool) or not isinstance(value, (int, float, Decimal)):
        raise ValueError(f"format_num expects a number, got {type(value).__name__}.")
    if decimals < 0:
        raise ValueError("decimals must be a non-negative integer.")

    number = value if isinstance(value, Decimal) else Decimal(repr(value))
    if not number.is_finite():
        raise ValueError(f"Cannot format non-finite number: {value!r}.")

    with localcontext() as ctx:
        ctx.prec = max(ctx.prec, number.adjusted() + decimals + 2)
        rounded = number.quantize(Decimal(1).scaleb(-decimals), rounding=ROUND_HALF_UP)
    if rounded.is_zero():
        return "0"

    text = format(rounded, "f")
    if "." not in text:
        return text
    integral, fraction = text.split(".", 1)
    fraction = fraction.rstrip("0")
    if not fraction:
        return integral
    return f"{integral}.{fraction}"
