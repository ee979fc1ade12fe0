"""Money parsing, arithmetic context and rendering helpers.

Amounts are capped at the magnitude of a double (1e308) and all money
arithmetic runs under ``money_context()``, whose precision covers every
digit of a capped amount plus the three rendered decimals.
"""

from decimal import ROUND_HALF_UP, Context, Decimal, InvalidOperation, localcontext

AMOUNT_QUANTUM = Decimal("0.001")
PERCENT_QUANTUM = Decimal("0.1")

MAX_AMOUNT_EXPONENT = 308
MONEY_PRECISION = 400


def money_context() -> Context:
    """Decimal context used for every balance and fee computation."""
    return Context(prec=MONEY_PRECISION, rounding=ROUND_HALF_UP)


def to_amount(value: Decimal | int | float | str) -> Decimal:
    """Convert a raw value to a finite, non-negative ``Decimal``.

    Floats go through ``str`` so ``0.1`` stays ``Decimal("0.1")``.

    Raises
    ------
    ValueError
        If the value is not a number, is not finite, is negative or is
        larger than 1e308.
    """
    if isinstance(value, Decimal):
        amount = value
    else:
        try:
            amount = Decimal(str(value).strip())
        except InvalidOperation:
            raise ValueError(f"Invalid amount: {value}") from None

    if not amount.is_finite():
        raise ValueError(f"Invalid amount: {value}")
    if amount < 0:
        raise ValueError(f"Amount must not be negative: {value}")
    if amount and amount.adjusted() > MAX_AMOUNT_EXPONENT:
        raise ValueError(f"Amount too large: {value}")
    return amount


def format_amount(value: Decimal) -> str:
    """Render a monetary value with exactly three decimals, e.g. ``98.500``."""
    with localcontext(money_context()):
        return f"{value.quantize(AMOUNT_QUANTUM):f}"


def format_percent(rate: Decimal) -> str:
    """Render a fee rate as a one-decimal percentage, e.g. ``0.015`` -> ``1.5``."""
    with localcontext(money_context()):
        return f"{(rate * 100).quantize(PERCENT_QUANTUM):f}"
