"""Money and weight arithmetic for the LNG store.

Amounts are yuan as float, weights are tonnes as float. Every stored field is
rounded to 2 decimals once, after the arithmetic that produced it, never per
intermediate term.
"""

from decimal import ROUND_HALF_UP, Decimal

_CENT = Decimal("0.01")


def round2(value: float) -> float:
    """Round to 2 decimals, half-up on the decimal representation: 0.1 + 0.2 -> 0.3."""
    return float(Decimal(str(value)).quantize(_CENT, rounding=ROUND_HALF_UP))


def money_to_display(amount: float) -> str:
    """Format yuan for display: 160000 -> '¥160,000.00', -12.5 -> '-¥12.50'."""
    if amount < 0:
        return f"-¥{-round2(amount):,.2f}"
    return f"¥{round2(amount):,.2f}"


def weight_to_display(weight: float | None) -> str:
    """Format tonnes for display: 17.8 -> '17.800 吨', None -> '--'."""
    if weight is None:
        return "--"
    return f"{weight:.3f} 吨"
