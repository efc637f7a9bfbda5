"""Lot-size arithmetic shared by /calc_lot and /set_lot."""

from decimal import ROUND_HALF_UP, Context, Decimal

MIN_LOT = 0.01

# Assumed account currency per 0.01 lot of risk; fixed policy, not user input
VALUE_PER_LOT = 100.0

_CENTS = Decimal("0.01")
# Wide enough to hold any finite float at two decimals
_CONTEXT = Context(prec=400)


def round_cents(value: float) -> Decimal:
    """Round to 2 decimals with exact halves going up (0.125 -> 0.13).

    Works on the float's exact binary value, so 1.005 (stored just below
    the tie) still rounds down to 1.00.
    """
    return Decimal(value).quantize(_CENTS, rounding=ROUND_HALF_UP, context=_CONTEXT)


def clamp_lot(lot: float) -> float:
    """Round to 2 decimals and never go below MIN_LOT."""
    return max(MIN_LOT, float(round_cents(lot)))


def calculate_lot_size(balance: float, risk_pct: float) -> float:
    risk_amount = balance * risk_pct / 100.0
    return clamp_lot(risk_amount / VALUE_PER_LOT)
