# commission_manager/shared/money.py
"""
Cálculos monetarios. Todo valor derivado pasa por round2 antes de guardarse.
"""

from decimal import ROUND_HALF_UP, Decimal
from typing import Union

Number = Union[Decimal, int, float, str]

_CENTS = Decimal("0.01")
_HUNDRED = Decimal("100")

def to_decimal(value: Number) -> Decimal:
    """Convertir a Decimal pasando por str (un float conserva su valor impreso)"""
    if isinstance(value, Decimal):
        return value
    return Decimal(str(value))

def round2(value: Number) -> Decimal:
    """Redondeo half-up a exactamente dos decimales"""
    return to_decimal(value).quantize(_CENTS, rounding=ROUND_HALF_UP)

def compute_total_value(unit_price: Number, quantity: int) -> Decimal:
    return round2(to_decimal(unit_price) * quantity)

def compute_commission(total_value: Number, commission_percent: Number) -> Decimal:
    return round2(to_decimal(total_value) * to_decimal(commission_percent) / _HUNDRED)
