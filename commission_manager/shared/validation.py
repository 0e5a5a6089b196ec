# commission_manager/shared/validation.py
"""
Validaciones de entrada compartidas por los servicios.

Se ejecutan antes de llamar a cualquier colaborador; todo fallo es ValidationError.
"""

import re
from datetime import date, datetime, time, timezone
from typing import Any, Optional

from commission_manager.core.exceptions import ValidationError
from commission_manager.shared.records import SaleStatus

_UUID_PATTERN = re.compile(
    r"^[0-9a-f]{8}-[0-9a-f]{4}-[0-9a-f]{4}-[0-9a-f]{4}-[0-9a-f]{12}$",
    re.IGNORECASE
)

def require_uuid(value: Any, name: str = "id") -> str:
    """Devuelve el UUID en su forma canónica (minúsculas)"""
    if not isinstance(value, str) or not _UUID_PATTERN.match(value):
        raise ValidationError(f"{name} {value} inválido")
    return value.lower()

def optional_uuid(value: Optional[Any], name: str = "id") -> Optional[str]:
    if value is None:
        return None
    return require_uuid(value, name)

def to_utc_naive(value: datetime) -> datetime:
    """Se guarda UTC naive: los valores con zona se convierten, los naive se toman como UTC"""
    if value.tzinfo is None or value.utcoffset() is None:
        return value
    return value.astimezone(timezone.utc).replace(tzinfo=None)

def parse_timestamp(value: Any, name: str = "sale_date") -> datetime:
    """
    Acepta datetime, date o texto ISO-8601.
    Una fecha sin hora significa medianoche de ese día
    """
    if isinstance(value, datetime):
        return to_utc_naive(value)
    if isinstance(value, date):
        return datetime.combine(value, time.min)
    if isinstance(value, str) and value.strip():
        try:
            parsed = datetime.fromisoformat(value.strip().replace("Z", "+00:00"))
        except ValueError:
            raise ValidationError(f"{name} inválida: {value}") from None
        return to_utc_naive(parsed)
    raise ValidationError(f"{name} inválida: {value!r}")

def optional_timestamp(value: Optional[Any], name: str) -> Optional[datetime]:
    if value is None or value == "":
        return None
    return parse_timestamp(value, name)

def require_quantity(value: Any) -> int:
    # bool es subclase de int
    if isinstance(value, bool) or not isinstance(value, int):
        raise ValidationError(f"quantity debe ser un entero, recibido {value!r}")
    if value < 1:
        raise ValidationError("La cantidad debe ser como mínimo 1")
    return value

def require_status(value: Any) -> SaleStatus:
    try:
        return SaleStatus(value)
    except ValueError:
        allowed = ", ".join(s.value for s in SaleStatus)
        raise ValidationError(f"status debe ser uno de: {allowed}") from None
