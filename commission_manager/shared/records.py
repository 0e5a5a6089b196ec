# commission_manager/shared/records.py
"""
Registros de datos planos que circulan entre repositorios y servicios.

Los modelos ORM nunca salen de los repositorios; cada repositorio convierte
sus filas en estos registros inmutables.
"""

from dataclasses import dataclass
from datetime import datetime
from decimal import Decimal
from enum import Enum
from typing import Optional


class SaleStatus(str, Enum):
    finalized = "finalized"
    cancelled = "cancelled"
    pending = "pending"


@dataclass(frozen=True, slots=True)
class VendorRecord:
    """Vendedor tal como lo expone el Vendor Provider"""

    id: str
    name: str
    email: str
    commission_percent: Decimal
    active: bool
    cpf: Optional[str] = None
    phone: Optional[str] = None
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None


@dataclass(frozen=True, slots=True)
class ProductRecord:
    """Producto tal como lo expone el Catalog Provider"""

    id: str
    name: str
    price: Decimal
    active: bool
    sku: Optional[str] = None
    description: Optional[str] = None
    stock: int = 0
    category: Optional[str] = None
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None


@dataclass(frozen=True, slots=True)
class SaleRecord:
    """
    Venta registrada.

    unit_price y commission_percent son copias tomadas al registrar la venta;
    no se vuelven a leer del catálogo ni del vendedor.
    """

    id: str
    product_id: str
    vendor_id: str
    quantity: int
    unit_price: Decimal
    total_value: Decimal
    commission_percent: Decimal
    commission_value: Decimal
    sale_date: datetime
    status: SaleStatus
    note: Optional[str] = None
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None


@dataclass(frozen=True, slots=True)
class SaleFilters:
    """Filtros opcionales (combinados con AND) para listar ventas"""

    vendor_id: Optional[str] = None
    product_id: Optional[str] = None
    status: Optional[SaleStatus] = None
    date_start: Optional[datetime] = None
    date_end: Optional[datetime] = None


@dataclass(frozen=True, slots=True)
class Period:
    """
    Ventana de fechas sobre sale_date.

    start siempre es inclusivo; end_inclusive decide si end también lo es.
    """

    start: Optional[datetime] = None
    end: Optional[datetime] = None
    end_inclusive: bool = True


@dataclass(frozen=True, slots=True)
class PeriodTotals:
    total_value: Decimal
    quantity_of_sales: int
    total_commission: Decimal
    average_ticket: Decimal


@dataclass(frozen=True, slots=True)
class VendorAggregate:
    """Fila agrupada por vendedor, con sus datos de contacto actuales"""

    vendor_id: str
    vendor_name: str
    vendor_email: str
    commission_percent: Decimal
    total_value: Decimal
    quantity_of_sales: int
    total_commission: Decimal
    average_ticket: Decimal
