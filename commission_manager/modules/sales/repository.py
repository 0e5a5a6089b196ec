# commission_manager/modules/sales/repository.py
import logging
from typing import Any, List, Mapping
from sqlalchemy.orm import Session
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy import desc

from commission_manager.core.exceptions import NotFoundError
from commission_manager.shared.database.models import Sale
from commission_manager.shared.records import SaleFilters, SaleRecord, SaleStatus

logger = logging.getLogger(__name__)

# Columnas que update_fields acepta; id y timestamps no se tocan desde afuera
_UPDATABLE_FIELDS = frozenset({
    "product_id", "vendor_id", "quantity", "unit_price", "total_value",
    "commission_value", "sale_date", "note", "status"
})

def _to_record(sale: Sale) -> SaleRecord:
    return SaleRecord(
        id=sale.id,
        product_id=sale.product_id,
        vendor_id=sale.vendor_id,
        quantity=sale.quantity,
        unit_price=sale.unit_price,
        total_value=sale.total_value,
        commission_percent=sale.commission_percent,
        commission_value=sale.commission_value,
        sale_date=sale.sale_date,
        status=SaleStatus(sale.status),
        note=sale.note,
        created_at=sale.created_at,
        updated_at=sale.updated_at
    )

class SalesRepository:
    """
    Sale Store: persistencia de ventas. No aplica reglas de negocio.
    """

    def __init__(self, db: Session):
        self.db = db

    def create(self, fields: Mapping[str, Any]) -> SaleRecord:
        """
        Insertar una venta y confirmar la transacción
        """
        sale = Sale(**fields)
        self.db.add(sale)
        self._commit("crear venta")
        self.db.refresh(sale)
        return _to_record(sale)

    def update_fields(self, sale_id: str, fields: Mapping[str, Any]) -> int:
        """
        Actualizar columnas de una venta. Devuelve las filas afectadas
        """
        unknown = set(fields) - _UPDATABLE_FIELDS
        if unknown:
            raise ValueError(f"Campos no actualizables: {sorted(unknown)}")

        sale = self.db.query(Sale).filter(Sale.id == sale_id).first()
        if not sale:
            return 0

        for key, value in fields.items():
            setattr(sale, key, value)

        self._commit("actualizar venta")
        return 1

    def find_by_id(self, sale_id: str) -> SaleRecord:
        sale = self.db.query(Sale).filter(Sale.id == sale_id).first()
        if not sale:
            raise NotFoundError(f"Venta con ID {sale_id} no encontrada")
        return _to_record(sale)

    def find_many(self, filters: SaleFilters) -> List[SaleRecord]:
        """
        Listar ventas filtradas, de la más reciente a la más antigua
        """
        query = self.db.query(Sale)

        if filters.vendor_id:
            query = query.filter(Sale.vendor_id == filters.vendor_id)

        if filters.product_id:
            query = query.filter(Sale.product_id == filters.product_id)

        if filters.status:
            query = query.filter(Sale.status == filters.status)

        # Rango de fechas inclusivo en ambos extremos
        if filters.date_start:
            query = query.filter(Sale.sale_date >= filters.date_start)

        if filters.date_end:
            query = query.filter(Sale.sale_date <= filters.date_end)

        sales = query.order_by(desc(Sale.sale_date), Sale.id.asc()).all()
        return [_to_record(s) for s in sales]

    def rollback(self) -> None:
        self.db.rollback()

    def _commit(self, action: str) -> None:
        try:
            self.db.commit()
        except SQLAlchemyError:
            logger.exception(f"Error de base de datos al {action}")
            self.db.rollback()
            raise
