# commission_manager/modules/sales/service.py
import logging
from typing import Any, Dict, List, Mapping, Optional

from commission_manager.core.exceptions import (
    BusinessRuleViolation, CommissionManagerError, NotFoundError, ValidationError
)
from commission_manager.shared.contracts import CatalogProvider, SaleStore, VendorProvider
from commission_manager.shared.money import compute_commission, compute_total_value
from commission_manager.shared.records import SaleFilters, SaleRecord, SaleStatus
from commission_manager.shared.validation import (
    optional_timestamp, optional_uuid, parse_timestamp,
    require_quantity, require_status, require_uuid
)

logger = logging.getLogger(__name__)

_PATCHABLE_FIELDS = ("product_id", "vendor_id", "quantity", "sale_date", "note", "status")

class SalesService:
    """
    Sale Recorder: valida, calcula valores y registra ventas.

    Las validaciones y reglas de negocio se ejecutan antes de cualquier
    escritura; un fallo no deja estado parcial.
    """

    def __init__(
        self,
        repository: SaleStore,
        vendors: VendorProvider,
        catalog: CatalogProvider
    ):
        self.repository = repository
        self.vendors = vendors
        self.catalog = catalog

    # ==================== REGISTRO ====================

    def create(
        self,
        product_id: str,
        vendor_id: str,
        quantity: int,
        sale_date: Any,
        note: Optional[str] = None
    ) -> SaleRecord:
        """
        Registrar una venta nueva.

        Copia el precio del producto y el porcentaje de comisión del vendedor
        vigentes en este momento y calcula total y comisión.
        """
        product_id = require_uuid(product_id, "product_id")
        vendor_id = require_uuid(vendor_id, "vendor_id")
        quantity = require_quantity(quantity)
        sale_date = parse_timestamp(sale_date, "sale_date")

        try:
            # Lecturas con bloqueo compartido: nadie desactiva vendedor o
            # producto entre la verificación y el commit de la venta
            vendor = self.vendors.find_by_id(vendor_id, lock=True)
            if not vendor.active:
                raise BusinessRuleViolation("Vendedor inactivo no puede realizar ventas")

            product = self.catalog.find_by_id(product_id, lock=True)
            if not product.active:
                raise BusinessRuleViolation("Producto inactivo no puede ser vendido")

            unit_price = product.price
            total_value = compute_total_value(unit_price, quantity)
            commission_percent = vendor.commission_percent
            commission_value = compute_commission(total_value, commission_percent)

            sale = self.repository.create({
                "product_id": product_id,
                "vendor_id": vendor_id,
                "quantity": quantity,
                "unit_price": unit_price,
                "total_value": total_value,
                "commission_percent": commission_percent,
                "commission_value": commission_value,
                "sale_date": sale_date,
                "note": note,
                "status": SaleStatus.finalized
            })
        except BusinessRuleViolation as e:
            logger.warning(f"Venta rechazada (vendedor {vendor_id}, producto {product_id}): {e.message}")
            self.repository.rollback()
            raise
        except CommissionManagerError:
            self.repository.rollback()
            raise

        logger.info(
            f"Venta {sale.id} registrada - vendedor {vendor_id} - "
            f"total {sale.total_value} - comisión {sale.commission_value}"
        )
        return sale

    # ==================== CONSULTAS ====================

    def find_one(self, sale_id: str) -> SaleRecord:
        """
        Buscar una venta por ID
        """
        return self.repository.find_by_id(require_uuid(sale_id))

    def find_all(
        self,
        vendor_id: Optional[str] = None,
        product_id: Optional[str] = None,
        status: Optional[str] = None,
        date_start: Optional[Any] = None,
        date_end: Optional[Any] = None
    ) -> List[SaleRecord]:
        """
        Listar ventas con filtros opcionales combinados (AND).
        El rango de fechas es inclusivo; orden por sale_date descendente.
        """
        filters = SaleFilters(
            vendor_id=optional_uuid(vendor_id, "vendor_id"),
            product_id=optional_uuid(product_id, "product_id"),
            status=require_status(status) if status else None,
            date_start=optional_timestamp(date_start, "date_start"),
            date_end=optional_timestamp(date_end, "date_end")
        )
        return self.repository.find_many(filters)

    # ==================== ACTUALIZACIÓN ====================

    def update(self, sale_id: str, patch: Mapping[str, Any]) -> SaleRecord:
        """
        Actualizar una venta.

        Si cambia la cantidad o el producto se recalculan precio unitario,
        total y comisión, reutilizando el commission_percent original de la
        venta y no la tasa actual del vendedor.
        """
        sale_id = require_uuid(sale_id)
        changes = self._validate_patch(patch)

        try:
            current = self.repository.find_by_id(sale_id)

            if "vendor_id" in changes and changes["vendor_id"] != current.vendor_id:
                # Solo se verifica que exista; la comisión copiada no cambia
                self.vendors.find_by_id(changes["vendor_id"])

            quantity_changed = changes.get("quantity", current.quantity) != current.quantity
            product_changed = changes.get("product_id", current.product_id) != current.product_id

            if quantity_changed or product_changed:
                product = self.catalog.find_by_id(
                    changes.get("product_id", current.product_id), lock=True
                )
                quantity = changes.get("quantity", current.quantity)
                total_value = compute_total_value(product.price, quantity)

                changes["unit_price"] = product.price
                changes["total_value"] = total_value
                changes["commission_value"] = compute_commission(
                    total_value, current.commission_percent
                )

            if changes:
                self.repository.update_fields(sale_id, changes)
                logger.info(f"Venta {sale_id} actualizada - campos: {sorted(changes)}")
        except CommissionManagerError:
            self.repository.rollback()
            raise

        return self.repository.find_by_id(sale_id)

    def remove(self, sale_id: str) -> None:
        """
        Cancelar una venta (nunca se elimina físicamente)
        """
        sale_id = require_uuid(sale_id)

        affected = self.repository.update_fields(sale_id, {"status": SaleStatus.cancelled})
        if affected == 0:
            raise NotFoundError(f"Venta con ID {sale_id} no encontrada")

        logger.info(f"Venta {sale_id} cancelada")

    # ==================== HELPERS ====================

    def _validate_patch(self, patch: Mapping[str, Any]) -> Dict[str, Any]:
        unknown = set(patch) - set(_PATCHABLE_FIELDS)
        if unknown:
            raise ValidationError(f"Campos no permitidos: {', '.join(sorted(unknown))}")

        changes: Dict[str, Any] = {}
        if "product_id" in patch:
            changes["product_id"] = require_uuid(patch["product_id"], "product_id")
        if "vendor_id" in patch:
            changes["vendor_id"] = require_uuid(patch["vendor_id"], "vendor_id")
        if "quantity" in patch:
            changes["quantity"] = require_quantity(patch["quantity"])
        if "sale_date" in patch:
            changes["sale_date"] = parse_timestamp(patch["sale_date"], "sale_date")
        if "note" in patch:
            changes["note"] = patch["note"]
        if "status" in patch:
            changes["status"] = require_status(patch["status"])
        return changes
