# commission_manager/modules/vendors/repository.py
from typing import List, Optional
from sqlalchemy.orm import Session

from commission_manager.core.exceptions import NotFoundError
from commission_manager.shared.database.models import Vendor
from commission_manager.shared.records import VendorRecord

def _to_record(vendor: Vendor) -> VendorRecord:
    return VendorRecord(
        id=vendor.id,
        name=vendor.name,
        email=vendor.email,
        commission_percent=vendor.commission_percent,
        active=bool(vendor.active),
        cpf=vendor.cpf,
        phone=vendor.phone,
        created_at=vendor.created_at,
        updated_at=vendor.updated_at
    )

class VendorRepository:
    """
    Vendor Provider: acceso de solo lectura a los vendedores
    """

    def __init__(self, db: Session):
        self.db = db

    def find_by_id(self, vendor_id: str, lock: bool = False) -> VendorRecord:
        """
        Obtener vendedor por ID. Con lock=True la fila queda bloqueada en modo
        compartido hasta el fin de la transacción (FOR SHARE)
        """
        query = self.db.query(Vendor).filter(Vendor.id == vendor_id)
        if lock:
            query = query.with_for_update(read=True)

        vendor = query.first()
        if not vendor:
            raise NotFoundError(f"Vendedor con ID {vendor_id} no encontrado")

        return _to_record(vendor)

    def find_all(self, active: Optional[bool] = None) -> List[VendorRecord]:
        """
        Listar vendedores ordenados por nombre, opcionalmente por estado
        """
        query = self.db.query(Vendor)
        if active is not None:
            query = query.filter(Vendor.active == active)

        return [_to_record(v) for v in query.order_by(Vendor.name.asc()).all()]
