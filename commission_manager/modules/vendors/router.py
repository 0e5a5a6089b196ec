# commission_manager/modules/vendors/router.py
from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session
from typing import List, Optional

from commission_manager.config.database import get_db
from commission_manager.shared.validation import require_uuid
from .repository import VendorRepository
from .schemas import VendorResponse

router = APIRouter(prefix="/vendors", tags=["Vendors"])

@router.get("", response_model=List[VendorResponse])
def list_vendors(
    active: Optional[bool] = None,
    db: Session = Depends(get_db)
):
    """
    Listar vendedores, opcionalmente filtrando por estado activo
    """
    return VendorRepository(db).find_all(active=active)

@router.get("/{vendor_id}", response_model=VendorResponse)
def get_vendor(vendor_id: str, db: Session = Depends(get_db)):
    """
    Consultar un vendedor por ID
    """
    return VendorRepository(db).find_by_id(require_uuid(vendor_id, "vendor_id"))
