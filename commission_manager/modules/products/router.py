# commission_manager/modules/products/router.py
from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session
from typing import List, Optional

from commission_manager.config.database import get_db
from commission_manager.shared.validation import require_uuid
from .repository import ProductRepository
from .schemas import ProductResponse

router = APIRouter(prefix="/products", tags=["Products"])

@router.get("", response_model=List[ProductResponse])
def list_products(
    active: Optional[bool] = None,
    category: Optional[str] = None,
    search: Optional[str] = None,
    db: Session = Depends(get_db)
):
    """
    Listar productos del catálogo

    - active: filtra por estado
    - category: filtra por categoría exacta
    - search: texto a buscar en nombre o descripción
    """
    return ProductRepository(db).find_all(active=active, category=category, search=search)

@router.get("/{product_id}", response_model=ProductResponse)
def get_product(product_id: str, db: Session = Depends(get_db)):
    """
    Consultar un producto por ID
    """
    return ProductRepository(db).find_by_id(require_uuid(product_id, "product_id"))
