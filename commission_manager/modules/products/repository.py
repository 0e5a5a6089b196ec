# commission_manager/modules/products/repository.py
from typing import List, Optional
from sqlalchemy.orm import Session
from sqlalchemy import or_

from commission_manager.core.exceptions import NotFoundError
from commission_manager.shared.database.models import Product
from commission_manager.shared.records import ProductRecord

def _to_record(product: Product) -> ProductRecord:
    return ProductRecord(
        id=product.id,
        name=product.name,
        price=product.price,
        active=bool(product.active),
        sku=product.sku,
        description=product.description,
        stock=product.stock or 0,
        category=product.category,
        created_at=product.created_at,
        updated_at=product.updated_at
    )

class ProductRepository:
    """
    Catalog Provider: acceso de solo lectura al catálogo de productos
    """

    def __init__(self, db: Session):
        self.db = db

    def find_by_id(self, product_id: str, lock: bool = False) -> ProductRecord:
        """
        Obtener producto por ID (FOR SHARE cuando lock=True)
        """
        query = self.db.query(Product).filter(Product.id == product_id)
        if lock:
            query = query.with_for_update(read=True)

        product = query.first()
        if not product:
            raise NotFoundError(f"Producto con ID {product_id} no encontrado")

        return _to_record(product)

    def find_all(
        self,
        active: Optional[bool] = None,
        category: Optional[str] = None,
        search: Optional[str] = None
    ) -> List[ProductRecord]:
        """
        Listar productos ordenados por nombre. search busca en nombre y descripción
        """
        query = self.db.query(Product)

        if active is not None:
            query = query.filter(Product.active == active)

        if category:
            query = query.filter(Product.category == category)

        if search:
            query = query.filter(
                or_(
                    Product.name.ilike(f'%{search}%'),
                    Product.description.ilike(f'%{search}%')
                )
            )

        return [_to_record(p) for p in query.order_by(Product.name.asc()).all()]
