"""
Datos de demostración: vendedores, productos y algunas ventas.

Las ventas se registran a través de SalesService para que sus valores
calculados sigan las mismas reglas que las ventas reales.
"""

import logging
from datetime import datetime, timedelta, timezone
from decimal import Decimal
from typing import Dict

from sqlalchemy.orm import Session

from commission_manager.modules.products.repository import ProductRepository
from commission_manager.modules.sales.repository import SalesRepository
from commission_manager.modules.sales.service import SalesService
from commission_manager.modules.vendors.repository import VendorRepository
from commission_manager.shared.database.models import Product, Vendor

logger = logging.getLogger(__name__)

DEMO_VENDORS = [
    {"name": "João Silva", "email": "joao.silva@example.com", "cpf": "123.456.789-00",
     "phone": "(11) 98765-4321", "commission_percent": Decimal("5")},
    {"name": "Maria Santos", "email": "maria.santos@example.com", "cpf": "987.654.321-00",
     "phone": "(11) 98765-1234", "commission_percent": Decimal("7")},
    {"name": "Pedro Oliveira", "email": "pedro.oliveira@example.com", "cpf": "456.789.123-00",
     "phone": "(11) 98765-5678", "commission_percent": Decimal("10")},
    {"name": "Ana Costa", "email": "ana.costa@example.com", "cpf": "321.654.987-00",
     "phone": "(11) 98765-9012", "commission_percent": Decimal("6")},
]

DEMO_PRODUCTS = [
    {"name": "Notebook Dell Inspiron 15", "sku": "NB-DELL-001", "price": Decimal("4500.00"),
     "category": "Informática", "stock": 20,
     "description": "Notebook com Intel Core i7, 16GB RAM, 512GB SSD"},
    {"name": "Mouse Logitech MX Master 3", "sku": "MS-LOGI-001", "price": Decimal("549.90"),
     "category": "Periféricos", "stock": 80},
    {"name": "Monitor LG UltraWide 29", "sku": "MN-LG-001", "price": Decimal("1299.99"),
     "category": "Monitores", "stock": 35},
    {"name": "Teclado Mecânico Redragon", "sku": "TC-RED-001", "price": Decimal("289.90"),
     "category": "Periféricos", "stock": 60},
]

# (vendedor, producto, cantidad, días atrás)
DEMO_SALES = [
    (0, 0, 2, 1),
    (0, 1, 3, 3),
    (1, 2, 1, 2),
    (1, 0, 1, 5),
    (2, 3, 4, 0),
    (3, 1, 2, 7),
]

def seed_demo_data(db: Session) -> Dict[str, int]:
    """
    Poblar la base con datos de demostración. No hace nada si ya hay vendedores
    """
    if db.query(Vendor).first() is not None:
        logger.info("Seed omitido: la base ya tiene vendedores")
        return {"vendors": 0, "products": 0, "sales": 0}

    vendors = [Vendor(**data) for data in DEMO_VENDORS]
    products = [Product(**data) for data in DEMO_PRODUCTS]
    db.add_all(vendors + products)
    db.commit()

    service = SalesService(
        repository=SalesRepository(db),
        vendors=VendorRepository(db),
        catalog=ProductRepository(db)
    )

    now = datetime.now(timezone.utc)
    for vendor_index, product_index, quantity, days_ago in DEMO_SALES:
        service.create(
            product_id=products[product_index].id,
            vendor_id=vendors[vendor_index].id,
            quantity=quantity,
            sale_date=now - timedelta(days=days_ago)
        )

    logger.info(
        f"Seed completado: {len(vendors)} vendedores, "
        f"{len(products)} productos, {len(DEMO_SALES)} ventas"
    )
    return {"vendors": len(vendors), "products": len(products), "sales": len(DEMO_SALES)}
