from datetime import datetime, timezone
from uuid import uuid4

from sqlalchemy import Column, Integer, String, Boolean, DateTime, Text, ForeignKey, Numeric, Enum, Index
from sqlalchemy.orm import relationship
from commission_manager.config.database import Base
from commission_manager.shared.records import SaleStatus

def _new_id() -> str:
    return str(uuid4())

def _utcnow() -> datetime:
    """Naive UTC, el mismo formato en que se guarda sale_date"""
    return datetime.now(timezone.utc).replace(tzinfo=None)

class TimestampMixin:
    """Mixin para timestamps automáticos"""
    created_at = Column(DateTime, default=_utcnow, nullable=False)
    updated_at = Column(DateTime, default=_utcnow, onupdate=_utcnow, nullable=False)

# ===== VENDEDORES =====

class Vendor(Base, TimestampMixin):
    """Modelo de Vendedor"""
    __tablename__ = "vendors"

    id = Column(String(36), primary_key=True, default=_new_id)
    name = Column(String(255), nullable=False)
    email = Column(String(255), unique=True, nullable=False)
    cpf = Column(String(20), unique=True, nullable=False)
    phone = Column(String(50))
    active = Column(Boolean, default=True, nullable=False, index=True)
    commission_percent = Column(Numeric(5, 2), default=5, nullable=False)

    # Relationships
    sales = relationship("Sale", back_populates="vendor")

# ===== PRODUCTOS =====

class Product(Base, TimestampMixin):
    """Modelo de Producto"""
    __tablename__ = "products"

    id = Column(String(36), primary_key=True, default=_new_id)
    name = Column(String(255), nullable=False)
    description = Column(Text)
    price = Column(Numeric(10, 2), nullable=False)
    sku = Column(String(100), unique=True, nullable=False)
    stock = Column(Integer, default=0, nullable=False)
    category = Column(String(100), index=True)
    active = Column(Boolean, default=True, nullable=False, index=True)

    # Relationships
    sales = relationship("Sale", back_populates="product")

# ===== VENTAS =====

class Sale(Base, TimestampMixin):
    """
    Modelo de Venta.

    unit_price y commission_percent son copias congeladas al momento de la
    venta. Las ventas nunca se borran: se cancelan vía status.
    """
    __tablename__ = "sales"

    id = Column(String(36), primary_key=True, default=_new_id)
    product_id = Column(String(36), ForeignKey("products.id"), nullable=False)
    vendor_id = Column(String(36), ForeignKey("vendors.id"), nullable=False)
    quantity = Column(Integer, nullable=False)
    unit_price = Column(Numeric(10, 2), nullable=False)
    total_value = Column(Numeric(10, 2), nullable=False)
    commission_percent = Column(Numeric(5, 2), nullable=False)
    commission_value = Column(Numeric(10, 2), nullable=False)
    sale_date = Column(DateTime, nullable=False)
    note = Column(Text)
    status = Column(
        Enum(SaleStatus, name="sale_status", values_callable=lambda e: [s.value for s in e]),
        default=SaleStatus.finalized,
        nullable=False
    )

    __table_args__ = (
        Index("ix_sales_vendor_sale_date", "vendor_id", "sale_date"),
        Index("ix_sales_product_sale_date", "product_id", "sale_date"),
        Index("ix_sales_sale_date", "sale_date"),
        Index("ix_sales_status", "status"),
    )

    # Relationships
    vendor = relationship("Vendor", back_populates="sales")
    product = relationship("Product", back_populates="sales")
