from pydantic import BaseModel, Field
from typing import Optional
from datetime import datetime
from decimal import Decimal

from commission_manager.shared.records import SaleStatus
from commission_manager.shared.schemas import ApiBaseModel

# ==================== REQUEST SCHEMAS ====================

class SaleCreateRequest(BaseModel):
    product_id: str = Field(..., description="ID del producto vendido",
                            examples=["123e4567-e89b-12d3-a456-426614174000"])
    vendor_id: str = Field(..., description="ID del vendedor responsable",
                           examples=["123e4567-e89b-12d3-a456-426614174001"])
    # quantity y sale_date se validan en el servicio (ValidationError -> 400)
    quantity: int = Field(..., description="Cantidad vendida (mínimo 1)")
    sale_date: str = Field(..., description="Fecha de la venta (ISO-8601)",
                           examples=["2025-10-16T10:30:00Z"])
    note: Optional[str] = Field(None, description="Observaciones sobre la venta")

class SaleUpdateRequest(BaseModel):
    """Todos los campos son opcionales; solo se aplican los enviados"""
    product_id: Optional[str] = None
    vendor_id: Optional[str] = None
    quantity: Optional[int] = None
    sale_date: Optional[str] = None
    note: Optional[str] = None
    status: Optional[str] = Field(None, description="finalized, cancelled o pending")

# ==================== RESPONSE SCHEMAS ====================

class SaleResponse(ApiBaseModel):
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
