from datetime import datetime
from decimal import Decimal
from typing import Optional

from commission_manager.shared.schemas import ApiBaseModel

class ProductResponse(ApiBaseModel):
    id: str
    name: str
    description: Optional[str] = None
    price: Decimal
    sku: Optional[str] = None
    stock: int = 0
    category: Optional[str] = None
    active: bool
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None
