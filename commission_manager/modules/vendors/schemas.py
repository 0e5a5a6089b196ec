from datetime import datetime
from decimal import Decimal
from typing import Optional

from commission_manager.shared.schemas import ApiBaseModel

class VendorResponse(ApiBaseModel):
    id: str
    name: str
    email: str
    cpf: Optional[str] = None
    phone: Optional[str] = None
    active: bool
    commission_percent: Decimal
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None
