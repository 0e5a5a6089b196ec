# commission_manager/modules/sales/router.py
from fastapi import APIRouter, Depends, Response, status
from sqlalchemy.orm import Session
from typing import List, Optional

from commission_manager.config.database import get_db
from commission_manager.modules.products.repository import ProductRepository
from commission_manager.modules.vendors.repository import VendorRepository
from .repository import SalesRepository
from .service import SalesService
from .schemas import SaleCreateRequest, SaleUpdateRequest, SaleResponse

router = APIRouter(prefix="/sales", tags=["Sales"])

def get_sales_service(db: Session = Depends(get_db)) -> SalesService:
    return SalesService(
        repository=SalesRepository(db),
        vendors=VendorRepository(db),
        catalog=ProductRepository(db)
    )

@router.post("", response_model=SaleResponse, status_code=status.HTTP_201_CREATED)
def create_sale(
    sale_data: SaleCreateRequest,
    service: SalesService = Depends(get_sales_service)
):
    """
    Registrar una nueva venta (calcula la comisión automáticamente)

    - Vendedor y producto deben existir y estar activos
    - total_value = precio unitario × cantidad
    - commission_value = total_value × porcentaje del vendedor / 100
    """
    return service.create(
        product_id=sale_data.product_id,
        vendor_id=sale_data.vendor_id,
        quantity=sale_data.quantity,
        sale_date=sale_data.sale_date,
        note=sale_data.note
    )

@router.get("", response_model=List[SaleResponse])
def list_sales(
    vendor_id: Optional[str] = None,
    product_id: Optional[str] = None,
    status: Optional[str] = None,
    date_start: Optional[str] = None,
    date_end: Optional[str] = None,
    service: SalesService = Depends(get_sales_service)
):
    """
    Listar ventas, de la más reciente a la más antigua

    Filtros opcionales: vendedor, producto, estado y rango de fechas inclusivo
    (date_start / date_end en formato ISO-8601).
    """
    return service.find_all(
        vendor_id=vendor_id,
        product_id=product_id,
        status=status,
        date_start=date_start,
        date_end=date_end
    )

@router.get("/{sale_id}", response_model=SaleResponse)
def get_sale(sale_id: str, service: SalesService = Depends(get_sales_service)):
    """
    Buscar venta por ID
    """
    return service.find_one(sale_id)

@router.patch("/{sale_id}", response_model=SaleResponse)
def update_sale(
    sale_id: str,
    update_data: SaleUpdateRequest,
    service: SalesService = Depends(get_sales_service)
):
    """
    Actualizar venta

    Si cambian cantidad o producto se recalculan los valores usando el
    porcentaje de comisión registrado originalmente en la venta.
    """
    return service.update(sale_id, update_data.model_dump(exclude_unset=True))

@router.delete("/{sale_id}", status_code=status.HTTP_204_NO_CONTENT)
def cancel_sale(sale_id: str, service: SalesService = Depends(get_sales_service)):
    """
    Cancelar venta (queda con status cancelled, no se borra)
    """
    service.remove(sale_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
