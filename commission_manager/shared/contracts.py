# commission_manager/shared/contracts.py
"""
Interfaces que consumen la Sale Recorder y el Report Aggregator.

Los repositorios SQLAlchemy las implementan; los tests pueden pasar dobles
en memoria.
"""

from typing import Any, List, Mapping, Optional, Protocol

from commission_manager.shared.records import (
    Period, PeriodTotals, ProductRecord, SaleFilters,
    SaleRecord, VendorAggregate, VendorRecord
)

class VendorProvider(Protocol):
    def find_by_id(self, vendor_id: str, lock: bool = False) -> VendorRecord:
        """Lanza NotFoundError si no existe"""
        ...

class CatalogProvider(Protocol):
    def find_by_id(self, product_id: str, lock: bool = False) -> ProductRecord:
        """Lanza NotFoundError si no existe"""
        ...

class SaleStore(Protocol):
    def create(self, fields: Mapping[str, Any]) -> SaleRecord: ...

    def update_fields(self, sale_id: str, fields: Mapping[str, Any]) -> int:
        """Devuelve la cantidad de filas afectadas"""
        ...

    def find_by_id(self, sale_id: str) -> SaleRecord: ...

    def find_many(self, filters: SaleFilters) -> List[SaleRecord]: ...

    def rollback(self) -> None: ...

class SaleAggregateStore(Protocol):
    """Agregados sobre ventas finalizadas únicamente"""

    def summarize(self, period: Period) -> PeriodTotals: ...

    def group_by_vendor(
        self,
        period: Period,
        vendor_id: Optional[str] = None,
        order_by: str = "total_value",
        limit: Optional[int] = None
    ) -> List[VendorAggregate]: ...
