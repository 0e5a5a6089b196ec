# commission_manager/modules/reports/repository.py
from decimal import Decimal
from typing import List, Optional
from sqlalchemy.orm import Session
from sqlalchemy import and_, func, desc

from commission_manager.shared.database.models import Sale, Vendor
from commission_manager.shared.money import round2
from commission_manager.shared.records import (
    Period, PeriodTotals, SaleStatus, VendorAggregate
)

_ZERO = round2(0)

def _money(value) -> Decimal:
    return round2(value) if value is not None else _ZERO

class ReportsRepository:
    """
    Consultas agregadas sobre ventas finalizadas (solo lectura)
    """

    ORDER_COLUMNS = ("total_value", "total_commission")

    def __init__(self, db: Session):
        self.db = db

    def _conditions(self, period: Period, vendor_id: Optional[str] = None) -> list:
        conditions = [Sale.status == SaleStatus.finalized]

        if period.start is not None:
            conditions.append(Sale.sale_date >= period.start)

        if period.end is not None:
            if period.end_inclusive:
                conditions.append(Sale.sale_date <= period.end)
            else:
                conditions.append(Sale.sale_date < period.end)

        if vendor_id:
            conditions.append(Sale.vendor_id == vendor_id)

        return conditions

    def summarize(self, period: Period) -> PeriodTotals:
        """
        Totales del período: suma, cantidad, comisiones y ticket medio
        """
        row = self.db.query(
            func.sum(Sale.total_value),
            func.count(Sale.id),
            func.sum(Sale.commission_value),
            func.avg(Sale.total_value)
        ).filter(and_(*self._conditions(period))).first()

        total_value, quantity, total_commission, average_ticket = row or (None, 0, None, None)

        return PeriodTotals(
            total_value=_money(total_value),
            quantity_of_sales=int(quantity or 0),
            total_commission=_money(total_commission),
            average_ticket=_money(average_ticket)
        )

    def group_by_vendor(
        self,
        period: Period,
        vendor_id: Optional[str] = None,
        order_by: str = "total_value",
        limit: Optional[int] = None
    ) -> List[VendorAggregate]:
        """
        Agregados por vendedor, ordenados de mayor a menor por order_by.
        Empates se resuelven por vendor_id ascendente
        """
        if order_by not in self.ORDER_COLUMNS:
            raise ValueError(f"order_by debe ser uno de {self.ORDER_COLUMNS}")

        total_value = func.sum(Sale.total_value)
        total_commission = func.sum(Sale.commission_value)
        sort_column = total_value if order_by == "total_value" else total_commission

        query = self.db.query(
            Sale.vendor_id.label('vendor_id'),
            Vendor.name.label('vendor_name'),
            Vendor.email.label('vendor_email'),
            Vendor.commission_percent.label('commission_percent'),
            total_value.label('total_value'),
            func.count(Sale.id).label('quantity_of_sales'),
            total_commission.label('total_commission'),
            func.avg(Sale.total_value).label('average_ticket')
        ).join(Vendor, Vendor.id == Sale.vendor_id)\
         .filter(and_(*self._conditions(period, vendor_id)))\
         .group_by(
             Sale.vendor_id,
             Vendor.name,
             Vendor.email,
             Vendor.commission_percent
         ).order_by(desc(sort_column), Sale.vendor_id.asc())

        if limit is not None:
            query = query.limit(limit)

        return [
            VendorAggregate(
                vendor_id=row.vendor_id,
                vendor_name=row.vendor_name,
                vendor_email=row.vendor_email,
                commission_percent=round2(row.commission_percent),
                total_value=_money(row.total_value),
                quantity_of_sales=int(row.quantity_of_sales),
                total_commission=_money(row.total_commission),
                average_ticket=_money(row.average_ticket)
            ) for row in query.all()
        ]
