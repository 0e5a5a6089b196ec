from decimal import Decimal
from typing import List

from commission_manager.shared.schemas import ApiBaseModel

class VendorPerformance(ApiBaseModel):
    """Fila del ranking y del desglose mensual por vendedor"""
    vendor_id: str
    vendor_name: str
    total_value: Decimal
    quantity_of_sales: int
    total_commission: Decimal
    average_ticket: Decimal

class PeriodTotalsResponse(ApiBaseModel):
    total_value: Decimal
    quantity_of_sales: int
    total_commission: Decimal
    average_ticket: Decimal

class MonthlyReportResponse(ApiBaseModel):
    month: int
    year: int
    totals: PeriodTotalsResponse
    per_vendor_breakdown: List[VendorPerformance]

class VendorCommission(ApiBaseModel):
    vendor_id: str
    vendor_name: str
    vendor_email: str
    commission_percent: Decimal
    total_commission: Decimal
    total_value: Decimal
    quantity_of_sales: int

class DashboardResponse(ApiBaseModel):
    sales_today: Decimal
    sales_month: Decimal
    commission_today: Decimal
    commission_month: Decimal
    avg_ticket_today: Decimal
    avg_ticket_month: Decimal
    quantity_today: int
    quantity_month: int
    top_vendors_month: List[VendorPerformance]
