# commission_manager/modules/reports/service.py
import calendar
from datetime import date, datetime, time, timedelta, timezone
from typing import Any, Callable, List, Optional
from zoneinfo import ZoneInfo

from commission_manager.core.exceptions import ValidationError
from commission_manager.shared.contracts import SaleAggregateStore
from commission_manager.shared.records import Period, PeriodTotals, VendorAggregate
from commission_manager.shared.validation import optional_timestamp, optional_uuid, to_utc_naive
from .schemas import (
    DashboardResponse, MonthlyReportResponse, PeriodTotalsResponse,
    VendorCommission, VendorPerformance
)

def _utcnow() -> datetime:
    return datetime.now(timezone.utc)

def _performance(row: VendorAggregate) -> VendorPerformance:
    return VendorPerformance(
        vendor_id=row.vendor_id,
        vendor_name=row.vendor_name,
        total_value=row.total_value,
        quantity_of_sales=row.quantity_of_sales,
        total_commission=row.total_commission,
        average_ticket=row.average_ticket
    )

def _totals(totals: PeriodTotals) -> PeriodTotalsResponse:
    return PeriodTotalsResponse(
        total_value=totals.total_value,
        quantity_of_sales=totals.quantity_of_sales,
        total_commission=totals.total_commission,
        average_ticket=totals.average_ticket
    )

class ReportsService:
    """
    Report Aggregator: ranking, reporte mensual, comisiones y dashboard.

    Todas las operaciones son lecturas sobre ventas finalizadas y no guardan
    estado mutable; pueden ejecutarse en paralelo sin bloqueos.
    """

    def __init__(
        self,
        repository: SaleAggregateStore,
        report_timezone: str = "UTC",
        top_vendors_limit: int = 5,
        clock: Callable[[], datetime] = _utcnow
    ):
        self.repository = repository
        self.tz = ZoneInfo(report_timezone)
        self.top_vendors_limit = top_vendors_limit
        self.clock = clock

    # ==================== RANKING ====================

    def ranking(
        self,
        limit: int = 10,
        date_start: Optional[Any] = None,
        date_end: Optional[Any] = None
    ) -> List[VendorPerformance]:
        """
        Ranking de vendedores por valor total vendido (rango de fechas inclusivo)
        """
        if isinstance(limit, bool) or not isinstance(limit, int) or limit < 1:
            raise ValidationError("limit debe ser un entero mayor o igual a 1")

        period = Period(
            start=optional_timestamp(date_start, "date_start"),
            end=optional_timestamp(date_end, "date_end")
        )
        return self._ranking(period, limit)

    def _ranking(self, period: Period, limit: Optional[int]) -> List[VendorPerformance]:
        rows = self.repository.group_by_vendor(period, order_by="total_value", limit=limit)
        return [_performance(row) for row in rows]

    # ==================== REPORTE MENSUAL ====================

    def monthly_report(self, month: int, year: int) -> MonthlyReportResponse:
        """
        Reporte mensual: totales del mes y desempeño de cada vendedor.
        El período va del primer día 00:00:00.000 al último día 23:59:59.999
        """
        self._validate_month_year(month, year)

        last_day = calendar.monthrange(year, month)[1]
        period = Period(
            start=self._local_to_utc(datetime.combine(date(year, month, 1), time.min)),
            end=self._local_to_utc(
                datetime.combine(date(year, month, last_day), time(23, 59, 59, 999000))
            ),
            end_inclusive=True
        )

        return MonthlyReportResponse(
            month=month,
            year=year,
            totals=_totals(self.repository.summarize(period)),
            per_vendor_breakdown=self._ranking(period, limit=None)
        )

    # ==================== COMISIONES ====================

    def commissions(
        self,
        vendor_id: Optional[str] = None,
        date_start: Optional[Any] = None,
        date_end: Optional[Any] = None
    ) -> List[VendorCommission]:
        """
        Total de comisiones por vendedor, de mayor a menor.
        commission_percent es la tasa actual del vendedor
        """
        vendor_id = optional_uuid(vendor_id, "vendor_id")
        period = Period(
            start=optional_timestamp(date_start, "date_start"),
            end=optional_timestamp(date_end, "date_end")
        )

        rows = self.repository.group_by_vendor(
            period, vendor_id=vendor_id, order_by="total_commission"
        )
        return [
            VendorCommission(
                vendor_id=row.vendor_id,
                vendor_name=row.vendor_name,
                vendor_email=row.vendor_email,
                commission_percent=row.commission_percent,
                total_commission=row.total_commission,
                total_value=row.total_value,
                quantity_of_sales=row.quantity_of_sales
            ) for row in rows
        ]

    # ==================== DASHBOARD ====================

    def dashboard(self) -> DashboardResponse:
        """
        Estadísticas de hoy y del mes en curso. Ambas ventanas son semiabiertas:
        [medianoche de hoy, medianoche de mañana) y [día 1, día 1 del mes siguiente)
        """
        today = self.clock().astimezone(self.tz).date()
        tomorrow = today + timedelta(days=1)
        month_start = today.replace(day=1)
        if month_start.month == 12:
            next_month = date(month_start.year + 1, 1, 1)
        else:
            next_month = date(month_start.year, month_start.month + 1, 1)

        today_period = Period(
            start=self._midnight(today), end=self._midnight(tomorrow), end_inclusive=False
        )
        month_period = Period(
            start=self._midnight(month_start), end=self._midnight(next_month), end_inclusive=False
        )

        stats_today = self.repository.summarize(today_period)
        stats_month = self.repository.summarize(month_period)

        return DashboardResponse(
            sales_today=stats_today.total_value,
            sales_month=stats_month.total_value,
            commission_today=stats_today.total_commission,
            commission_month=stats_month.total_commission,
            avg_ticket_today=stats_today.average_ticket,
            avg_ticket_month=stats_month.average_ticket,
            quantity_today=stats_today.quantity_of_sales,
            quantity_month=stats_month.quantity_of_sales,
            top_vendors_month=self._ranking(month_period, self.top_vendors_limit)
        )

    # ==================== HELPERS ====================

    def _validate_month_year(self, month: Any, year: Any) -> None:
        if isinstance(month, bool) or not isinstance(month, int) or not 1 <= month <= 12:
            raise ValidationError("El mes debe estar entre 1 y 12")

        if isinstance(year, bool) or not isinstance(year, int) or not 2000 <= year <= 2100:
            raise ValidationError("Año inválido: debe estar entre 2000 y 2100")

    def _local_to_utc(self, local: datetime) -> datetime:
        """Hora de pared en la zona del reporte -> UTC naive, como se guarda sale_date"""
        return to_utc_naive(local.replace(tzinfo=self.tz))

    def _midnight(self, day: date) -> datetime:
        return self._local_to_utc(datetime.combine(day, time.min))
