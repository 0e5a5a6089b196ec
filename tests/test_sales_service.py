"""
Tests for `modules/sales/service.py` (Sale Recorder).

Covers:
- Creation computes totals from price and vendor rate snapshots.
- Inactive or missing vendor/product is rejected before any write.
- Update recomputes with the original commission percent.
- Removal only cancels; cancelled sales disappear from finalized listings.
- Listing filters and ordering.
"""

from __future__ import annotations

import logging
from datetime import datetime, timedelta
from decimal import Decimal
from unittest.mock import Mock

import pytest

from commission_manager.core.exceptions import BusinessRuleViolation, NotFoundError, ValidationError
from commission_manager.modules.sales.service import SalesService
from commission_manager.shared.database.models import Sale
from commission_manager.shared.records import ProductRecord, SaleRecord, SaleStatus, VendorRecord

from .conftest import FIXED_NOW

MISSING_ID = "123e4567-e89b-12d3-a456-426614174999"


# ---------------------------------------------------------------------------
# create
# ---------------------------------------------------------------------------


def test_create_computes_total_and_commission(sales_service, make_vendor, make_product) -> None:
    vendor = make_vendor(commission_percent="5")
    product = make_product(price="3000")

    sale = sales_service.create(
        product_id=product.id,
        vendor_id=vendor.id,
        quantity=2,
        sale_date="2025-10-16T10:30:00.000Z",
        note="Venda com desconto",
    )

    assert sale.unit_price == Decimal("3000.00")
    assert sale.total_value == Decimal("6000.00")
    assert sale.commission_percent == Decimal("5.00")
    assert sale.commission_value == Decimal("300.00")
    assert sale.status is SaleStatus.finalized
    assert sale.sale_date == datetime(2025, 10, 16, 10, 30)
    assert sale.note == "Venda com desconto"
    assert sale.id and sale.created_at is not None and sale.updated_at is not None


def test_create_rounds_commission_half_up(sales_service, make_vendor, make_product) -> None:
    vendor = make_vendor(commission_percent="5")
    product = make_product(price="1999.99")

    sale = sales_service.create(product.id, vendor.id, 1, FIXED_NOW)

    assert sale.total_value == Decimal("1999.99")
    assert sale.commission_value == Decimal("100.00")


def test_create_rejects_inactive_vendor(sales_service, make_vendor, make_product, db) -> None:
    vendor = make_vendor(active=False)
    product = make_product()

    with pytest.raises(BusinessRuleViolation):
        sales_service.create(product.id, vendor.id, 1, FIXED_NOW)

    assert db.query(Sale).count() == 0


def test_create_rejects_inactive_product(sales_service, make_vendor, make_product, db) -> None:
    vendor = make_vendor()
    product = make_product(active=False)

    with pytest.raises(BusinessRuleViolation):
        sales_service.create(product.id, vendor.id, 1, FIXED_NOW)

    assert db.query(Sale).count() == 0


def test_create_missing_vendor_or_product(sales_service, make_vendor, make_product) -> None:
    vendor = make_vendor()
    product = make_product()

    with pytest.raises(NotFoundError):
        sales_service.create(product.id, MISSING_ID, 1, FIXED_NOW)

    with pytest.raises(NotFoundError):
        sales_service.create(MISSING_ID, vendor.id, 1, FIXED_NOW)


@pytest.mark.parametrize(
    "kwargs",
    [
        {"quantity": 0},
        {"quantity": -3},
        {"sale_date": "yesterday"},
        {"product_id": "not-a-uuid"},
        {"vendor_id": "507f1f77bcf86cd799439012"},
    ],
)
def test_create_validation_happens_before_any_collaborator_call(kwargs) -> None:
    repository, vendors, catalog = Mock(), Mock(), Mock()
    service = SalesService(repository=repository, vendors=vendors, catalog=catalog)

    args = {
        "product_id": "123e4567-e89b-12d3-a456-426614174000",
        "vendor_id": "123e4567-e89b-12d3-a456-426614174001",
        "quantity": 1,
        "sale_date": "2025-10-16",
    }
    args.update(kwargs)

    with pytest.raises(ValidationError):
        service.create(**args)

    vendors.find_by_id.assert_not_called()
    catalog.find_by_id.assert_not_called()
    repository.create.assert_not_called()


def _mock_service(vendor_id, product_id):
    repository, vendors, catalog = Mock(), Mock(), Mock()
    vendors.find_by_id.return_value = VendorRecord(
        id=vendor_id, name="Ana", email="ana@example.com",
        commission_percent=Decimal("5.00"), active=True,
    )
    catalog.find_by_id.return_value = ProductRecord(
        id=product_id, name="Notebook", price=Decimal("3000.00"), active=True,
    )
    return SalesService(repository=repository, vendors=vendors, catalog=catalog)


def test_create_reads_vendor_and_product_with_share_lock() -> None:
    vendor_id = "123e4567-e89b-12d3-a456-426614174001"
    product_id = "123e4567-e89b-12d3-a456-426614174000"
    service = _mock_service(vendor_id, product_id)

    service.create(product_id, vendor_id, 2, "2025-10-16T10:30:00Z")

    service.vendors.find_by_id.assert_called_once_with(vendor_id, lock=True)
    service.catalog.find_by_id.assert_called_once_with(product_id, lock=True)
    fields = service.repository.create.call_args.args[0]
    assert fields["total_value"] == Decimal("6000.00")
    assert fields["commission_value"] == Decimal("300.00")


def test_update_quantity_rereads_product_with_share_lock() -> None:
    vendor_id = "123e4567-e89b-12d3-a456-426614174001"
    product_id = "123e4567-e89b-12d3-a456-426614174000"
    sale_id = "123e4567-e89b-12d3-a456-426614174002"
    service = _mock_service(vendor_id, product_id)
    service.repository.find_by_id.return_value = SaleRecord(
        id=sale_id, product_id=product_id, vendor_id=vendor_id, quantity=2,
        unit_price=Decimal("3000.00"), total_value=Decimal("6000.00"),
        commission_percent=Decimal("5.00"), commission_value=Decimal("300.00"),
        sale_date=datetime(2025, 10, 16, 10, 30), status=SaleStatus.finalized,
    )

    service.update(sale_id, {"quantity": 3})

    service.catalog.find_by_id.assert_called_once_with(product_id, lock=True)
    service.vendors.find_by_id.assert_not_called()
    sale_ref, changes = service.repository.update_fields.call_args.args
    assert sale_ref == sale_id
    assert changes["total_value"] == Decimal("9000.00")
    assert changes["commission_value"] == Decimal("450.00")


def test_create_snapshot_survives_price_and_rate_changes(
    sales_service, make_vendor, make_product, db
) -> None:
    vendor = make_vendor(commission_percent="5")
    product = make_product(price="100.00")
    sale = sales_service.create(product.id, vendor.id, 3, FIXED_NOW)

    vendor.commission_percent = Decimal("12")
    product.price = Decimal("999.00")
    db.commit()

    stored = sales_service.find_one(sale.id)
    assert stored.unit_price == Decimal("100.00")
    assert stored.commission_percent == Decimal("5.00")
    assert stored.total_value == Decimal("300.00")
    assert stored.commission_value == Decimal("15.00")


# ---------------------------------------------------------------------------
# update
# ---------------------------------------------------------------------------


def test_update_quantity_reuses_original_commission_percent(
    sales_service, make_vendor, make_product, db
) -> None:
    vendor = make_vendor(commission_percent="5")
    product = make_product(price="3000")
    sale = sales_service.create(product.id, vendor.id, 2, FIXED_NOW)

    vendor.commission_percent = Decimal("10")
    db.commit()

    updated = sales_service.update(sale.id, {"quantity": 3})

    assert updated.quantity == 3
    assert updated.commission_percent == Decimal("5.00")
    assert updated.total_value == Decimal("9000.00")
    assert updated.commission_value == Decimal("450.00")


def test_update_product_refetches_price(sales_service, make_vendor, make_product) -> None:
    vendor = make_vendor(commission_percent="7")
    first = make_product(price="100.00")
    second = make_product(price="250.50")
    sale = sales_service.create(first.id, vendor.id, 2, FIXED_NOW)

    updated = sales_service.update(sale.id, {"product_id": second.id})

    assert updated.product_id == second.id
    assert updated.unit_price == Decimal("250.50")
    assert updated.total_value == Decimal("501.00")
    assert updated.commission_value == Decimal("35.07")


def test_update_without_value_changes_keeps_amounts(
    sales_service, make_vendor, make_product, db
) -> None:
    vendor = make_vendor()
    product = make_product(price="100.00")
    sale = sales_service.create(product.id, vendor.id, 2, FIXED_NOW)

    product.price = Decimal("500.00")
    db.commit()

    updated = sales_service.update(sale.id, {"note": "ajuste", "quantity": 2})

    assert updated.note == "ajuste"
    assert updated.unit_price == Decimal("100.00")
    assert updated.total_value == Decimal("200.00")


def test_update_vendor_keeps_commission_snapshot(sales_service, make_vendor, make_product) -> None:
    original = make_vendor(commission_percent="5")
    other = make_vendor(commission_percent="15")
    product = make_product(price="100.00")
    sale = sales_service.create(product.id, original.id, 1, FIXED_NOW)

    updated = sales_service.update(sale.id, {"vendor_id": other.id})

    assert updated.vendor_id == other.id
    assert updated.commission_percent == Decimal("5.00")
    assert updated.commission_value == Decimal("5.00")


def test_update_sale_date_and_status(sales_service, make_vendor, make_product) -> None:
    sale = sales_service.create(make_product().id, make_vendor().id, 1, FIXED_NOW)

    updated = sales_service.update(
        sale.id, {"sale_date": "2025-09-01T08:00:00Z", "status": "pending"}
    )

    assert updated.sale_date == datetime(2025, 9, 1, 8, 0)
    assert updated.status is SaleStatus.pending


def test_update_errors(sales_service, make_vendor, make_product) -> None:
    sale = sales_service.create(make_product().id, make_vendor().id, 1, FIXED_NOW)

    with pytest.raises(ValidationError):
        sales_service.update("bad-id", {"quantity": 2})

    with pytest.raises(NotFoundError):
        sales_service.update(MISSING_ID, {"quantity": 2})

    with pytest.raises(ValidationError):
        sales_service.update(sale.id, {"quantity": 0})

    with pytest.raises(ValidationError):
        sales_service.update(sale.id, {"status": "deleted"})

    with pytest.raises(ValidationError):
        sales_service.update(sale.id, {"commission_percent": 50})

    with pytest.raises(NotFoundError):
        sales_service.update(sale.id, {"product_id": MISSING_ID})

    unchanged = sales_service.find_one(sale.id)
    assert unchanged.quantity == 1
    assert unchanged.product_id == sale.product_id


# ---------------------------------------------------------------------------
# remove / find
# ---------------------------------------------------------------------------


def test_remove_cancels_without_deleting(sales_service, make_vendor, make_product, db) -> None:
    sale = sales_service.create(make_product().id, make_vendor().id, 1, FIXED_NOW)

    sales_service.remove(sale.id)

    assert db.query(Sale).count() == 1
    assert sales_service.find_one(sale.id).status is SaleStatus.cancelled
    assert sales_service.find_all(status="finalized") == []


def test_remove_missing_sale(sales_service) -> None:
    with pytest.raises(NotFoundError):
        sales_service.remove(MISSING_ID)

    with pytest.raises(ValidationError):
        sales_service.remove("123")


def test_find_one_errors(sales_service) -> None:
    with pytest.raises(ValidationError):
        sales_service.find_one("xyz")

    with pytest.raises(NotFoundError):
        sales_service.find_one(MISSING_ID)


def test_find_all_orders_by_sale_date_desc(sales_service, make_vendor, make_product) -> None:
    vendor, product = make_vendor(), make_product()
    dates = [FIXED_NOW - timedelta(days=d) for d in (3, 0, 7, 1)]
    for sale_date in dates:
        sales_service.create(product.id, vendor.id, 1, sale_date)

    result = sales_service.find_all()

    assert [s.sale_date for s in result] == sorted((s.sale_date for s in result), reverse=True)
    assert len(result) == 4


def test_find_all_filters(sales_service, make_vendor, make_product) -> None:
    ana, bruno = make_vendor(), make_vendor()
    notebook, mouse = make_product(), make_product()

    s1 = sales_service.create(notebook.id, ana.id, 1, "2025-10-01T10:00:00")
    s2 = sales_service.create(mouse.id, ana.id, 1, "2025-10-10T10:00:00")
    s3 = sales_service.create(notebook.id, bruno.id, 1, "2025-10-20T10:00:00")
    sales_service.remove(s2.id)

    assert {s.id for s in sales_service.find_all(vendor_id=ana.id)} == {s1.id, s2.id}
    assert {s.id for s in sales_service.find_all(product_id=notebook.id)} == {s1.id, s3.id}
    assert [s.id for s in sales_service.find_all(status="cancelled")] == [s2.id]
    assert [s.id for s in sales_service.find_all(vendor_id=ana.id, status="finalized")] == [s1.id]

    # Both bounds are inclusive
    in_range = sales_service.find_all(
        date_start="2025-10-01T10:00:00", date_end="2025-10-20T10:00:00"
    )
    assert [s.id for s in in_range] == [s3.id, s2.id, s1.id]
    assert [s.id for s in sales_service.find_all(date_start="2025-10-15")] == [s3.id]
    assert [s.id for s in sales_service.find_all(date_end="2025-10-05")] == [s1.id]


def test_find_all_rejects_bad_filters(sales_service) -> None:
    with pytest.raises(ValidationError):
        sales_service.find_all(vendor_id="nope")

    with pytest.raises(ValidationError):
        sales_service.find_all(status="finalizada")

    with pytest.raises(ValidationError):
        sales_service.find_all(date_start="31/12/2025")


def test_update_logs_only_when_something_is_written(
    sales_service, make_vendor, make_product, caplog
) -> None:
    sale = sales_service.create(make_product().id, make_vendor().id, 1, FIXED_NOW)
    logger_name = "commission_manager.modules.sales.service"

    with caplog.at_level(logging.INFO, logger=logger_name):
        unchanged = sales_service.update(sale.id, {})
    assert unchanged.updated_at == sale.updated_at
    assert not [r for r in caplog.records if "actualizada" in r.getMessage()]

    with caplog.at_level(logging.INFO, logger=logger_name):
        sales_service.update(sale.id, {"note": "revisada"})
    assert [r for r in caplog.records if "actualizada" in r.getMessage()]
