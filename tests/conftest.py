"""
Shared pytest fixtures.

Every test gets a fresh in-memory SQLite database. StaticPool keeps a single
connection so the test session and the API request sessions see the same data.
"""

from __future__ import annotations

import itertools
from datetime import datetime, timezone
from decimal import Decimal

import pytest
from fastapi.testclient import TestClient
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool

from commission_manager.config.database import get_db, init_db
from commission_manager.main import app
from commission_manager.modules.products.repository import ProductRepository
from commission_manager.modules.reports.repository import ReportsRepository
from commission_manager.modules.reports.service import ReportsService
from commission_manager.modules.sales.repository import SalesRepository
from commission_manager.modules.sales.service import SalesService
from commission_manager.modules.vendors.repository import VendorRepository
from commission_manager.shared.database.models import Product, Vendor

# Fixed "now" for dashboard tests: 2025-10-15 12:00 UTC
FIXED_NOW = datetime(2025, 10, 15, 12, 0, 0, tzinfo=timezone.utc)


@pytest.fixture
def engine():
    engine = create_engine(
        "sqlite://",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    init_db(bind=engine)
    yield engine
    engine.dispose()


@pytest.fixture
def session_factory(engine):
    return sessionmaker(bind=engine, autocommit=False, autoflush=False)


@pytest.fixture
def db(session_factory):
    session = session_factory()
    yield session
    session.close()


@pytest.fixture
def make_vendor(db):
    counter = itertools.count(1)

    def _make(commission_percent="5", active=True, name=None) -> Vendor:
        n = next(counter)
        vendor = Vendor(
            name=name or f"Vendedor {n}",
            email=f"vendedor{n}@example.com",
            cpf=f"000.000.000-{n:02d}",
            commission_percent=Decimal(str(commission_percent)),
            active=active,
        )
        db.add(vendor)
        db.commit()
        db.refresh(vendor)
        return vendor

    return _make


@pytest.fixture
def make_product(db):
    counter = itertools.count(1)

    def _make(price="100.00", active=True, category="Informática", name=None) -> Product:
        n = next(counter)
        product = Product(
            name=name or f"Produto {n}",
            sku=f"SKU-{n:04d}",
            price=Decimal(str(price)),
            category=category,
            active=active,
        )
        db.add(product)
        db.commit()
        db.refresh(product)
        return product

    return _make


@pytest.fixture
def sales_service(db) -> SalesService:
    return SalesService(
        repository=SalesRepository(db),
        vendors=VendorRepository(db),
        catalog=ProductRepository(db),
    )


@pytest.fixture
def reports_service(db) -> ReportsService:
    return ReportsService(repository=ReportsRepository(db), clock=lambda: FIXED_NOW)


@pytest.fixture
def record_sale(sales_service):
    """Record a finalized sale; sale_date defaults to FIXED_NOW."""

    def _record(vendor, product, quantity=1, sale_date=None, note=None):
        return sales_service.create(
            product_id=product.id,
            vendor_id=vendor.id,
            quantity=quantity,
            sale_date=sale_date or FIXED_NOW,
            note=note,
        )

    return _record


@pytest.fixture
def client(session_factory):
    def _override_get_db():
        session = session_factory()
        try:
            yield session
        finally:
            session.close()

    app.dependency_overrides[get_db] = _override_get_db
    # Not used as a context manager: the lifespan (init_db on the configured
    # database) must not run against the real engine.
    yield TestClient(app)
    app.dependency_overrides.clear()
