"""Pytest configuration and fixtures."""

import os

# Configuration must be in place before the application modules are imported
os.environ.setdefault("DATABASE_URL", "sqlite://")
os.environ.setdefault("JWT_SECRET", "test-secret")
os.environ.setdefault("JWT_ALGORITHM", "HS256")

from datetime import date, datetime
from decimal import Decimal
from typing import Generator, Optional

import pytest
from fastapi.testclient import TestClient
from sqlalchemy import create_engine
from sqlalchemy.orm import Session, sessionmaker
from sqlalchemy.pool import StaticPool

from auth import get_current_user_id
from database import get_session
from main import app
from models import (
    Base,
    Document,
    DocumentType,
    MaintenanceRequest,
    MaintenanceStatus,
    Payment,
    PaymentStatus,
    Property,
    Tenant,
    TenantStatus,
    Unit,
    UnitStatus,
)

USER_ID = "user-test-001"
OTHER_USER_ID = "user-test-002"


@pytest.fixture
def engine():
    """In-memory SQLite engine shared across threads for the test client."""
    engine = create_engine(
        "sqlite://",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    Base.metadata.create_all(bind=engine)
    yield engine
    Base.metadata.drop_all(bind=engine)
    engine.dispose()


@pytest.fixture
def session(engine) -> Generator[Session, None, None]:
    """Fresh database session for each test."""
    factory = sessionmaker(bind=engine, autoflush=False, expire_on_commit=False)
    db = factory()
    try:
        yield db
    finally:
        db.close()


class Factory:
    """Creates rows of the entity graph directly through the session."""

    def __init__(self, session: Session) -> None:
        self.session = session

    def _save(self, obj):
        self.session.add(obj)
        self.session.commit()
        self.session.refresh(obj)
        return obj

    def property(self, user_id: str = USER_ID, name: str = "Sunset Apartments",
                 created_at: Optional[datetime] = None) -> Property:
        prop = Property(user_id=user_id, name=name, address="12 Ocean Drive", description="")
        if created_at is not None:
            prop.created_at = created_at
        return self._save(prop)

    def unit(self, prop: Property, unit_number: str = "101") -> Unit:
        return self._save(Unit(property_id=prop.id, unit_number=unit_number))

    def tenant(self, unit: Unit, first_name: str = "John", last_name: str = "Doe",
               rent_amount: Decimal = Decimal("1000.00"),
               status: TenantStatus = TenantStatus.ACTIVE) -> Tenant:
        tenant = Tenant(
            unit_id=unit.id,
            first_name=first_name,
            last_name=last_name,
            email=f"{first_name.lower()}@example.com",
            phone="5551234567",
            lease_start=date(2026, 1, 1),
            lease_end=date(2026, 12, 31),
            rent_amount=rent_amount,
            status=status,
        )
        unit.status = UnitStatus.OCCUPIED
        return self._save(tenant)

    def request(self, prop: Property, tenant: Tenant, title: str = "Leaking sink",
                status: MaintenanceStatus = MaintenanceStatus.OPEN,
                created_at: Optional[datetime] = None) -> MaintenanceRequest:
        req = MaintenanceRequest(
            property_id=prop.id,
            tenant_id=tenant.id,
            title=title,
            description="Kitchen sink drips constantly",
            images=[],
        )
        req.set_status(status)
        if created_at is not None:
            req.created_at = created_at
        return self._save(req)

    def payment(self, tenant: Tenant, amount: Decimal = Decimal("1000.00"),
                status: PaymentStatus = PaymentStatus.COMPLETED,
                created_at: Optional[datetime] = None) -> Payment:
        payment = Payment(tenant_id=tenant.id, amount=amount, status=status, method="card")
        if created_at is not None:
            payment.created_at = created_at
        return self._save(payment)

    def document(self, prop: Property, tenant: Optional[Tenant] = None,
                 url: str = "https://acct.blob.core.windows.net/documents/u/lease.pdf") -> Document:
        return self._save(Document(
            property_id=prop.id,
            tenant_id=tenant.id if tenant else None,
            name="Lease agreement",
            type=DocumentType.LEASE,
            url=url,
            mime_type="application/pdf",
        ))


@pytest.fixture
def factory(session) -> Factory:
    return Factory(session)


@pytest.fixture
def client(session) -> Generator[TestClient, None, None]:
    """Test client using the test session and a fixed authenticated user."""

    def override_session():
        yield session

    app.dependency_overrides[get_session] = override_session
    app.dependency_overrides[get_current_user_id] = lambda: USER_ID
    with TestClient(app) as test_client:
        yield test_client
    app.dependency_overrides.clear()


@pytest.fixture
def anon_client(session) -> Generator[TestClient, None, None]:
    """Test client that goes through real bearer token verification."""

    def override_session():
        yield session

    app.dependency_overrides[get_session] = override_session
    with TestClient(app) as test_client:
        yield test_client
    app.dependency_overrides.clear()
