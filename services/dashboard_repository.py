# services/dashboard_repository.py
"""
Read queries behind the dashboard.

Each function returns a :class:`FetchResult` instead of raising: a database
error is logged and handed back as ``DataFetchFailure`` so the dashboard can
still render its empty state.
"""
import logging
from typing import Callable, List, TypeVar

from sqlalchemy import desc
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session, joinedload, selectinload

from exceptions import DataFetchFailure
from models import MaintenanceRequest, Payment, Property, Tenant, Unit
from services.results import FetchResult

logger = logging.getLogger(__name__)

RECENT_ITEMS_LIMIT = 5

T = TypeVar("T")


def _fetch(description: str, query: Callable[[], T]) -> FetchResult[T]:
     try:
          return FetchResult.success(query())
     except SQLAlchemyError as e:
          logger.exception("Error fetching %s", description)
          return FetchResult.failure(DataFetchFailure(f"Could not load {description}: {e}"))


def list_properties_for_user(db: Session, user_id: str) -> FetchResult[List[Property]]:
     """All of a user's properties with units, tenants and maintenance requests loaded."""
     return _fetch(
          "properties",
          lambda: (
               db.query(Property)
               .options(
                    selectinload(Property.units).joinedload(Unit.tenant),
                    selectinload(Property.maintenance_requests),
               )
               .filter(Property.user_id == user_id)
               .order_by(desc(Property.created_at), desc(Property.id))
               .all()
          ),
     )


def list_recent_maintenance_requests(
     db: Session,
     user_id: str,
     limit: int = RECENT_ITEMS_LIMIT
) -> FetchResult[List[MaintenanceRequest]]:
     """Newest maintenance requests across the user's properties."""
     return _fetch(
          "maintenance requests",
          lambda: (
               db.query(MaintenanceRequest)
               .join(Property, MaintenanceRequest.property_id == Property.id)
               .options(
                    joinedload(MaintenanceRequest.property),
                    joinedload(MaintenanceRequest.tenant),
               )
               .filter(Property.user_id == user_id)
               .order_by(desc(MaintenanceRequest.created_at), desc(MaintenanceRequest.id))
               .limit(limit)
               .all()
          ),
     )


def list_recent_payments(
     db: Session,
     user_id: str,
     limit: int = RECENT_ITEMS_LIMIT
) -> FetchResult[List[Payment]]:
     """Newest payments made by tenants living in the user's properties."""
     return _fetch(
          "payments",
          lambda: (
               db.query(Payment)
               .join(Tenant, Payment.tenant_id == Tenant.id)
               .join(Unit, Tenant.unit_id == Unit.id)
               .join(Property, Unit.property_id == Property.id)
               .options(joinedload(Payment.tenant))
               .filter(Property.user_id == user_id)
               .order_by(desc(Payment.created_at), desc(Payment.id))
               .limit(limit)
               .all()
          ),
     )
