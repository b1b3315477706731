# services/stats_service.py
"""
Dashboard aggregates and the recent activity feed.

Everything here is a pure function over an in-memory snapshot: no session,
no side effects, and no exceptions escape. Inputs may be ORM rows, dicts,
snapshot models, or a ``FetchResult`` wrapping any of those; a failed
``FetchResult`` is read as "no data".

Occupancy is decided by one signal only: a unit is occupied when a tenant
is linked to it. ``Unit.status`` is never consulted here.
"""
import logging
from datetime import datetime, timezone
from decimal import Decimal
from typing import Any, Iterable, List, Optional, Type, TypeVar, Union

from pydantic import BaseModel, ValidationError
from sqlalchemy.exc import SQLAlchemyError

from schemas.dashboard import (
     ActivityEntry,
     ActivityType,
     MaintenanceActivitySnapshot,
     PaymentActivitySnapshot,
     PropertyDetailSnapshot,
     PropertySnapshot,
     PropertySummary,
     StatsSummary,
)
from models.maintenance_request import MaintenanceStatus
from services.results import FetchResult

logger = logging.getLogger(__name__)

ACTIVITY_FEED_LIMIT = 10

S = TypeVar("S", bound=BaseModel)


def _unwrap(items: Any) -> Iterable[Any]:
     if isinstance(items, FetchResult):
          if not items.ok:
               logger.warning("Using empty data after fetch failure: %s", items.error)
          return items.unwrap_or([])
     return items or []


def _snapshots(items: Any, model: Type[S]) -> List[S]:
     """Validate each item into ``model``; items that cannot be read are skipped."""
     snapshots = []
     for item in _unwrap(items):
          if isinstance(item, model):
               snapshots.append(item)
               continue
          try:
               snapshots.append(model.model_validate(item))
          except (ValidationError, SQLAlchemyError) as e:
               logger.warning("Skipping unreadable %s: %s", model.__name__, e)
     return snapshots


def occupancy_rate(occupied_units: int, total_units: int) -> int:
     """Whole percent, rounded half up; 0 when there are no units."""
     if total_units <= 0:
          return 0
     return (2 * occupied_units * 100 + total_units) // (2 * total_units)


def _occupied(prop: Union[PropertySnapshot, PropertyDetailSnapshot]) -> int:
     return sum(1 for unit in prop.units if unit.tenant is not None)


def _rent(prop: Union[PropertySnapshot, PropertyDetailSnapshot]) -> Decimal:
     return sum(
          (unit.tenant.rent_amount for unit in prop.units if unit.tenant is not None),
          Decimal("0")
     )


def compute_stats(properties: Any) -> StatsSummary:
     """
     Aggregate a user's properties into the dashboard summary.

     Args:
          properties: Properties with units (and their tenant) and
               maintenance requests loaded, or a ``FetchResult`` of them.

     Returns:
          StatsSummary; the zero summary when there is nothing to read.
     """
     snapshots = _snapshots(properties, PropertySnapshot)

     total_units = sum(len(p.units) for p in snapshots)
     occupied_units = sum(_occupied(p) for p in snapshots)
     active_requests = sum(
          1
          for p in snapshots
          for req in p.maintenance_requests
          if req.status != MaintenanceStatus.COMPLETED.value
     )
     monthly_revenue = sum((_rent(p) for p in snapshots), Decimal("0"))

     return StatsSummary(
          total_properties=len(snapshots),
          total_units=total_units,
          occupied_units=occupied_units,
          occupancy_rate=occupancy_rate(occupied_units, total_units),
          active_requests=active_requests,
          monthly_revenue=float(monthly_revenue),
     )


def summarize_property(prop: Any) -> PropertySummary:
     """Figures for a single property's dashboard (units, income, documents)."""
     try:
          snapshot = PropertyDetailSnapshot.model_validate(prop)
     except (ValidationError, SQLAlchemyError) as e:
          logger.warning("Unreadable property, using empty summary: %s", e)
          return PropertySummary()

     total_units = len(snapshot.units)
     occupied_units = _occupied(snapshot)
     return PropertySummary(
          total_units=total_units,
          occupied_units=occupied_units,
          occupancy_rate=occupancy_rate(occupied_units, total_units),
          document_count=len(snapshot.documents),
          monthly_income=float(_rent(snapshot)),
     )


# ---------------------------------------------------------------------------
# Activity feed
# ---------------------------------------------------------------------------

def _as_utc(ts: datetime) -> datetime:
     # Naive timestamps come from the database and are stored in UTC
     if ts.tzinfo is None:
          return ts.replace(tzinfo=timezone.utc)
     return ts.astimezone(timezone.utc)


def format_amount(amount: Decimal) -> str:
     """1200 -> "1200", 1200.50 -> "1200.5"."""
     return f"{Decimal(amount).normalize():f}"


def _tenant_name(tenant) -> str:
     return tenant.full_name if tenant is not None else ""


def maintenance_activity(req: MaintenanceActivitySnapshot) -> ActivityEntry:
     property_name = req.property.name if req.property is not None else ""
     return ActivityEntry(
          id=req.id,
          type=ActivityType.MAINTENANCE,
          title=req.title,
          description=f"{_tenant_name(req.tenant)} - {property_name}",
          timestamp=_as_utc(req.created_at),
          status=req.status,
     )


def payment_activity(payment: PaymentActivitySnapshot) -> ActivityEntry:
     return ActivityEntry(
          id=payment.id,
          type=ActivityType.PAYMENT,
          title=f"Rent Payment - ${format_amount(payment.amount)}",
          description=_tenant_name(payment.tenant),
          timestamp=_as_utc(payment.created_at),
          status=payment.status,
     )


def build_activity_feed(
     maintenance: Any,
     payments: Any,
     limit: Optional[int] = ACTIVITY_FEED_LIMIT
) -> List[ActivityEntry]:
     """
     Merge recent maintenance requests and payments into one feed.

     Entries are ordered newest first; the sort is stable, so entries with
     equal timestamps keep maintenance-before-payment order. At most
     ``limit`` entries are returned.
     """
     activities = [
          maintenance_activity(req)
          for req in _snapshots(maintenance, MaintenanceActivitySnapshot)
     ] + [
          payment_activity(payment)
          for payment in _snapshots(payments, PaymentActivitySnapshot)
     ]
     activities.sort(key=lambda a: a.timestamp, reverse=True)
     return activities[:limit] if limit is not None else activities
