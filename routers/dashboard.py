# routers/dashboard.py
"""
Dashboard API routes.

GET /api/dashboard: summary figures and recent activity for the current user.
GET /api/properties/{property_id}/dashboard: figures for a single property.

The overall dashboard never turns a database read failure into an error
response: a failed read shows up as zeroed figures or an empty feed.
"""
import logging
from typing import List

from fastapi import APIRouter, Depends, HTTPException, status
from pydantic import BaseModel
from sqlalchemy.orm import Session, selectinload

from auth import get_current_user_id
from database import get_session
from models import Property, Unit
from schemas.dashboard import DashboardResponse, PropertySummary
from schemas.tenant import TenantResponse
from services.dashboard_repository import (
     list_properties_for_user,
     list_recent_maintenance_requests,
     list_recent_payments,
)
from services.stats_service import build_activity_feed, compute_stats, summarize_property

logger = logging.getLogger(__name__)

router = APIRouter(tags=["dashboard"])


class PropertyDashboardResponse(BaseModel):
     property_id: int
     name: str
     address: str
     summary: PropertySummary
     tenants: List[TenantResponse]


@router.get(
     "/api/dashboard",
     response_model=DashboardResponse,
     summary="Dashboard summary"
)
def get_dashboard(
     db: Session = Depends(get_session),
     user_id: str = Depends(get_current_user_id),
):
     """
     Totals across the user's properties (units, occupancy, active requests,
     projected monthly revenue) plus the ten most recent maintenance and
     payment events.
     """
     properties = list_properties_for_user(db, user_id)
     maintenance = list_recent_maintenance_requests(db, user_id)
     payments = list_recent_payments(db, user_id)

     return DashboardResponse(
          stats=compute_stats(properties),
          recent_activity=build_activity_feed(maintenance, payments),
     )


@router.get(
     "/api/properties/{property_id}/dashboard",
     response_model=PropertyDashboardResponse,
     summary="Property dashboard"
)
def get_property_dashboard(
     property_id: int,
     db: Session = Depends(get_session),
     user_id: str = Depends(get_current_user_id),
):
     prop = (
          db.query(Property)
          .options(
               selectinload(Property.units).joinedload(Unit.tenant),
               selectinload(Property.documents),
          )
          .filter(Property.id == property_id, Property.user_id == user_id)
          .first()
     )
     if not prop:
          raise HTTPException(
               status_code=status.HTTP_404_NOT_FOUND,
               detail="Property not found"
          )

     tenants = [unit.tenant for unit in prop.units if unit.tenant is not None]
     return PropertyDashboardResponse(
          property_id=prop.id,
          name=prop.name,
          address=prop.address,
          summary=summarize_property(prop),
          tenants=[TenantResponse.model_validate(t) for t in tenants],
     )
