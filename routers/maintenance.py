# routers/maintenance.py
"""
Maintenance request API routes.

Requests belong to a property of the current user and are reported by one
of that property's tenants.
"""
import logging
from typing import List, Optional

from fastapi import APIRouter, Depends, HTTPException, Query, status
from sqlalchemy import desc
from sqlalchemy.orm import Session, joinedload

from auth import get_current_user_id
from database import get_session
from models import MaintenanceRequest, MaintenanceStatus, Property
from schemas.maintenance import MaintenanceCreate, MaintenanceResponse, MaintenanceUpdate
from services.access import get_owned_property, get_owned_request, get_tenant_in_property

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api/maintenance", tags=["maintenance"])


def _request_or_404(db: Session, user_id: str, request_id: int) -> MaintenanceRequest:
     request = get_owned_request(db, user_id, request_id)
     if not request:
          raise HTTPException(
               status_code=status.HTTP_404_NOT_FOUND,
               detail="Maintenance request not found"
          )
     return request


def _build_request_response(request: MaintenanceRequest) -> MaintenanceResponse:
     """
     Helper function to build MaintenanceResponse with related data.
     """
     return MaintenanceResponse.model_validate(request).model_copy(update={
          "property_name": request.property.name if request.property else None,
          "tenant_name": request.tenant.full_name if request.tenant else None,
     })


@router.post(
     "",
     response_model=MaintenanceResponse,
     status_code=status.HTTP_201_CREATED,
     summary="Log a maintenance request"
)
def create_request(
     request_data: MaintenanceCreate,
     db: Session = Depends(get_session),
     user_id: str = Depends(get_current_user_id)
):
     """
     Create a maintenance request.

     - **property_id** must be one of the current user's properties
     - **tenant_id** must live in that property
     """
     prop = get_owned_property(db, user_id, request_data.property_id)
     if not prop:
          raise HTTPException(
               status_code=status.HTTP_404_NOT_FOUND,
               detail="Property not found"
          )

     tenant = get_tenant_in_property(db, prop.id, request_data.tenant_id)
     if not tenant:
          raise HTTPException(
               status_code=status.HTTP_404_NOT_FOUND,
               detail="Tenant not found"
          )

     data = request_data.model_dump(exclude={"status"})
     request = MaintenanceRequest(**data)
     request.set_status(request_data.status)

     db.add(request)
     db.commit()
     db.refresh(request)

     logger.info("Maintenance request %s opened on property %s", request.id, prop.id)
     return _build_request_response(request)


@router.get(
     "",
     response_model=List[MaintenanceResponse],
     summary="List maintenance requests"
)
def list_requests(
     property_id: Optional[int] = Query(None, description="Filter by property ID"),
     tenant_id: Optional[int] = Query(None, description="Filter by tenant ID"),
     status_filter: Optional[MaintenanceStatus] = Query(None, alias="status", description="Filter by status"),
     db: Session = Depends(get_session),
     user_id: str = Depends(get_current_user_id)
):
     """Requests across the current user's properties, newest first."""
     query = (
          db.query(MaintenanceRequest)
          .join(Property, MaintenanceRequest.property_id == Property.id)
          .options(
               joinedload(MaintenanceRequest.property),
               joinedload(MaintenanceRequest.tenant),
          )
          .filter(Property.user_id == user_id)
     )

     if property_id is not None:
          query = query.filter(MaintenanceRequest.property_id == property_id)

     if tenant_id is not None:
          query = query.filter(MaintenanceRequest.tenant_id == tenant_id)

     if status_filter is not None:
          query = query.filter(MaintenanceRequest.status == status_filter)

     requests = query.order_by(desc(MaintenanceRequest.created_at), desc(MaintenanceRequest.id)).all()
     return [_build_request_response(r) for r in requests]


@router.get(
     "/{request_id}",
     response_model=MaintenanceResponse,
     summary="Get maintenance request by ID"
)
def get_request(
     request_id: int,
     db: Session = Depends(get_session),
     user_id: str = Depends(get_current_user_id)
):
     request = _request_or_404(db, user_id, request_id)
     return _build_request_response(request)


@router.patch(
     "/{request_id}",
     response_model=MaintenanceResponse,
     summary="Update maintenance request"
)
def update_request(
     request_id: int,
     request_data: MaintenanceUpdate,
     db: Session = Depends(get_session),
     user_id: str = Depends(get_current_user_id)
):
     """
     Update status, priority, assignee or cost.

     Moving to COMPLETED stamps ``completed_at``; moving back out of
     COMPLETED clears it.
     """
     request = _request_or_404(db, user_id, request_id)
     changes = request_data.model_dump(exclude_unset=True)

     new_status = changes.pop("status", None)
     if new_status is not None:
          request.set_status(new_status)

     new_priority = changes.pop("priority", None)
     if new_priority is not None:
          request.priority = new_priority

     for field, value in changes.items():
          setattr(request, field, value)

     db.commit()
     db.refresh(request)

     return _build_request_response(request)


@router.delete(
     "/{request_id}",
     status_code=status.HTTP_204_NO_CONTENT,
     summary="Delete maintenance request"
)
def delete_request(
     request_id: int,
     db: Session = Depends(get_session),
     user_id: str = Depends(get_current_user_id)
):
     request = _request_or_404(db, user_id, request_id)

     db.delete(request)
     db.commit()
     return None
