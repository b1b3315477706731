# routers/tenants.py
"""
Tenant API routes.

A tenant is created by assigning them to a vacant unit; removing a tenant
frees the unit again.
"""
import logging
from typing import List, Optional

from fastapi import APIRouter, Depends, HTTPException, Query, status
from sqlalchemy import desc
from sqlalchemy.orm import Session, joinedload

from auth import get_current_user_id
from database import get_session
from models import Property, Tenant, Unit
from schemas.tenant import TenantCreate, TenantListItem, TenantResponse, TenantUpdate
from services.access import get_owned_tenant, get_owned_unit
from services.tenant_service import TenantService

logger = logging.getLogger(__name__)

router = APIRouter(tags=["tenants"])


def _tenant_or_404(db: Session, user_id: str, tenant_id: int) -> Tenant:
     tenant = get_owned_tenant(db, user_id, tenant_id)
     if not tenant:
          raise HTTPException(
               status_code=status.HTTP_404_NOT_FOUND,
               detail="Tenant not found"
          )
     return tenant


def _build_tenant_item(tenant: Tenant) -> TenantListItem:
     unit = tenant.unit
     prop = unit.property if unit else None
     return TenantListItem.model_validate(tenant).model_copy(update={
          "property_id": prop.id if prop else None,
          "property_name": prop.name if prop else None,
          "unit_number": unit.unit_number if unit else None,
     })


@router.post(
     "/api/units/{unit_id}/tenant",
     response_model=TenantResponse,
     status_code=status.HTTP_201_CREATED,
     summary="Assign a tenant to a unit"
)
def assign_tenant(
     unit_id: int,
     tenant_data: TenantCreate,
     db: Session = Depends(get_session),
     user_id: str = Depends(get_current_user_id)
):
     """
     Create a tenant on a vacant unit. The unit is marked OCCUPIED.

     Returns 409 if the unit already has a tenant.
     """
     unit = get_owned_unit(db, user_id, unit_id)
     if not unit:
          raise HTTPException(
               status_code=status.HTTP_404_NOT_FOUND,
               detail="Unit not found"
          )

     try:
          tenant = TenantService.assign_to_unit(db, unit, tenant_data)
     except ValueError as e:
          raise HTTPException(status_code=status.HTTP_409_CONFLICT, detail=str(e))

     db.commit()
     db.refresh(tenant)
     return TenantResponse.model_validate(tenant)


@router.get(
     "/api/tenants",
     response_model=List[TenantListItem],
     summary="List tenants"
)
def list_tenants(
     property_id: Optional[int] = Query(None, description="Filter by property ID"),
     db: Session = Depends(get_session),
     user_id: str = Depends(get_current_user_id)
):
     """All tenants living in the current user's properties, newest first."""
     query = (
          db.query(Tenant)
          .join(Unit, Tenant.unit_id == Unit.id)
          .join(Property, Unit.property_id == Property.id)
          .options(joinedload(Tenant.unit).joinedload(Unit.property))
          .filter(Property.user_id == user_id)
     )
     if property_id is not None:
          query = query.filter(Property.id == property_id)

     tenants = query.order_by(desc(Tenant.created_at), desc(Tenant.id)).all()
     return [_build_tenant_item(tenant) for tenant in tenants]


@router.get(
     "/api/tenants/{tenant_id}",
     response_model=TenantListItem,
     summary="Get tenant by ID"
)
def get_tenant(
     tenant_id: int,
     db: Session = Depends(get_session),
     user_id: str = Depends(get_current_user_id)
):
     tenant = _tenant_or_404(db, user_id, tenant_id)
     return _build_tenant_item(tenant)


@router.patch(
     "/api/tenants/{tenant_id}",
     response_model=TenantResponse,
     summary="Update tenant"
)
def update_tenant(
     tenant_id: int,
     tenant_data: TenantUpdate,
     db: Session = Depends(get_session),
     user_id: str = Depends(get_current_user_id)
):
     """Only provided fields will be updated."""
     tenant = _tenant_or_404(db, user_id, tenant_id)

     try:
          TenantService.update(db, tenant, tenant_data)
     except ValueError as e:
          raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(e))

     db.commit()
     db.refresh(tenant)
     return TenantResponse.model_validate(tenant)


@router.delete(
     "/api/tenants/{tenant_id}",
     status_code=status.HTTP_204_NO_CONTENT,
     summary="Remove tenant"
)
def delete_tenant(
     tenant_id: int,
     db: Session = Depends(get_session),
     user_id: str = Depends(get_current_user_id)
):
     """Remove a tenant; their unit becomes VACANT."""
     tenant = _tenant_or_404(db, user_id, tenant_id)

     TenantService.remove(db, tenant)
     db.commit()
     return None
