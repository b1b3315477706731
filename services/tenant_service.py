# services/tenant_service.py
"""
Tenant Service - keeps units and their tenant in step.

A unit is occupied exactly when a tenant is linked to it. ``Unit.status``
is a stored mirror of that fact and is only written here.
"""
import logging

from sqlalchemy.orm import Session

from models import Tenant, Unit, UnitStatus
from schemas.tenant import TenantCreate, TenantUpdate

logger = logging.getLogger(__name__)


class TenantService:
     """Service class for tenant-related business logic."""

     @staticmethod
     def assign_to_unit(db: Session, unit: Unit, data: TenantCreate) -> Tenant:
          """
          Create a tenant and link them to ``unit``.

          Raises:
               ValueError: If the unit already has a tenant
          """
          if unit.tenant is not None:
               raise ValueError(f"Unit {unit.unit_number} already has a tenant")

          tenant = Tenant(unit_id=unit.id, **data.model_dump())
          unit.tenant = tenant
          unit.status = UnitStatus.OCCUPIED
          db.add(tenant)
          db.flush()  # Flush to get the ID without committing

          logger.info("Tenant %s assigned to unit %s", tenant.id, unit.id)
          return tenant

     @staticmethod
     def update(db: Session, tenant: Tenant, data: TenantUpdate) -> Tenant:
          """
          Apply the provided fields to ``tenant``.

          Raises:
               ValueError: If the resulting lease ends before it starts
          """
          changes = data.model_dump(exclude_unset=True)
          lease_start = changes.get("lease_start", tenant.lease_start)
          lease_end = changes.get("lease_end", tenant.lease_end)
          if lease_end < lease_start:
               raise ValueError("lease_end must not be before lease_start")

          for field, value in changes.items():
               if value is not None:
                    setattr(tenant, field, value)
          db.flush()
          return tenant

     @staticmethod
     def remove(db: Session, tenant: Tenant) -> None:
          """Delete ``tenant`` and mark their unit vacant."""
          unit = tenant.unit
          if unit is not None:
               unit.status = UnitStatus.VACANT
               unit.tenant = None  # delete-orphan removes the tenant row
          else:
               db.delete(tenant)
          db.flush()
          logger.info("Tenant %s removed", tenant.id)
