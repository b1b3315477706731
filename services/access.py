# services/access.py
"""
Ownership-scoped lookups.

Every row is reached through the property that owns it, and a property is
only visible to the user whose id it carries. Each helper returns ``None``
when the row does not exist *or* belongs to someone else, so callers
cannot tell the two apart.
"""
from typing import Optional

from sqlalchemy.orm import Session

from models import Document, MaintenanceRequest, Property, Tenant, Unit


def get_owned_property(db: Session, user_id: str, property_id: int) -> Optional[Property]:
     return (
          db.query(Property)
          .filter(Property.id == property_id, Property.user_id == user_id)
          .first()
     )


def get_owned_unit(db: Session, user_id: str, unit_id: int) -> Optional[Unit]:
     return (
          db.query(Unit)
          .join(Property, Unit.property_id == Property.id)
          .filter(Unit.id == unit_id, Property.user_id == user_id)
          .first()
     )


def get_owned_tenant(db: Session, user_id: str, tenant_id: int) -> Optional[Tenant]:
     return (
          db.query(Tenant)
          .join(Unit, Tenant.unit_id == Unit.id)
          .join(Property, Unit.property_id == Property.id)
          .filter(Tenant.id == tenant_id, Property.user_id == user_id)
          .first()
     )


def get_tenant_in_property(db: Session, property_id: int, tenant_id: int) -> Optional[Tenant]:
     """Tenant ``tenant_id`` if they live in one of ``property_id``'s units."""
     return (
          db.query(Tenant)
          .join(Unit, Tenant.unit_id == Unit.id)
          .filter(Tenant.id == tenant_id, Unit.property_id == property_id)
          .first()
     )


def get_owned_request(db: Session, user_id: str, request_id: int) -> Optional[MaintenanceRequest]:
     return (
          db.query(MaintenanceRequest)
          .join(Property, MaintenanceRequest.property_id == Property.id)
          .filter(MaintenanceRequest.id == request_id, Property.user_id == user_id)
          .first()
     )


def get_owned_document(db: Session, user_id: str, document_id: int) -> Optional[Document]:
     return (
          db.query(Document)
          .join(Property, Document.property_id == Property.id)
          .filter(Document.id == document_id, Property.user_id == user_id)
          .first()
     )
