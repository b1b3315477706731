# models/__init__.py
from .base import Base
from .property import Property, PropertyStatus, PropertyType
from .unit import Unit, UnitStatus
from .tenant import Tenant, TenantStatus
from .maintenance_request import (
     MaintenanceRequest,
     MaintenanceStatus,
     MaintenancePriority,
     MaintenanceCategory,
)
from .payment import Payment, PaymentStatus
from .document import Document, DocumentType, DocumentCategory

__all__ = [
     "Base",
     "Property",
     "PropertyStatus",
     "PropertyType",
     "Unit",
     "UnitStatus",
     "Tenant",
     "TenantStatus",
     "MaintenanceRequest",
     "MaintenanceStatus",
     "MaintenancePriority",
     "MaintenanceCategory",
     "Payment",
     "PaymentStatus",
     "Document",
     "DocumentType",
     "DocumentCategory",
]
