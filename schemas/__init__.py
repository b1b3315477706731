# schemas/__init__.py
from .dashboard import (
     ActivityEntry,
     DashboardResponse,
     PropertySummary,
     StatsSummary,
)
from .document import DocumentCreate, DocumentResponse, UploadResponse
from .maintenance import MaintenanceCreate, MaintenanceResponse, MaintenanceUpdate
from .payment import PaymentCreate, PaymentResponse
from .property import PropertyCreate, PropertyDetailResponse, PropertyResponse, PropertyUpdate
from .tenant import TenantCreate, TenantListItem, TenantResponse, TenantUpdate
from .unit import UnitCreate, UnitResponse, UnitUpdate

__all__ = [
     "ActivityEntry",
     "DashboardResponse",
     "PropertySummary",
     "StatsSummary",
     "DocumentCreate",
     "DocumentResponse",
     "UploadResponse",
     "MaintenanceCreate",
     "MaintenanceResponse",
     "MaintenanceUpdate",
     "PaymentCreate",
     "PaymentResponse",
     "PropertyCreate",
     "PropertyDetailResponse",
     "PropertyResponse",
     "PropertyUpdate",
     "TenantCreate",
     "TenantListItem",
     "TenantResponse",
     "TenantUpdate",
     "UnitCreate",
     "UnitResponse",
     "UnitUpdate",
]
