# schemas/maintenance.py
"""
Pydantic schemas for maintenance request validation.
"""
from datetime import datetime
from decimal import Decimal
from typing import List, Optional

from pydantic import BaseModel, ConfigDict, Field

from models.maintenance_request import MaintenanceCategory, MaintenancePriority, MaintenanceStatus


class MaintenanceCreate(BaseModel):
     """Schema for logging a maintenance request."""
     title: str = Field(..., min_length=2, max_length=255)
     description: str = Field(..., min_length=10, description="What needs fixing")
     property_id: int = Field(..., gt=0)
     tenant_id: int = Field(..., gt=0, description="Tenant who reported the issue")
     priority: MaintenancePriority = Field(default=MaintenancePriority.MEDIUM)
     category: MaintenanceCategory = Field(default=MaintenanceCategory.OTHER)
     status: MaintenanceStatus = Field(default=MaintenanceStatus.OPEN)
     assigned_to: Optional[str] = Field(None, max_length=255)
     cost: Optional[Decimal] = Field(None, ge=0, max_digits=12, decimal_places=2)
     images: List[str] = Field(default_factory=list)

     model_config = ConfigDict(
          json_schema_extra={
               "example": {
                    "title": "Leaking sink",
                    "description": "Kitchen sink drips constantly under the cabinet",
                    "property_id": 1,
                    "tenant_id": 1,
                    "priority": "HIGH",
                    "category": "PLUMBING"
               }
          }
     )


class MaintenanceUpdate(BaseModel):
     """Progress update on a request."""
     status: Optional[MaintenanceStatus] = None
     priority: Optional[MaintenancePriority] = None
     assigned_to: Optional[str] = Field(None, max_length=255)
     cost: Optional[Decimal] = Field(None, ge=0, max_digits=12, decimal_places=2)


class MaintenanceResponse(BaseModel):
     id: int
     property_id: int
     tenant_id: int
     title: str
     description: str
     priority: MaintenancePriority
     category: MaintenanceCategory
     status: MaintenanceStatus
     assigned_to: Optional[str] = None
     cost: Optional[Decimal] = None
     images: List[str] = Field(default_factory=list)
     created_at: datetime
     completed_at: Optional[datetime] = None

     # Optional related data
     property_name: Optional[str] = None
     tenant_name: Optional[str] = None

     model_config = ConfigDict(from_attributes=True)
