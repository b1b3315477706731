# schemas/tenant.py
"""
Pydantic schemas for Tenant API request/response validation.
"""
from datetime import date, datetime
from decimal import Decimal
from typing import Optional

from pydantic import BaseModel, ConfigDict, EmailStr, Field, model_validator

from models.tenant import TenantStatus


class TenantCreate(BaseModel):
     """Schema for assigning a tenant to a unit."""
     first_name: str = Field(..., min_length=2, max_length=100)
     last_name: str = Field(..., min_length=2, max_length=100)
     email: EmailStr
     phone: str = Field(..., min_length=10, max_length=50)
     emergency_contact: Optional[str] = Field(None, max_length=255)
     lease_start: date
     lease_end: date
     rent_amount: Decimal = Field(..., ge=0, max_digits=12, decimal_places=2)
     deposit_amount: Decimal = Field(default=Decimal("0"), ge=0, max_digits=12, decimal_places=2)
     payment_due_day: int = Field(default=1, ge=1, le=31, description="Day of month rent is due")
     status: TenantStatus = Field(default=TenantStatus.PENDING)

     model_config = ConfigDict(
          json_schema_extra={
               "example": {
                    "first_name": "John",
                    "last_name": "Doe",
                    "email": "john@example.com",
                    "phone": "5551234567",
                    "lease_start": "2026-01-01",
                    "lease_end": "2026-12-31",
                    "rent_amount": 1200.00,
                    "deposit_amount": 1200.00,
                    "payment_due_day": 1,
                    "status": "ACTIVE"
               }
          }
     )

     @model_validator(mode="after")
     def _lease_dates(self):
          if self.lease_end < self.lease_start:
               raise ValueError("lease_end must not be before lease_start")
          return self


class TenantUpdate(BaseModel):
     """Schema for updating a tenant. Only provided fields change."""
     first_name: Optional[str] = Field(None, min_length=2, max_length=100)
     last_name: Optional[str] = Field(None, min_length=2, max_length=100)
     email: Optional[EmailStr] = None
     phone: Optional[str] = Field(None, min_length=10, max_length=50)
     emergency_contact: Optional[str] = Field(None, max_length=255)
     lease_start: Optional[date] = None
     lease_end: Optional[date] = None
     rent_amount: Optional[Decimal] = Field(None, ge=0, max_digits=12, decimal_places=2)
     deposit_amount: Optional[Decimal] = Field(None, ge=0, max_digits=12, decimal_places=2)
     payment_due_day: Optional[int] = Field(None, ge=1, le=31)
     status: Optional[TenantStatus] = None


class TenantResponse(BaseModel):
     id: int
     unit_id: int
     first_name: str
     last_name: str
     email: str
     phone: str
     emergency_contact: Optional[str] = None
     lease_start: date
     lease_end: date
     rent_amount: Decimal
     deposit_amount: Decimal
     payment_due_day: int
     status: TenantStatus
     created_at: datetime

     model_config = ConfigDict(from_attributes=True)


class TenantListItem(TenantResponse):
     """Tenant row in the cross-property tenant list."""
     property_id: Optional[int] = None
     property_name: Optional[str] = None
     unit_number: Optional[str] = None
