# schemas/unit.py
"""
Pydantic schemas for Unit API request/response validation.
"""
from datetime import datetime
from decimal import Decimal
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field

from models.unit import UnitStatus
from schemas.tenant import TenantResponse


class UnitCreate(BaseModel):
     """Schema for adding a unit to a property."""
     unit_number: str = Field(..., min_length=1, max_length=50, description="Unit label, e.g. 101")
     bedrooms: int = Field(default=0, ge=0)
     bathrooms: float = Field(default=0, ge=0)
     size: float = Field(default=0, ge=0)
     rent: Optional[Decimal] = Field(None, ge=0, max_digits=12, decimal_places=2, description="Asking rent")


class UnitUpdate(BaseModel):
     unit_number: Optional[str] = Field(None, min_length=1, max_length=50)
     bedrooms: Optional[int] = Field(None, ge=0)
     bathrooms: Optional[float] = Field(None, ge=0)
     size: Optional[float] = Field(None, ge=0)
     rent: Optional[Decimal] = Field(None, ge=0, max_digits=12, decimal_places=2)


class UnitResponse(BaseModel):
     id: int
     property_id: int
     unit_number: str
     bedrooms: int
     bathrooms: float
     size: float
     rent: Optional[Decimal] = None
     status: UnitStatus
     created_at: datetime
     tenant: Optional[TenantResponse] = None

     model_config = ConfigDict(from_attributes=True)
