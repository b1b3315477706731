# schemas/property.py
"""
Pydantic schemas for Property API request/response validation.
"""
from datetime import datetime
from decimal import Decimal
from typing import List, Optional

from pydantic import BaseModel, ConfigDict, Field

from models.property import PropertyStatus, PropertyType
from schemas.unit import UnitResponse


class PropertyCreate(BaseModel):
     """Schema for registering a property."""
     name: str = Field(..., min_length=2, max_length=255, description="Property name")
     address: str = Field(..., min_length=1, max_length=500, description="Street address")
     description: str = Field(default="", description="Free-text description")
     property_type: PropertyType = Field(default=PropertyType.APARTMENT)
     price: Decimal = Field(default=Decimal("0"), ge=0, max_digits=12, decimal_places=2)
     bedrooms: int = Field(default=0, ge=0)
     bathrooms: float = Field(default=0, ge=0)
     size: float = Field(default=0, ge=0, description="Floor area")
     features: List[str] = Field(default_factory=list)
     images: List[str] = Field(default_factory=list, description="Image URLs from /api/upload")
     status: PropertyStatus = Field(default=PropertyStatus.AVAILABLE)

     model_config = ConfigDict(
          json_schema_extra={
               "example": {
                    "name": "Sunset Apartments",
                    "address": "12 Ocean Drive",
                    "property_type": "APARTMENT",
                    "price": 250000,
                    "bedrooms": 6,
                    "bathrooms": 4,
                    "size": 320,
                    "features": ["parking", "laundry"],
                    "status": "AVAILABLE"
               }
          }
     )


class PropertyUpdate(BaseModel):
     """Schema for updating an existing property. Only provided fields change."""
     name: Optional[str] = Field(None, min_length=2, max_length=255)
     address: Optional[str] = Field(None, min_length=1, max_length=500)
     description: Optional[str] = None
     property_type: Optional[PropertyType] = None
     price: Optional[Decimal] = Field(None, ge=0, max_digits=12, decimal_places=2)
     bedrooms: Optional[int] = Field(None, ge=0)
     bathrooms: Optional[float] = Field(None, ge=0)
     size: Optional[float] = Field(None, ge=0)
     features: Optional[List[str]] = None
     images: Optional[List[str]] = None
     status: Optional[PropertyStatus] = None


class PropertyResponse(BaseModel):
     """Schema for property response."""
     id: int
     user_id: str
     name: str
     description: str
     address: str
     property_type: PropertyType
     price: Decimal
     bedrooms: int
     bathrooms: float
     size: float
     features: List[str] = Field(default_factory=list)
     images: List[str] = Field(default_factory=list)
     status: PropertyStatus
     created_at: datetime
     updated_at: Optional[datetime] = None

     # Derived
     unit_count: int = 0

     model_config = ConfigDict(from_attributes=True)


class PropertyDetailResponse(PropertyResponse):
     """Property with its units (and each unit's tenant)."""
     units: List[UnitResponse] = Field(default_factory=list)
