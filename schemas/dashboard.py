# schemas/dashboard.py
"""
Read models for the dashboard.

The ``*Snapshot`` models are what the stats and activity feed functions
consume. They validate straight from ORM rows (``from_attributes``) or from
plain dicts, and normalise missing data: a ``None`` collection becomes an
empty list, a ``None`` amount becomes 0, a missing tenant means a vacant unit.
"""
import enum
from datetime import datetime
from decimal import Decimal
from typing import Any, List, Optional, Union

from pydantic import BaseModel, ConfigDict, Field, field_validator


def _enum_value(v: Any) -> Any:
     return v.value if isinstance(v, enum.Enum) else v


class _Snapshot(BaseModel):
     model_config = ConfigDict(from_attributes=True, frozen=True)


class TenantSnapshot(_Snapshot):
     id: Optional[int] = None
     first_name: str = ""
     last_name: str = ""
     rent_amount: Decimal = Decimal("0")
     status: Optional[str] = None

     @field_validator("first_name", "last_name", mode="before")
     @classmethod
     def _blank_name(cls, v):
          return "" if v is None else v

     @field_validator("rent_amount", mode="before")
     @classmethod
     def _zero_rent(cls, v):
          return 0 if v is None else v

     @field_validator("status", mode="before")
     @classmethod
     def _status_value(cls, v):
          return _enum_value(v)

     @property
     def full_name(self) -> str:
          return f"{self.first_name} {self.last_name}"


class UnitSnapshot(_Snapshot):
     id: Optional[int] = None
     status: Optional[str] = None
     tenant: Optional[TenantSnapshot] = None

     @field_validator("status", mode="before")
     @classmethod
     def _status_value(cls, v):
          return _enum_value(v)


class MaintenanceSnapshot(_Snapshot):
     id: Optional[int] = None
     status: Optional[str] = None

     @field_validator("status", mode="before")
     @classmethod
     def _status_value(cls, v):
          return _enum_value(v)


class PropertySnapshot(_Snapshot):
     """A property with the nested collections the aggregator reads."""
     id: Optional[int] = None
     name: str = ""
     units: List[UnitSnapshot] = Field(default_factory=list)
     maintenance_requests: List[MaintenanceSnapshot] = Field(default_factory=list)

     @field_validator("units", "maintenance_requests", mode="before")
     @classmethod
     def _empty_collection(cls, v):
          return [] if v is None else v

     @field_validator("name", mode="before")
     @classmethod
     def _blank_name(cls, v):
          return "" if v is None else v


class DocumentRef(_Snapshot):
     id: Optional[int] = None


class PropertyDetailSnapshot(_Snapshot):
     """A single property with its units and documents; requests are not read."""
     id: Optional[int] = None
     name: str = ""
     units: List[UnitSnapshot] = Field(default_factory=list)
     documents: List[DocumentRef] = Field(default_factory=list)

     @field_validator("units", "documents", mode="before")
     @classmethod
     def _empty_collection(cls, v):
          return [] if v is None else v

     @field_validator("name", mode="before")
     @classmethod
     def _blank_name(cls, v):
          return "" if v is None else v


class PropertyNameSnapshot(_Snapshot):
     id: Optional[int] = None
     name: str = ""

     @field_validator("name", mode="before")
     @classmethod
     def _blank_name(cls, v):
          return "" if v is None else v


class MaintenanceActivitySnapshot(_Snapshot):
     id: Union[int, str]
     title: str = ""
     status: Optional[str] = None
     created_at: datetime
     tenant: Optional[TenantSnapshot] = None
     property: Optional[PropertyNameSnapshot] = None

     @field_validator("status", mode="before")
     @classmethod
     def _status_value(cls, v):
          return _enum_value(v)


class PaymentActivitySnapshot(_Snapshot):
     id: Union[int, str]
     amount: Decimal = Decimal("0")
     status: Optional[str] = None
     created_at: datetime
     tenant: Optional[TenantSnapshot] = None

     @field_validator("amount", mode="before")
     @classmethod
     def _zero_amount(cls, v):
          return 0 if v is None else v

     @field_validator("status", mode="before")
     @classmethod
     def _status_value(cls, v):
          return _enum_value(v)


# ---------------------------------------------------------------------------
# Responses
# ---------------------------------------------------------------------------

class ActivityType(str, enum.Enum):
     MAINTENANCE = "MAINTENANCE"
     PAYMENT = "PAYMENT"


class StatsSummary(BaseModel):
     """Top cards of the dashboard."""
     total_properties: int = 0
     total_units: int = 0
     occupied_units: int = 0
     occupancy_rate: int = Field(0, ge=0, le=100, description="Whole percent of units with a tenant")
     active_requests: int = 0
     monthly_revenue: float = 0.0

     model_config = ConfigDict(
          json_schema_extra={
               "example": {
                    "total_properties": 2,
                    "total_units": 4,
                    "occupied_units": 3,
                    "occupancy_rate": 75,
                    "active_requests": 2,
                    "monthly_revenue": 3000.0
               }
          }
     )


class ActivityEntry(BaseModel):
     """One row of the recent activity feed."""
     id: Union[int, str]
     type: ActivityType
     title: str
     description: str
     timestamp: datetime
     status: Optional[str] = None


class DashboardResponse(BaseModel):
     stats: StatsSummary
     recent_activity: List[ActivityEntry]


class PropertySummary(BaseModel):
     """Figures shown on a single property's dashboard."""
     total_units: int = 0
     occupied_units: int = 0
     occupancy_rate: int = 0
     document_count: int = 0
     monthly_income: float = 0.0
