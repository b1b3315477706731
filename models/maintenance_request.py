# models/maintenance_request.py
import enum
from datetime import datetime, timezone

from sqlalchemy import Column, Integer, String, Text, Numeric, JSON, DateTime, ForeignKey, Enum, func
from sqlalchemy.orm import relationship
from .base import Base


class MaintenanceStatus(str, enum.Enum):
     """Lifecycle of a maintenance request. COMPLETED is terminal."""
     OPEN = "OPEN"
     IN_PROGRESS = "IN_PROGRESS"
     COMPLETED = "COMPLETED"


class MaintenancePriority(str, enum.Enum):
     LOW = "LOW"
     MEDIUM = "MEDIUM"
     HIGH = "HIGH"
     URGENT = "URGENT"


class MaintenanceCategory(str, enum.Enum):
     PLUMBING = "PLUMBING"
     ELECTRICAL = "ELECTRICAL"
     HVAC = "HVAC"
     APPLIANCE = "APPLIANCE"
     STRUCTURAL = "STRUCTURAL"
     OTHER = "OTHER"


class MaintenanceRequest(Base):
     """
     MaintenanceRequest model - a repair ticket raised for a property by one
     of its tenants.

     ``completed_at`` is only ever written through :meth:`set_status`, which
     keeps it in step with the COMPLETED status.
     """

     id = Column(Integer, primary_key=True, autoincrement=True)
     property_id = Column(
          Integer,
          ForeignKey("properties.id", ondelete="CASCADE"),
          nullable=False,
          index=True
     )
     # NO ACTION here: SQL Server rejects a second cascade path to this table
     tenant_id = Column(Integer, ForeignKey("tenants.id"), nullable=False, index=True)

     title = Column(String(255), nullable=False)
     description = Column(Text, nullable=False)
     priority = Column(
          Enum(MaintenancePriority, name="maintenance_priority", create_constraint=True),
          default=MaintenancePriority.MEDIUM,
          nullable=False
     )
     category = Column(
          Enum(MaintenanceCategory, name="maintenance_category", create_constraint=True),
          default=MaintenanceCategory.OTHER,
          nullable=False
     )
     status = Column(
          Enum(MaintenanceStatus, name="maintenance_status", create_constraint=True),
          default=MaintenanceStatus.OPEN,
          nullable=False,
          index=True
     )
     assigned_to = Column(String(255), nullable=True)
     cost = Column(Numeric(12, 2), nullable=True)
     images = Column(JSON, default=list, nullable=False)

     # Timestamps
     created_at = Column(DateTime, server_default=func.now(), nullable=False, index=True)
     updated_at = Column(DateTime, server_default=func.now(), onupdate=func.now(), nullable=False)
     completed_at = Column(DateTime, nullable=True)

     # Relationships
     property = relationship("Property", back_populates="maintenance_requests")
     tenant = relationship("Tenant", back_populates="maintenance_requests")

     def set_status(self, status: MaintenanceStatus) -> None:
          """Change status, stamping or clearing ``completed_at`` accordingly."""
          if status == MaintenanceStatus.COMPLETED:
               if self.status != MaintenanceStatus.COMPLETED or self.completed_at is None:
                    self.completed_at = datetime.now(timezone.utc).replace(tzinfo=None)
          else:
               self.completed_at = None
          self.status = status

     def __repr__(self):
          return f"<MaintenanceRequest(id={self.id}, title='{self.title}', status='{self.status}')>"
