# models/tenant.py
import enum
from sqlalchemy import Column, Integer, String, Numeric, Date, DateTime, ForeignKey, Enum, func
from sqlalchemy.orm import relationship
from .base import Base


class TenantStatus(str, enum.Enum):
     """Lease status of a tenant."""
     ACTIVE = "ACTIVE"
     PENDING = "PENDING"
     PAST = "PAST"


class Tenant(Base):
     """
     Tenant model - the current occupant of a unit.

     ``unit_id`` is unique: a unit holds at most one tenant at a time.
     """

     id = Column(Integer, primary_key=True, autoincrement=True)
     unit_id = Column(
          Integer,
          ForeignKey("units.id", ondelete="CASCADE"),
          nullable=False,
          unique=True,
          index=True
     )

     # Personal info
     first_name = Column(String(100), nullable=False)
     last_name = Column(String(100), nullable=False)
     email = Column(String(255), nullable=False)
     phone = Column(String(50), nullable=False)
     emergency_contact = Column(String(255), nullable=True)

     # Lease
     lease_start = Column(Date, nullable=False)
     lease_end = Column(Date, nullable=False)
     rent_amount = Column(Numeric(12, 2), default=0, nullable=False)
     deposit_amount = Column(Numeric(12, 2), default=0, nullable=False)
     payment_due_day = Column(Integer, default=1, nullable=False)
     status = Column(
          Enum(TenantStatus, name="tenant_status", create_constraint=True),
          default=TenantStatus.PENDING,
          nullable=False
     )

     # Timestamps
     created_at = Column(DateTime, server_default=func.now(), nullable=False)
     updated_at = Column(DateTime, server_default=func.now(), onupdate=func.now(), nullable=False)

     # Relationships
     unit = relationship("Unit", back_populates="tenant")
     payments = relationship(
          "Payment",
          back_populates="tenant",
          cascade="all, delete-orphan",
          order_by="desc(Payment.created_at)"
     )
     documents = relationship("Document", back_populates="tenant")
     maintenance_requests = relationship(
          "MaintenanceRequest",
          back_populates="tenant",
          cascade="all, delete-orphan"
     )

     @property
     def full_name(self) -> str:
          return f"{self.first_name} {self.last_name}"

     def __repr__(self):
          return f"<Tenant(id={self.id}, name='{self.first_name} {self.last_name}')>"
