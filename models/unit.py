# models/unit.py
import enum
from sqlalchemy import Column, Integer, String, Numeric, Float, DateTime, ForeignKey, Enum, func
from sqlalchemy.orm import relationship
from .base import Base


class UnitStatus(str, enum.Enum):
     """Occupancy status of a unit (mirrors whether a tenant is linked)."""
     VACANT = "VACANT"
     OCCUPIED = "OCCUPIED"


class Unit(Base):
     """
     Unit model - individual rentable units within a property.
     """

     id = Column(Integer, primary_key=True, autoincrement=True)
     property_id = Column(
          Integer,
          ForeignKey("properties.id", ondelete="CASCADE"),
          nullable=False,
          index=True
     )

     unit_number = Column(String(50), nullable=False)
     bedrooms = Column(Integer, default=0, nullable=False)
     bathrooms = Column(Float, default=0, nullable=False)
     size = Column(Float, default=0, nullable=False)
     rent = Column(Numeric(12, 2), nullable=True)
     status = Column(
          Enum(UnitStatus, name="unit_status", create_constraint=True),
          default=UnitStatus.VACANT,
          nullable=False
     )

     # Timestamps
     created_at = Column(DateTime, server_default=func.now(), nullable=False)
     updated_at = Column(DateTime, server_default=func.now(), onupdate=func.now(), nullable=False)

     # Relationships
     property = relationship("Property", back_populates="units")
     tenant = relationship(
          "Tenant",
          back_populates="unit",
          uselist=False,
          cascade="all, delete-orphan"
     )

     def __repr__(self):
          return f"<Unit(id={self.id}, unit_number='{self.unit_number}', status='{self.status}')>"
