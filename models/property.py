# models/property.py
import enum
from sqlalchemy import Column, Integer, String, Text, Numeric, Float, JSON, DateTime, Enum, func
from sqlalchemy.orm import relationship
from .base import Base


class PropertyType(str, enum.Enum):
     """Kind of building a property is."""
     SINGLE_FAMILY = "SINGLE_FAMILY"
     MULTI_FAMILY = "MULTI_FAMILY"
     APARTMENT = "APARTMENT"
     CONDO = "CONDO"


class PropertyStatus(str, enum.Enum):
     """Listing status of a property."""
     AVAILABLE = "AVAILABLE"
     OCCUPIED = "OCCUPIED"
     MAINTENANCE = "MAINTENANCE"
     OFFLINE = "OFFLINE"


class Property(Base):
     """
     Property model - a building or lot registered by a property manager.

     ``user_id`` is the subject identifier issued by the external auth
     provider; every query in the API is scoped by it.
     """

     id = Column(Integer, primary_key=True, autoincrement=True)
     user_id = Column(String(255), nullable=False, index=True)

     name = Column(String(255), nullable=False)
     description = Column(Text, nullable=False, default="")
     address = Column(String(500), nullable=False)
     property_type = Column(
          Enum(PropertyType, name="property_type", create_constraint=True),
          default=PropertyType.APARTMENT,
          nullable=False
     )
     price = Column(Numeric(12, 2), default=0, nullable=False)
     bedrooms = Column(Integer, default=0, nullable=False)
     bathrooms = Column(Float, default=0, nullable=False)
     size = Column(Float, default=0, nullable=False)
     features = Column(JSON, default=list, nullable=False)
     images = Column(JSON, default=list, nullable=False)
     status = Column(
          Enum(PropertyStatus, name="property_status", create_constraint=True),
          default=PropertyStatus.AVAILABLE,
          nullable=False,
          index=True
     )

     # Timestamps
     created_at = Column(DateTime, server_default=func.now(), nullable=False)
     updated_at = Column(DateTime, server_default=func.now(), onupdate=func.now(), nullable=False)

     # Relationships
     units = relationship(
          "Unit",
          back_populates="property",
          cascade="all, delete-orphan",
          order_by="Unit.id"
     )
     maintenance_requests = relationship(
          "MaintenanceRequest",
          back_populates="property",
          cascade="all, delete-orphan"
     )
     documents = relationship("Document", back_populates="property", cascade="all, delete-orphan")

     def __repr__(self):
          return f"<Property(id={self.id}, name='{self.name}', user_id='{self.user_id}')>"
