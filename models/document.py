# models/document.py
import enum
from sqlalchemy import Column, Integer, String, DateTime, ForeignKey, Enum, func
from sqlalchemy.orm import relationship
from .base import Base


class DocumentType(str, enum.Enum):
     LEASE = "LEASE"
     APPLICATION = "APPLICATION"
     AGREEMENT = "AGREEMENT"
     ID = "ID"
     INSURANCE = "INSURANCE"
     OTHER = "OTHER"


class DocumentCategory(str, enum.Enum):
     TENANT = "TENANT"
     PROPERTY = "PROPERTY"
     MAINTENANCE = "MAINTENANCE"
     FINANCIAL = "FINANCIAL"
     OTHER = "OTHER"


class Document(Base):
     """
     Document model - metadata for a file held in blob storage.
     Belongs to a property and optionally to one of its tenants.
     """

     id = Column(Integer, primary_key=True, autoincrement=True)
     property_id = Column(
          Integer,
          ForeignKey("properties.id", ondelete="CASCADE"),
          nullable=False,
          index=True
     )
     tenant_id = Column(Integer, ForeignKey("tenants.id"), nullable=True, index=True)

     name = Column(String(255), nullable=False)
     type = Column(
          Enum(DocumentType, name="document_type", create_constraint=True),
          nullable=False
     )
     category = Column(
          Enum(DocumentCategory, name="document_category", create_constraint=True),
          default=DocumentCategory.OTHER,
          nullable=False
     )
     url = Column(String(1000), nullable=False)  # Blob URL
     file_size = Column(Integer, default=0, nullable=False)
     mime_type = Column(String(255), nullable=False)

     # Timestamps
     created_at = Column(DateTime, server_default=func.now(), nullable=False)
     updated_at = Column(DateTime, server_default=func.now(), onupdate=func.now(), nullable=False)

     # Relationships
     property = relationship("Property", back_populates="documents")
     tenant = relationship("Tenant", back_populates="documents")

     def __repr__(self):
          return f"<Document(id={self.id}, name='{self.name}', type='{self.type}')>"
