# schemas/document.py
"""
Pydantic schemas for document metadata.
"""
from datetime import datetime
from typing import List, Optional

from pydantic import BaseModel, ConfigDict, Field

from models.document import DocumentCategory, DocumentType


class DocumentCreate(BaseModel):
     """Attach an already uploaded file to a property (and optionally a tenant)."""
     name: str = Field(..., min_length=2, max_length=255)
     type: DocumentType
     category: DocumentCategory = Field(default=DocumentCategory.OTHER)
     url: str = Field(..., min_length=1, max_length=1000, description="URL returned by /api/upload")
     property_id: int = Field(..., gt=0)
     tenant_id: Optional[int] = Field(None, gt=0)
     file_size: int = Field(default=0, ge=0, description="Bytes, 0 when unknown")


class DocumentResponse(BaseModel):
     id: int
     property_id: int
     tenant_id: Optional[int] = None
     name: str
     type: DocumentType
     category: DocumentCategory
     url: str
     file_size: int
     mime_type: str
     created_at: datetime

     # Optional related data
     tenant_name: Optional[str] = None

     model_config = ConfigDict(from_attributes=True)


class UploadResponse(BaseModel):
     urls: List[str]
