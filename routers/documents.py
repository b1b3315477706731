# routers/documents.py
"""
Document API routes.

Files are uploaded first through /api/upload; these routes store and manage
the metadata that ties an uploaded URL to a property (and optionally to one
of its tenants).
"""
import logging
import mimetypes
from typing import List, Optional

from fastapi import APIRouter, Depends, HTTPException, Query, status
from sqlalchemy import desc
from sqlalchemy.orm import Session, joinedload

from auth import get_current_user_id
from azure_blob import delete_from_blob
from database import get_session
from exceptions import StorageError
from models import Document
from schemas.document import DocumentCreate, DocumentResponse
from services.access import get_owned_document, get_owned_property, get_tenant_in_property

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api/documents", tags=["documents"])


def _guess_mime_type(url: str) -> str:
     mime_type, _ = mimetypes.guess_type(url.split("?", 1)[0])
     return mime_type or "application/octet-stream"


def _build_document_response(document: Document) -> DocumentResponse:
     return DocumentResponse.model_validate(document).model_copy(update={
          "tenant_name": document.tenant.full_name if document.tenant else None,
     })


@router.post(
     "",
     response_model=DocumentResponse,
     status_code=status.HTTP_201_CREATED,
     summary="Attach a document"
)
def create_document(
     document_data: DocumentCreate,
     db: Session = Depends(get_session),
     user_id: str = Depends(get_current_user_id)
):
     """
     Record an uploaded file against a property.

     If **tenant_id** is given, the tenant must live in that property.
     """
     prop = get_owned_property(db, user_id, document_data.property_id)
     if not prop:
          raise HTTPException(
               status_code=status.HTTP_404_NOT_FOUND,
               detail="Property not found"
          )

     if document_data.tenant_id is not None:
          tenant = get_tenant_in_property(db, prop.id, document_data.tenant_id)
          if not tenant:
               raise HTTPException(
                    status_code=status.HTTP_404_NOT_FOUND,
                    detail="Tenant not found"
               )

     document = Document(
          **document_data.model_dump(),
          mime_type=_guess_mime_type(document_data.url),
     )
     db.add(document)
     db.commit()
     db.refresh(document)

     return _build_document_response(document)


@router.get(
     "",
     response_model=List[DocumentResponse],
     summary="List documents of a property"
)
def list_documents(
     property_id: Optional[int] = Query(None, description="Property ID (required)"),
     tenant_id: Optional[int] = Query(None, description="Filter by tenant ID"),
     db: Session = Depends(get_session),
     user_id: str = Depends(get_current_user_id)
):
     if property_id is None:
          raise HTTPException(
               status_code=status.HTTP_400_BAD_REQUEST,
               detail="Property ID required"
          )

     prop = get_owned_property(db, user_id, property_id)
     if not prop:
          raise HTTPException(
               status_code=status.HTTP_404_NOT_FOUND,
               detail="Property not found"
          )

     query = (
          db.query(Document)
          .options(joinedload(Document.tenant))
          .filter(Document.property_id == prop.id)
     )
     if tenant_id is not None:
          query = query.filter(Document.tenant_id == tenant_id)

     documents = query.order_by(desc(Document.created_at), desc(Document.id)).all()
     return [_build_document_response(d) for d in documents]


@router.delete(
     "",
     summary="Delete a document"
)
def delete_document(
     document_id: Optional[int] = Query(None, description="Document ID (required)"),
     db: Session = Depends(get_session),
     user_id: str = Depends(get_current_user_id)
):
     """
     Remove the document record, then try to remove the blob. A storage
     failure is logged; the record stays deleted.
     """
     if document_id is None:
          raise HTTPException(
               status_code=status.HTTP_400_BAD_REQUEST,
               detail="Document ID required"
          )

     document = get_owned_document(db, user_id, document_id)
     if not document:
          raise HTTPException(
               status_code=status.HTTP_404_NOT_FOUND,
               detail="Document not found"
          )

     url = document.url
     db.delete(document)
     db.commit()

     try:
          delete_from_blob(url)
     except StorageError:
          logger.exception("Could not delete blob for document %s", document_id)

     return {"success": True}
