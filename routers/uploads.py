# routers/uploads.py
"""
File upload endpoint backed by Azure Blob Storage.
"""
import logging
from typing import List, Optional

from fastapi import APIRouter, Depends, File, HTTPException, UploadFile, status
from starlette.concurrency import run_in_threadpool

from auth import get_current_user_id
from azure_blob import DEFAULT_CONTAINER, upload_to_blob
from exceptions import StorageError
from schemas.document import UploadResponse

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api/upload", tags=["uploads"])


@router.post(
     "",
     response_model=UploadResponse,
     summary="Upload files"
)
async def upload_files(
     files: Optional[List[UploadFile]] = File(None),
     user_id: str = Depends(get_current_user_id),
):
     """
     Upload one or more files and return their URLs, in request order.
     The URLs are then passed to property images, maintenance images or
     document records.
     """
     if not files:
          raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail="No files provided")

     urls = []
     try:
          for upload in files:
               # The blob SDK is blocking; keep it off the event loop
               urls.append(await run_in_threadpool(upload_to_blob, upload, DEFAULT_CONTAINER, user_id))
     except StorageError as e:
          logger.error("Upload failed for user %s: %s", user_id, e)
          raise HTTPException(status_code=status.HTTP_502_BAD_GATEWAY, detail="Upload failed")

     return UploadResponse(urls=urls)
