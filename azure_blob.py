import logging
import os
import uuid
from functools import lru_cache
from urllib.parse import unquote, urlparse

from azure.core.exceptions import AzureError, ResourceNotFoundError
from azure.storage.blob import BlobServiceClient, ContentSettings

from exceptions import StorageError

logger = logging.getLogger(__name__)

DEFAULT_CONTAINER = os.getenv("AZURE_STORAGE_CONTAINER", "documents")


@lru_cache(maxsize=1)
def get_blob_service() -> BlobServiceClient:
     connection_string = os.getenv("AZURE_STORAGE_CONNECTION_STRING")
     if not connection_string:
          account = os.getenv("AZURE_STORAGE_ACCOUNT")
          key = os.getenv("AZURE_STORAGE_KEY")
          if not account or not key:
               raise StorageError("Azure storage credentials are not configured")
          connection_string = (
               f"DefaultEndpointsProtocol=https;"
               f"AccountName={account};"
               f"AccountKey={key};"
               f"EndpointSuffix=core.windows.net"
          )
     return BlobServiceClient.from_connection_string(connection_string)


def upload_to_blob(file, container: str, user_id: str | int) -> str:
     """
     Uploads a FastAPI ``UploadFile`` under ``<user_id>/<uuid><ext>``
     and returns the blob's public URL.
     """
     ext = os.path.splitext(file.filename or "")[1]
     filename = f"{user_id}/{uuid.uuid4()}{ext}"
     try:
          blob_client = get_blob_service().get_blob_client(container=container, blob=filename)
          blob_client.upload_blob(
               file.file,
               overwrite=True,
               content_settings=ContentSettings(content_type=file.content_type),
          )
     except AzureError as e:
          raise StorageError(f"Upload of {file.filename!r} failed: {e}") from e
     logger.info("Uploaded %s to container %s", filename, container)
     return blob_client.url


def delete_from_blob(blob_url: str) -> None:
     """
     Deletes a file from Azure Blob Storage using its full URL
     """
     path = unquote(urlparse(blob_url).path).lstrip("/")
     container, _, blob_name = path.partition("/")
     if not container or not blob_name:
          raise StorageError(f"Not a blob URL: {blob_url}")
     try:
          blob_client = get_blob_service().get_blob_client(
               container=container,
               blob=blob_name
          )
          blob_client.delete_blob()
     except ResourceNotFoundError:
          logger.warning("Blob %s/%s already gone", container, blob_name)
     except AzureError as e:
          raise StorageError(f"Delete of {blob_url} failed: {e}") from e
