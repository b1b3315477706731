"""Tests for the blob storage helpers, with the Azure client mocked."""

from io import BytesIO
from unittest.mock import MagicMock

import pytest
from azure.core.exceptions import HttpResponseError, ResourceNotFoundError

import azure_blob
from exceptions import StorageError


@pytest.fixture
def blob_service(monkeypatch) -> MagicMock:
    service = MagicMock()
    monkeypatch.setattr(azure_blob, "get_blob_service", lambda: service)
    return service


def _upload(filename: str = "lease.pdf") -> MagicMock:
    upload = MagicMock()
    upload.filename = filename
    upload.content_type = "application/pdf"
    upload.file = BytesIO(b"%PDF-1.4")
    return upload


class TestUploadToBlob:
    def test_blob_name_and_url(self, blob_service) -> None:
        client = blob_service.get_blob_client.return_value
        client.url = "https://acct.blob.core.windows.net/documents/user-1/x.pdf"

        url = azure_blob.upload_to_blob(_upload(), "documents", "user-1")

        assert url == client.url
        kwargs = blob_service.get_blob_client.call_args.kwargs
        assert kwargs["container"] == "documents"
        assert kwargs["blob"].startswith("user-1/")
        assert kwargs["blob"].endswith(".pdf")
        client.upload_blob.assert_called_once()

    def test_azure_error_becomes_storage_error(self, blob_service) -> None:
        blob_service.get_blob_client.return_value.upload_blob.side_effect = HttpResponseError("denied")
        with pytest.raises(StorageError):
            azure_blob.upload_to_blob(_upload(), "documents", "user-1")


class TestDeleteFromBlob:
    def test_parses_container_and_blob(self, blob_service) -> None:
        azure_blob.delete_from_blob("https://acct.blob.core.windows.net/documents/user-1/my%20lease.pdf")

        blob_service.get_blob_client.assert_called_once_with(
            container="documents", blob="user-1/my lease.pdf"
        )
        blob_service.get_blob_client.return_value.delete_blob.assert_called_once()

    def test_missing_blob_is_not_an_error(self, blob_service) -> None:
        blob_service.get_blob_client.return_value.delete_blob.side_effect = ResourceNotFoundError("gone")
        azure_blob.delete_from_blob("https://acct.blob.core.windows.net/documents/user-1/a.pdf")

    def test_not_a_blob_url(self, blob_service) -> None:
        with pytest.raises(StorageError):
            azure_blob.delete_from_blob("https://acct.blob.core.windows.net/")


class TestGetBlobService:
    def test_unconfigured(self, monkeypatch) -> None:
        for name in ("AZURE_STORAGE_CONNECTION_STRING", "AZURE_STORAGE_ACCOUNT", "AZURE_STORAGE_KEY"):
            monkeypatch.delenv(name, raising=False)
        azure_blob.get_blob_service.cache_clear()
        with pytest.raises(StorageError):
            azure_blob.get_blob_service()
