"""Tests for document metadata routes and file uploads."""

import asyncio
import time
from io import BytesIO

import pytest
from fastapi import UploadFile

from exceptions import StorageError
from models import Document
from routers import uploads

from conftest import OTHER_USER_ID

BLOB_URL = "https://acct.blob.core.windows.net/documents/user/lease.pdf"


@pytest.fixture
def deleted_blobs(monkeypatch) -> list:
    """Record blob deletions instead of calling Azure."""
    calls = []
    monkeypatch.setattr("routers.documents.delete_from_blob", calls.append)
    return calls


class TestCreateDocument:
    def test_create_guesses_mime_type(self, client, factory) -> None:
        prop = factory.property()
        tenant = factory.tenant(factory.unit(prop), first_name="Ana", last_name="Lima")

        response = client.post("/api/documents", json={
            "name": "Lease agreement",
            "type": "LEASE",
            "category": "TENANT",
            "url": BLOB_URL,
            "property_id": prop.id,
            "tenant_id": tenant.id,
            "file_size": 2048,
        })

        assert response.status_code == 201
        body = response.json()
        assert body["mime_type"] == "application/pdf"
        assert body["tenant_name"] == "Ana Lima"

    def test_unknown_extension(self, client, factory) -> None:
        prop = factory.property()
        response = client.post("/api/documents", json={
            "name": "Scan",
            "type": "OTHER",
            "url": "https://acct.blob.core.windows.net/documents/user/scan",
            "property_id": prop.id,
        })
        assert response.json()["mime_type"] == "application/octet-stream"

    def test_tenant_from_other_property(self, client, factory) -> None:
        prop = factory.property(name="First")
        outsider = factory.tenant(factory.unit(factory.property(name="Second")))
        response = client.post("/api/documents", json={
            "name": "Lease",
            "type": "LEASE",
            "url": BLOB_URL,
            "property_id": prop.id,
            "tenant_id": outsider.id,
        })
        assert response.status_code == 404


class TestListDocuments:
    def test_property_id_required(self, client) -> None:
        response = client.get("/api/documents")
        assert response.status_code == 400
        assert response.json() == {"detail": "Property ID required"}

    def test_list_for_property(self, client, factory) -> None:
        prop = factory.property()
        tenant = factory.tenant(factory.unit(prop))
        factory.document(prop, tenant)
        factory.document(prop)

        all_docs = client.get("/api/documents", params={"property_id": prop.id}).json()
        tenant_docs = client.get(
            "/api/documents", params={"property_id": prop.id, "tenant_id": tenant.id}
        ).json()

        assert len(all_docs) == 2
        assert len(tenant_docs) == 1

    def test_other_users_property(self, client, factory) -> None:
        prop = factory.property(user_id=OTHER_USER_ID)
        assert client.get("/api/documents", params={"property_id": prop.id}).status_code == 404


class TestDeleteDocument:
    def test_document_id_required(self, client) -> None:
        assert client.delete("/api/documents").status_code == 400

    def test_delete_removes_row_and_blob(self, client, session, factory, deleted_blobs) -> None:
        doc = factory.document(factory.property(), url=BLOB_URL)
        doc_id = doc.id

        response = client.delete("/api/documents", params={"document_id": doc_id})

        assert response.json() == {"success": True}
        assert deleted_blobs == [BLOB_URL]
        session.expire_all()
        assert session.get(Document, doc_id) is None

    def test_storage_failure_still_deletes_row(self, client, session, factory, monkeypatch) -> None:
        def failing_delete(url):
            raise StorageError("storage unavailable")

        monkeypatch.setattr("routers.documents.delete_from_blob", failing_delete)
        doc = factory.document(factory.property())
        doc_id = doc.id

        response = client.delete("/api/documents", params={"document_id": doc_id})

        assert response.status_code == 200
        session.expire_all()
        assert session.get(Document, doc_id) is None

    def test_other_users_document(self, client, factory, deleted_blobs) -> None:
        doc = factory.document(factory.property(user_id=OTHER_USER_ID))
        response = client.delete("/api/documents", params={"document_id": doc.id})
        assert response.status_code == 404
        assert deleted_blobs == []


class TestUploads:
    def test_upload_returns_urls_in_order(self, client, monkeypatch) -> None:
        uploaded = []

        def fake_upload(file, container, user_id):
            uploaded.append((file.filename, container, user_id))
            return f"https://acct.blob.core.windows.net/{container}/{user_id}/{file.filename}"

        monkeypatch.setattr("routers.uploads.upload_to_blob", fake_upload)

        response = client.post(
            "/api/upload",
            files=[
                ("files", ("a.pdf", b"%PDF-1.4", "application/pdf")),
                ("files", ("b.png", b"\x89PNG", "image/png")),
            ],
        )

        assert response.status_code == 200
        urls = response.json()["urls"]
        assert [u.rsplit("/", 1)[1] for u in urls] == ["a.pdf", "b.png"]
        assert [name for name, _, _ in uploaded] == ["a.pdf", "b.png"]

    def test_no_files(self, client) -> None:
        response = client.post("/api/upload")
        assert response.status_code == 400

    def test_storage_failure(self, client, monkeypatch) -> None:
        def failing_upload(file, container, user_id):
            raise StorageError("not configured")

        monkeypatch.setattr("routers.uploads.upload_to_blob", failing_upload)

        response = client.post("/api/upload", files=[("files", ("a.pdf", b"x", "application/pdf"))])

        assert response.status_code == 502

    def test_upload_does_not_block_event_loop(self, monkeypatch) -> None:
        def slow_upload(file, container, user_id):
            time.sleep(0.5)
            return f"https://acct.blob.core.windows.net/{container}/{user_id}/{file.filename}"

        monkeypatch.setattr("routers.uploads.upload_to_blob", slow_upload)

        async def run() -> float:
            longest_gap = 0.0
            done = asyncio.Event()

            async def ticker() -> None:
                nonlocal longest_gap
                last = time.monotonic()
                while not done.is_set():
                    await asyncio.sleep(0.05)
                    now = time.monotonic()
                    longest_gap = max(longest_gap, now - last)
                    last = now

            tick_task = asyncio.create_task(ticker())
            upload = UploadFile(file=BytesIO(b"%PDF-1.4"), filename="a.pdf")
            response = await uploads.upload_files(files=[upload], user_id="user-1")
            done.set()
            await tick_task
            assert response.urls[0].endswith("/user-1/a.pdf")
            return longest_gap

        assert asyncio.run(run()) < 0.2
