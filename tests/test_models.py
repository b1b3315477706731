"""Tests for model table naming and schema shape."""

import pytest

from models import Base, Document, MaintenanceRequest, Payment, Property, Tenant, Unit
from models.base import table_name_for


class TestTableNames:
    """Test table names derived from class names."""

    @pytest.mark.parametrize(
        "model,expected",
        [
            (Property, "properties"),
            (Unit, "units"),
            (Tenant, "tenants"),
            (MaintenanceRequest, "maintenance_requests"),
            (Payment, "payments"),
            (Document, "documents"),
        ],
    )
    def test_model_tables(self, model, expected) -> None:
        assert model.__tablename__ == expected

    @pytest.mark.parametrize(
        "class_name,expected",
        [
            ("Survey", "surveys"),
            ("Key", "keys"),
            ("Utility", "utilities"),
            ("Address", "addresses"),
            ("Box", "boxes"),
            ("Lease", "leases"),
            ("RentCharge", "rent_charges"),
        ],
    )
    def test_pluralization(self, class_name, expected) -> None:
        assert table_name_for(class_name) == expected

    def test_metadata_holds_all_tables(self) -> None:
        assert set(Base.metadata.tables) == {
            "properties",
            "units",
            "tenants",
            "maintenance_requests",
            "payments",
            "documents",
        }
