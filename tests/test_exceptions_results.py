"""Tests for the exception hierarchy and fetch results."""

import pytest

from exceptions import DataFetchFailure, PropertyManagerError, StorageError
from services.results import FetchResult


class TestExceptionHierarchy:
    """Test exception inheritance chain."""

    def test_base_is_exception(self) -> None:
        assert isinstance(PropertyManagerError("test"), Exception)

    def test_data_fetch_failure_is_base(self) -> None:
        assert isinstance(DataFetchFailure("test"), PropertyManagerError)

    def test_storage_error_is_base(self) -> None:
        assert isinstance(StorageError("test"), PropertyManagerError)

    def test_exception_message(self) -> None:
        assert str(DataFetchFailure("Could not load properties")) == "Could not load properties"


class TestFetchResult:
    def test_success(self) -> None:
        result = FetchResult.success([1, 2])
        assert result.ok
        assert result.error is None
        assert result.unwrap_or([]) == [1, 2]

    def test_failure(self) -> None:
        error = DataFetchFailure("down")
        result = FetchResult.failure(error)
        assert not result.ok
        assert result.error is error
        assert result.unwrap_or([]) == []

    def test_success_with_none_uses_default(self) -> None:
        assert FetchResult.success(None).unwrap_or("default") == "default"

    def test_frozen(self) -> None:
        result = FetchResult.success([])
        with pytest.raises(AttributeError):
            result.data = [1]
