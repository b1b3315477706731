# services/results.py
"""
Explicit success/failure values for reads whose failure is absorbed
rather than raised (the dashboard path).
"""
from dataclasses import dataclass
from typing import Generic, Optional, TypeVar

from exceptions import DataFetchFailure

T = TypeVar("T")


@dataclass(frozen=True)
class FetchResult(Generic[T]):
     """Either ``data`` (ok) or ``error`` (failed), never both."""
     data: Optional[T] = None
     error: Optional[DataFetchFailure] = None

     @classmethod
     def success(cls, data: T) -> "FetchResult[T]":
          return cls(data=data)

     @classmethod
     def failure(cls, error: DataFetchFailure) -> "FetchResult[T]":
          return cls(error=error)

     @property
     def ok(self) -> bool:
          return self.error is None

     def unwrap_or(self, default: T) -> T:
          """Return the data, or ``default`` when the fetch failed."""
          if self.error is not None or self.data is None:
               return default
          return self.data
