# exceptions.py
"""Custom exception hierarchy for the property management backend."""


class PropertyManagerError(Exception):
     """Base exception for all application errors."""


class DataFetchFailure(PropertyManagerError):
     """Raised when the database could not be reached or a read query failed."""


class StorageError(PropertyManagerError):
     """Raised when a blob storage upload or delete fails."""
