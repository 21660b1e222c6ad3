"""Errors raised by place persistence."""


class PersistenceError(RuntimeError):
    """Base class for storage failures surfaced to callers."""


class StorageUnavailableError(PersistenceError):
    """The backing store could not be read or written."""


class QuotaExceededError(PersistenceError):
    """The backing store has no room left for the payload."""


class SerializationError(PersistenceError):
    """Stored data could not be encoded or decoded."""
