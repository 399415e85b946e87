class StoreError(Exception):
    """Base class for failures raised by a message store."""


class ValidationError(StoreError):
    """The message was rejected before any I/O happened."""


class NotFoundError(StoreError):
    """The backing file does not exist."""


class CorruptDataError(StoreError):
    """The backing file exists but does not decode to a message list."""


class StorageIOError(StoreError):
    """Reading or writing the backing file failed."""
