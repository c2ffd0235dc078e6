"""Error taxonomy for a sync run."""


class SyncError(RuntimeError):
    """Base class for sync failures."""


class CatalogFetchError(SyncError):
    """Bulk remote read failed."""


class StorageSetupError(SyncError):
    """Resetting the content root or building its skeleton failed."""


class DetailFetchError(SyncError):
    """Per-photo detail read failed."""

    def __init__(self, public_id: str, message: str) -> None:
        super().__init__(f"{public_id}: {message}")
        self.public_id = public_id


class DetailWriteError(SyncError):
    """Per-photo detail write failed."""

    def __init__(self, public_id: str, message: str) -> None:
        super().__init__(f"{public_id}: {message}")
        self.public_id = public_id


class MalformedRecordError(SyncError, ValueError):
    """A remote record did not have the expected shape."""
