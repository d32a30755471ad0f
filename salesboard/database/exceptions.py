class SnapshotStorageError(Exception):
    """Raised when a snapshot cannot be read from or written to the database."""
