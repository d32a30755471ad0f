class FetchError(Exception):
    """Base exception for all sheet fetch errors."""


class UnknownSourceError(FetchError):
    """Raised when no URL is configured for a source."""


class TransportError(FetchError):
    """Raised when the remote document cannot be reached (network, timeout)."""


class RemoteFetchError(FetchError):
    """Raised when the remote server answers with a non-success status."""

    def __init__(self, status_code: int, status_text: str) -> None:
        super().__init__(f"Failed to fetch data: {status_code} {status_text}".rstrip())
        self.status_code = status_code
        self.status_text = status_text
