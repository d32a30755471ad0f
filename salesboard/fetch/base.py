from abc import ABC, abstractmethod

from salesboard.sources import SourceKey


class BaseSheetFetcher(ABC):
    """Contract for retrieving the raw CSV export of a source."""

    @abstractmethod
    def fetch(self, source: SourceKey) -> str:
        """Download the CSV export for ``source``.

        Returns:
            The response body as text, unmodified.

        Raises:
            UnknownSourceError: if no URL is configured for the source.
            RemoteFetchError: on a non-success HTTP status.
            TransportError: on network-level failure.
        """
