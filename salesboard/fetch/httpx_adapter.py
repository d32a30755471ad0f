import httpx

from salesboard.config.settings import Settings
from salesboard.fetch.base import BaseSheetFetcher
from salesboard.fetch.exceptions import RemoteFetchError, TransportError, UnknownSourceError
from salesboard.logging.logger import Log
from salesboard.sources import SourceKey


class HttpxSheetFetcher(BaseSheetFetcher):
    """Fetches published Google Sheets CSV exports over HTTP with httpx."""

    def __init__(
        self,
        urls: dict[SourceKey, str],
        *,
        timeout_seconds: float = 30,
        transport: httpx.BaseTransport | None = None,
    ) -> None:
        self._urls = urls
        self._timeout_seconds = timeout_seconds
        self._transport = transport

    @classmethod
    def from_settings(cls, settings: Settings) -> "HttpxSheetFetcher":
        return cls(
            {
                SourceKey.SOURCE_A: settings.source_a_url,
                SourceKey.SOURCE_B: settings.source_b_url,
            },
            timeout_seconds=settings.fetch_timeout_seconds,
        )

    def resolve_url(self, source: SourceKey) -> str:
        url = self._urls.get(source)
        if not url:
            raise UnknownSourceError(f"Invalid source: {source.value}")
        return url

    def fetch(self, source: SourceKey) -> str:
        url = self.resolve_url(source)
        Log.debug(f"Fetching {source.value} from {url}")
        try:
            with httpx.Client(
                timeout=self._timeout_seconds,
                follow_redirects=True,
                transport=self._transport,
            ) as client:
                response = client.get(url)
        except httpx.RequestError as exc:
            raise TransportError(f"Network error fetching {source.value}: {exc}") from exc

        if not response.is_success:
            raise RemoteFetchError(response.status_code, response.reason_phrase)

        Log.info(f"Fetched {len(response.text)} chars for {source.value}")
        return response.text
