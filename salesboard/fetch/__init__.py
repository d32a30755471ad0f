from salesboard.fetch.base import BaseSheetFetcher
from salesboard.fetch.exceptions import (
    FetchError,
    RemoteFetchError,
    TransportError,
    UnknownSourceError,
)
from salesboard.fetch.httpx_adapter import HttpxSheetFetcher

__all__ = [
    "BaseSheetFetcher",
    "FetchError",
    "HttpxSheetFetcher",
    "RemoteFetchError",
    "TransportError",
    "UnknownSourceError",
]
