from concurrent.futures import ThreadPoolExecutor

from salesboard.database.repositories.snapshot_repository import SnapshotRepository
from salesboard.extraction.extractor import extract
from salesboard.extraction.models import ExtractedMetrics
from salesboard.fetch.base import BaseSheetFetcher
from salesboard.logging.logger import Log
from salesboard.refresh.models import RefreshResult
from salesboard.sources import SourceKey


class Refresher:
    """Fetch, extract and store the snapshot of every source.

    Sources run in parallel and fail independently.
    """

    def __init__(
        self,
        fetcher: BaseSheetFetcher,
        snapshot_repo: SnapshotRepository,
        max_workers: int = 2,
    ) -> None:
        self._fetcher = fetcher
        self._snapshot_repo = snapshot_repo
        self._max_workers = max(1, max_workers)

    def refresh_source(self, source: SourceKey) -> ExtractedMetrics:
        """Run the pipeline for one source. Errors propagate to the caller."""
        raw_document = self._fetcher.fetch(source)
        metrics = extract(raw_document)
        self._snapshot_repo.upsert(source, metrics)
        Log.info(
            f"Stored snapshot for {source.value}: "
            f"lives={metrics.total_lives_sold} "
            f"received={metrics.amount_received} "
            f"average={metrics.monthly_average}"
        )
        return metrics

    def refresh_all(self) -> RefreshResult:
        """Refresh every known source; collect per-source failures."""
        sources = list(SourceKey)
        result = RefreshResult()
        with ThreadPoolExecutor(max_workers=min(len(sources), self._max_workers)) as executor:
            futures = {source: executor.submit(self.refresh_source, source) for source in sources}
            for source, future in futures.items():
                try:
                    result.results[source] = future.result()
                except Exception as exc:
                    Log.error(f"Error fetching data for {source.value}: {exc}")
                    result.results[source] = None
                    result.errors.append(f"{source.value}: {exc}")
        Log.info(
            f"Refresh finished: {len(result.succeeded)}/{len(sources)} sources updated"
        )
        return result
