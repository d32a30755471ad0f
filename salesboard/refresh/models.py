from dataclasses import dataclass, field

from salesboard.extraction.models import ExtractedMetrics
from salesboard.sources import SourceKey


@dataclass
class RefreshResult:
    """Outcome of one refresh cycle over all sources.

    ``results`` holds None for every source whose pipeline failed, with the
    failure message collected in ``errors``.
    """

    results: dict[SourceKey, ExtractedMetrics | None] = field(default_factory=dict)
    errors: list[str] = field(default_factory=list)

    @property
    def succeeded(self) -> list[SourceKey]:
        return [source for source, metrics in self.results.items() if metrics is not None]
