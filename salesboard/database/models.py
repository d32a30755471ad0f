from dataclasses import dataclass
from datetime import datetime


@dataclass
class SnapshotRecord:
    """Represents a row from the dashboard_snapshots table."""

    source: str
    total_lives_sold: int
    amount_received: float
    monthly_average: float
    last_updated: datetime | None = None


@dataclass
class DashboardData:
    """Latest snapshot of each known source, None when never stored."""

    source_a: SnapshotRecord | None = None
    source_b: SnapshotRecord | None = None
