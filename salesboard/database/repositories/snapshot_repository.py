import psycopg
from psycopg.rows import dict_row

from salesboard.database.connection import get_connection
from salesboard.database.exceptions import SnapshotStorageError
from salesboard.database.models import DashboardData, SnapshotRecord
from salesboard.extraction.models import ExtractedMetrics
from salesboard.sources import SourceKey


class SnapshotRepository:
    """Database operations for the dashboard_snapshots table."""

    def ensure_schema(self) -> None:
        """Create the snapshots table if it does not exist yet."""
        with get_connection() as conn:
            conn.execute(
                """
                CREATE TABLE IF NOT EXISTS dashboard_snapshots (
                    source TEXT PRIMARY KEY,
                    total_lives_sold BIGINT NOT NULL DEFAULT 0,
                    amount_received DOUBLE PRECISION NOT NULL DEFAULT 0,
                    monthly_average DOUBLE PRECISION NOT NULL DEFAULT 0,
                    last_updated TIMESTAMPTZ NOT NULL DEFAULT NOW()
                )
                """
            )
            conn.commit()

    def upsert(self, source: SourceKey, metrics: ExtractedMetrics) -> None:
        """Insert or overwrite the snapshot of a source.

        ``last_updated`` is assigned by the database server.

        Raises:
            SnapshotStorageError: if the write fails.
        """
        try:
            with get_connection() as conn:
                conn.execute(
                    """
                    INSERT INTO dashboard_snapshots
                        (source, total_lives_sold, amount_received,
                         monthly_average, last_updated)
                    VALUES (%s, %s, %s, %s, NOW())
                    ON CONFLICT (source) DO UPDATE
                    SET total_lives_sold = EXCLUDED.total_lives_sold,
                        amount_received = EXCLUDED.amount_received,
                        monthly_average = EXCLUDED.monthly_average,
                        last_updated = NOW()
                    """,
                    (
                        source.value,
                        metrics.total_lives_sold,
                        metrics.amount_received,
                        metrics.monthly_average,
                    ),
                )
                conn.commit()
        except psycopg.Error as exc:
            raise SnapshotStorageError(
                f"Failed to store snapshot for {source.value}: {exc}"
            ) from exc

    def find_by_source(self, source: SourceKey) -> SnapshotRecord | None:
        with get_connection() as conn:
            with conn.cursor(row_factory=dict_row) as cur:
                cur.execute(
                    """
                    SELECT source, total_lives_sold, amount_received,
                           monthly_average, last_updated
                    FROM dashboard_snapshots
                    WHERE source = %s
                    """,
                    (source.value,),
                )
                row = cur.fetchone()

        if row is None:
            return None

        return SnapshotRecord(
            source=row["source"],
            total_lives_sold=row["total_lives_sold"],
            amount_received=row["amount_received"],
            monthly_average=row["monthly_average"],
            last_updated=row["last_updated"],
        )

    def get_dashboard_data(self) -> DashboardData:
        """Read the latest snapshot of both sources."""
        return DashboardData(
            source_a=self.find_by_source(SourceKey.SOURCE_A),
            source_b=self.find_by_source(SourceKey.SOURCE_B),
        )
