import pytest

from salesboard.database.repositories.snapshot_repository import SnapshotRepository
from salesboard.extraction.models import ExtractedMetrics
from salesboard.sources import SourceKey


@pytest.mark.integration
class TestSnapshotRepositoryUpsert:
    def test_inserts_new_snapshot(self, clean_snapshots: None) -> None:
        repo = SnapshotRepository()

        repo.upsert(SourceKey.SOURCE_A, ExtractedMetrics(16, 414.96, 51.87))

        record = repo.find_by_source(SourceKey.SOURCE_A)
        assert record is not None
        assert record.total_lives_sold == 16
        assert record.amount_received == pytest.approx(414.96)
        assert record.monthly_average == pytest.approx(51.87)
        assert record.last_updated is not None

    def test_overwrites_existing_snapshot(self, clean_snapshots: None, db_conn) -> None:
        repo = SnapshotRepository()
        repo.upsert(SourceKey.SOURCE_A, ExtractedMetrics(1, 1.0, 1.0))
        first = repo.find_by_source(SourceKey.SOURCE_A)

        repo.upsert(SourceKey.SOURCE_A, ExtractedMetrics(2, 2.0, 2.0))

        second = repo.find_by_source(SourceKey.SOURCE_A)
        assert second is not None and first is not None
        assert second.total_lives_sold == 2
        assert second.last_updated >= first.last_updated
        with db_conn.cursor() as cur:
            cur.execute(
                "SELECT COUNT(*) FROM dashboard_snapshots WHERE source = %s",
                (SourceKey.SOURCE_A.value,),
            )
            row = cur.fetchone()
        assert row is not None
        assert row[0] == 1


@pytest.mark.integration
class TestSnapshotRepositoryDashboard:
    def test_returns_none_for_missing_source(self, clean_snapshots: None) -> None:
        repo = SnapshotRepository()
        repo.upsert(SourceKey.SOURCE_B, ExtractedMetrics(3, 0.0, 1.5))

        data = repo.get_dashboard_data()

        assert data.source_a is None
        assert data.source_b is not None
        assert data.source_b.source == "INDICACAO"
