from datetime import datetime, timezone
from unittest.mock import MagicMock

from fastapi.testclient import TestClient

from salesboard.database.models import DashboardData, SnapshotRecord
from salesboard.extraction.models import ExtractedMetrics
from salesboard.refresh.models import RefreshResult
from salesboard.sources import SourceKey
from salesboard.web.app import create_app


def _make_client(data: DashboardData | None = None) -> tuple[TestClient, MagicMock, MagicMock]:
    mock_refresher = MagicMock()
    mock_repo = MagicMock()
    mock_repo.get_dashboard_data.return_value = data or DashboardData()
    settings = MagicMock(refresh_interval_seconds=300)
    app = create_app(mock_refresher, mock_repo, settings)
    return TestClient(app), mock_refresher, mock_repo


def _snapshot() -> SnapshotRecord:
    return SnapshotRecord(
        source="SIMULADOR",
        total_lives_sold=1250,
        amount_received=12345.67,
        monthly_average=51.87,
        last_updated=datetime(2026, 10, 19, 12, 0, tzinfo=timezone.utc),
    )


class TestDashboardPage:
    def test_renders_formatted_snapshot(self) -> None:
        client, _refresher, _repo = _make_client(DashboardData(source_a=_snapshot()))

        response = client.get("/")

        assert response.status_code == 200
        assert "1.250" in response.text
        assert "R$ 12.345,67" in response.text
        assert "R$ 51,87" in response.text
        assert "Última atualização" in response.text
        assert "a cada 5 minutos" in response.text

    def test_renders_zeros_without_snapshots(self) -> None:
        client, _refresher, _repo = _make_client()

        response = client.get("/")

        assert response.status_code == 200
        assert "R$ 0,00" in response.text
        assert "INDICAÇÃO" in response.text
        assert "Última atualização" not in response.text


class TestDashboardApi:
    def test_returns_both_sources(self) -> None:
        client, _refresher, _repo = _make_client(DashboardData(source_a=_snapshot()))

        body = client.get("/api/dashboard").json()

        assert body["simulador"]["total_lives_sold"] == 1250
        assert body["simulador"]["last_updated"].startswith("2026-10-19T12:00:00")
        assert body["indicacao"] is None


class TestManualRefresh:
    def test_triggers_refresh_and_reports_errors(self) -> None:
        client, mock_refresher, _repo = _make_client()
        mock_refresher.refresh_all.return_value = RefreshResult(
            results={
                SourceKey.SOURCE_A: ExtractedMetrics(16, 414.96, 51.87),
                SourceKey.SOURCE_B: None,
            },
            errors=["INDICACAO: Failed to fetch data: 404 Not Found"],
        )

        response = client.post("/api/refresh")

        assert response.status_code == 200
        mock_refresher.refresh_all.assert_called_once()
        body = response.json()
        assert body["simulador"]["total_lives_sold"] == 16
        assert body["indicacao"] is None
        assert body["errors"] == ["INDICACAO: Failed to fetch data: 404 Not Found"]


class TestHealth:
    def test_health(self) -> None:
        client, _refresher, _repo = _make_client()
        assert client.get("/health").json() == {"status": "ok"}
