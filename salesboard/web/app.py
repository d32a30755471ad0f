from pathlib import Path
from typing import Any

from fastapi import FastAPI, Request
from fastapi.responses import HTMLResponse
from fastapi.templating import Jinja2Templates

from salesboard.config.settings import Settings
from salesboard.database.models import SnapshotRecord
from salesboard.database.repositories.snapshot_repository import SnapshotRepository
from salesboard.logging.logger import Log
from salesboard.refresh.models import RefreshResult
from salesboard.refresh.refresher import Refresher
from salesboard.sources import SourceKey
from salesboard.web.formatting import format_currency, format_number, format_timestamp

_TEMPLATES_DIR = Path(__file__).parent / "templates"


def snapshot_to_dict(record: SnapshotRecord | None) -> dict[str, Any] | None:
    if record is None:
        return None
    return {
        "source": record.source,
        "total_lives_sold": record.total_lives_sold,
        "amount_received": record.amount_received,
        "monthly_average": record.monthly_average,
        "last_updated": record.last_updated.isoformat() if record.last_updated else None,
    }


def refresh_result_to_dict(result: RefreshResult) -> dict[str, Any]:
    payload: dict[str, Any] = {
        source.value.lower(): (
            {
                "total_lives_sold": metrics.total_lives_sold,
                "amount_received": metrics.amount_received,
                "monthly_average": metrics.monthly_average,
            }
            if metrics is not None
            else None
        )
        for source, metrics in result.results.items()
    }
    payload["errors"] = list(result.errors)
    return payload


def create_app(
    refresher: Refresher,
    snapshot_repo: SnapshotRepository,
    settings: Settings,
) -> FastAPI:
    """Build the dashboard application around its collaborators."""
    app = FastAPI(title="Salesboard")
    templates = Jinja2Templates(directory=str(_TEMPLATES_DIR))
    templates.env.filters["number"] = format_number
    templates.env.filters["currency"] = format_currency
    templates.env.filters["timestamp"] = format_timestamp

    @app.get("/", response_class=HTMLResponse)
    def dashboard(request: Request) -> HTMLResponse:
        data = snapshot_repo.get_dashboard_data()
        sections = [
            {"source": SourceKey.SOURCE_A, "snapshot": data.source_a, "accent": "blue"},
            {"source": SourceKey.SOURCE_B, "snapshot": data.source_b, "accent": "orange"},
        ]
        return templates.TemplateResponse(
            request,
            "dashboard.html",
            {
                "sections": sections,
                "refresh_minutes": max(1, settings.refresh_interval_seconds // 60),
            },
        )

    @app.get("/api/dashboard")
    def dashboard_data() -> dict[str, Any]:
        data = snapshot_repo.get_dashboard_data()
        return {
            SourceKey.SOURCE_A.value.lower(): snapshot_to_dict(data.source_a),
            SourceKey.SOURCE_B.value.lower(): snapshot_to_dict(data.source_b),
        }

    @app.post("/api/refresh")
    def manual_refresh() -> dict[str, Any]:
        Log.info("Manual refresh requested")
        return refresh_result_to_dict(refresher.refresh_all())

    @app.get("/health")
    def health() -> dict[str, str]:
        return {"status": "ok"}

    return app
