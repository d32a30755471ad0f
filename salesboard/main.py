import threading

import uvicorn

from salesboard.config.settings import Settings
from salesboard.database.connection import close_pool, init_pool
from salesboard.database.repositories.snapshot_repository import SnapshotRepository
from salesboard.fetch.httpx_adapter import HttpxSheetFetcher
from salesboard.logging.logger import Log
from salesboard.refresh.refresher import Refresher
from salesboard.refresh.scheduler import Scheduler
from salesboard.web.app import create_app


def main() -> None:
    """Entry point: initialize pool -> start refresh loop -> serve dashboard."""
    settings = Settings()
    Log.configure(settings.log_level)
    init_pool(settings)
    scheduler: Scheduler | None = None
    scheduler_thread: threading.Thread | None = None

    try:
        snapshot_repo = SnapshotRepository()
        snapshot_repo.ensure_schema()
        fetcher = HttpxSheetFetcher.from_settings(settings)
        refresher = Refresher(fetcher, snapshot_repo, settings.refresh_max_workers)
        scheduler = Scheduler(refresher, settings)
        scheduler_thread = threading.Thread(
            target=scheduler.run, name="refresh-scheduler", daemon=True
        )
        scheduler_thread.start()

        app = create_app(refresher, snapshot_repo, settings)
        uvicorn.run(
            app,
            host=settings.dashboard_host,
            port=settings.dashboard_port,
            log_level=settings.log_level.lower(),
        )
    finally:
        if scheduler is not None and scheduler_thread is not None:
            scheduler.stop()
            scheduler_thread.join(timeout=settings.shutdown_timeout_seconds)
            if scheduler_thread.is_alive():
                Log.warning("Refresh still running at shutdown, closing pool anyway")
        close_pool()


if __name__ == "__main__":
    main()
