import threading

from salesboard.config.settings import Settings
from salesboard.logging.logger import Log
from salesboard.refresh.refresher import Refresher


class Scheduler:
    """Refresh loop: refresh -> sleep interval -> repeat."""

    def __init__(self, refresher: Refresher, settings: Settings) -> None:
        self._refresher = refresher
        self._settings = settings
        self._stop_event = threading.Event()

    def run(self, max_runs: int | None = None) -> None:
        """Main loop. Runs until stopped or interrupted.

        If max_runs is set, stop after that many refresh cycles (for testing).
        """
        Log.info(
            f"Scheduler started, refreshing every "
            f"{self._settings.refresh_interval_seconds}s"
        )
        runs = 0
        try:
            while not self._stop_event.is_set():
                self._run_once()
                runs += 1
                if max_runs is not None and runs >= max_runs:
                    break
                self._stop_event.wait(self._settings.refresh_interval_seconds)
        except KeyboardInterrupt:
            Log.info("Scheduler shutting down gracefully")

    def stop(self) -> None:
        self._stop_event.set()

    def _run_once(self) -> None:
        """Run one refresh cycle. Unexpected errors never end the loop."""
        try:
            result = self._refresher.refresh_all()
        except Exception as exc:
            Log.exception(f"Refresh cycle failed, will retry: {exc}")
            return
        for error in result.errors:
            Log.warning(f"Refresh error: {error}")
