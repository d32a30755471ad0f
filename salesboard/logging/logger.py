import logging
import sys

_FORMAT = "%(asctime)s [%(levelname)s] [%(threadName)s] %(message)s"

# Libraries that log every request at INFO; the refresh loop would flood stdout.
_NOISY_LOGGERS = ("httpx", "httpcore")


class Log:
    """Process-wide logger shared by the refresh loop and the dashboard.

    Refreshes run on worker threads, so records carry the thread name.
    """

    _logger: logging.Logger = logging.getLogger("salesboard")

    @classmethod
    def configure(cls, log_level: str) -> None:
        level = log_level.upper()
        cls._logger.setLevel(level)
        if not cls._logger.handlers:
            handler = logging.StreamHandler(sys.stdout)
            handler.setFormatter(logging.Formatter(_FORMAT))
            cls._logger.addHandler(handler)
        cls._logger.propagate = False
        for name in _NOISY_LOGGERS:
            logging.getLogger(name).setLevel(max(logging.WARNING, cls._logger.level))

    @classmethod
    def info(cls, message: str, **kwargs: object) -> None:
        cls._logger.info(message, extra=kwargs)

    @classmethod
    def error(cls, message: str, **kwargs: object) -> None:
        cls._logger.error(message, extra=kwargs)

    @classmethod
    def exception(cls, message: str, **kwargs: object) -> None:
        """Log an error with the traceback of the exception being handled."""
        cls._logger.exception(message, extra=kwargs)

    @classmethod
    def warning(cls, message: str, **kwargs: object) -> None:
        cls._logger.warning(message, extra=kwargs)

    @classmethod
    def debug(cls, message: str, **kwargs: object) -> None:
        cls._logger.debug(message, extra=kwargs)
