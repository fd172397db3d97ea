import logging
import sys
from collections.abc import Iterator
from contextlib import contextmanager
from contextvars import ContextVar

_request_id: ContextVar[str | None] = ContextVar("civicly_request_id", default=None)


class Log:
    """Centralized logging with structured format.

    Messages logged inside ``Log.request(...)`` are prefixed with the request
    id so lines from concurrent analyses can be told apart.
    """

    _logger: logging.Logger = logging.getLogger("civicly")

    @classmethod
    def configure(cls, log_level: str) -> None:
        """Configure the logger with the specified level and stdout handler."""
        cls._logger.setLevel(log_level.upper())
        if not cls._logger.handlers:
            handler = logging.StreamHandler(sys.stdout)
            handler.setFormatter(
                logging.Formatter("%(asctime)s [%(levelname)s] %(message)s")
            )
            cls._logger.addHandler(handler)

    @classmethod
    @contextmanager
    def request(cls, request_id: str) -> Iterator[None]:
        """Tag every message logged in this context with request_id."""
        token = _request_id.set(request_id)
        try:
            yield
        finally:
            _request_id.reset(token)

    @classmethod
    def current_request_id(cls) -> str | None:
        return _request_id.get()

    @classmethod
    def info(cls, message: str, **kwargs: object) -> None:
        """Log an info message."""
        cls._logger.info(cls._prefixed(message), extra=cls._extra(kwargs))

    @classmethod
    def error(cls, message: str, **kwargs: object) -> None:
        """Log an error message."""
        cls._logger.error(cls._prefixed(message), extra=cls._extra(kwargs))

    @classmethod
    def warning(cls, message: str, **kwargs: object) -> None:
        """Log a warning message."""
        cls._logger.warning(cls._prefixed(message), extra=cls._extra(kwargs))

    @classmethod
    def debug(cls, message: str, **kwargs: object) -> None:
        """Log a debug message."""
        cls._logger.debug(cls._prefixed(message), extra=cls._extra(kwargs))

    @staticmethod
    def _prefixed(message: str) -> str:
        request_id = _request_id.get()
        return f"[req {request_id}] {message}" if request_id else message

    @staticmethod
    def _extra(kwargs: dict[str, object]) -> dict[str, object]:
        request_id = _request_id.get()
        if request_id is None:
            return kwargs
        return {"request_id": request_id, **kwargs}
