"""Process-wide holder for the most recent ParseResult."""

import logging
import threading

from cmdline_args.parsing.models import ParseResult


class ResultCache:
    """
    Thread-safe holder of the last ParseResult written

    get_boolean reads from here when the caller does not pass a result,
    so a program can parse once at startup and query flags anywhere.

    Thread Safety:
    - Uses threading.Lock around every read and write
    - Last writer wins; readers never see a partially stored result
    """

    def __init__(self, logger: logging.Logger | None = None):
        self.logger = logger or logging.getLogger(__name__)
        self._result: ParseResult | None = None
        self._lock = threading.Lock()
        self._stores = 0

    def store(self, result: ParseResult) -> None:
        with self._lock:
            self._result = result
            self._stores += 1
            stores = self._stores
        self.logger.debug(f"Cached parse result #{stores}")

    def get(self) -> ParseResult | None:
        with self._lock:
            return self._result

    def clear(self) -> None:
        with self._lock:
            self._result = None

    @property
    def store_count(self) -> int:
        """Number of results stored since the cache was created."""
        with self._lock:
            return self._stores


_cache = ResultCache()


def get_cache() -> ResultCache:
    """Return the shared cache used by parse_args and get_boolean."""
    return _cache
