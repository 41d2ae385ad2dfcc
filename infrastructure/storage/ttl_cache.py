"""Thread-safe in-memory key/value container with expiring entries."""
from __future__ import annotations

import logging
import threading
import time
from typing import Any, Callable, Iterator

from domain.interfaces import KeyValueContainer

logger = logging.getLogger(__name__)


class TtlCache(KeyValueContainer):
    """Dictionary whose entries expire ``default_ttl`` seconds after their last write.

    Expired entries are dropped passively on read and actively by
    :meth:`delete_expired`, which a background thread calls every
    ``cleanup_interval`` seconds once :meth:`start` has been called.
    A ``default_ttl`` of ``0`` or less keeps entries forever.
    """

    def __init__(
        self,
        default_ttl: float = 1800.0,
        cleanup_interval: float = 600.0,
        clock: Callable[[], float] = time.monotonic,
        name: str = "cache",
    ) -> None:
        self.default_ttl = default_ttl
        self.cleanup_interval = cleanup_interval
        self.name = name
        self._clock = clock
        self._entries: dict[str, tuple[Any, float | None]] = {}
        self._lock = threading.RLock()
        self._stop = threading.Event()
        self._janitor: threading.Thread | None = None

    def _expires_at(self) -> float | None:
        if self.default_ttl <= 0:
            return None
        return self._clock() + self.default_ttl

    def _live(self, key: str, now: float) -> tuple[bool, Any]:
        entry = self._entries.get(key)
        if entry is None:
            return False, None
        value, expires_at = entry
        if expires_at is not None and now >= expires_at:
            del self._entries[key]
            return False, None
        return True, value

    def get(self, key: str) -> Any | None:
        with self._lock:
            _found, value = self._live(key, self._clock())
            return value

    def __contains__(self, key: object) -> bool:
        if not isinstance(key, str):
            return False
        with self._lock:
            found, _value = self._live(key, self._clock())
            return found

    def set(self, key: str, value: Any) -> None:
        with self._lock:
            self._entries[key] = (value, self._expires_at())

    def update(self, key: str, func: Callable[[Any], Any], default: Any = None) -> Any:
        with self._lock:
            found, current = self._live(key, self._clock())
            value = func(current if found else default)
            self._entries[key] = (value, self._expires_at())
            return value

    def items(self) -> Iterator[tuple[str, Any]]:
        now = self._clock()
        with self._lock:
            snapshot = [
                (key, value)
                for key, (value, expires_at) in self._entries.items()
                if expires_at is None or now < expires_at
            ]
        return iter(snapshot)

    def __len__(self) -> int:
        now = self._clock()
        with self._lock:
            return sum(1 for _value, expires_at in self._entries.values() if expires_at is None or now < expires_at)

    def delete_expired(self) -> int:
        """Drop every expired entry and return how many were removed."""

        now = self._clock()
        with self._lock:
            expired = [
                key
                for key, (_value, expires_at) in self._entries.items()
                if expires_at is not None and now >= expires_at
            ]
            for key in expired:
                del self._entries[key]
        if expired:
            logger.debug("%s: expired %d entries", self.name, len(expired))
        return len(expired)

    def start(self) -> None:
        """Start the background cleanup thread (no-op when already running)."""

        if self.cleanup_interval <= 0 or self._janitor is not None:
            return
        self._stop.clear()
        self._janitor = threading.Thread(
            target=self._run_janitor,
            name=f"{self.name}-janitor",
            daemon=True,
        )
        self._janitor.start()
        logger.info("%s: cleanup every %.0fs, ttl %.0fs", self.name, self.cleanup_interval, self.default_ttl)

    def close(self) -> None:
        if self._janitor is None:
            return
        self._stop.set()
        self._janitor.join(timeout=self.cleanup_interval)
        self._janitor = None

    def _run_janitor(self) -> None:
        while not self._stop.wait(self.cleanup_interval):
            self.delete_expired()


__all__ = ["TtlCache"]
