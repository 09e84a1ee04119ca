import logging
import sqlite3
import threading
from pathlib import Path
from contextlib import contextmanager
from typing import Iterator, Optional

from app.errors import InternalError

log = logging.getLogger(__name__)


class Database:
    """Process-wide store handle.

    Owns a single sqlite connection. Open it once at startup (or use it as a
    context manager) and close it at shutdown.
    """

    def __init__(self, path: str | Path):
        self.path = str(path)
        self._conn: Optional[sqlite3.Connection] = None
        self._lock = threading.Lock()

    def open(self) -> "Database":
        if self._conn is not None:
            return self
        if self.path != ":memory:":
            Path(self.path).parent.mkdir(parents=True, exist_ok=True)
        conn = sqlite3.connect(self.path, check_same_thread=False)
        conn.row_factory = sqlite3.Row
        conn.execute("PRAGMA journal_mode=WAL")
        self._conn = conn
        log.info("Database opened: %s", self.path)
        return self

    def close(self) -> None:
        if self._conn is None:
            return
        self._conn.close()
        self._conn = None
        log.info("Database connection closed")

    def __enter__(self) -> "Database":
        return self.open()

    def __exit__(self, *exc) -> None:
        self.close()

    @contextmanager
    def connection(self) -> Iterator[sqlite3.Connection]:
        """Yield the connection inside one transaction.

        Commits on success, rolls back on any exception. sqlite failures
        surface as InternalError.
        """
        if self._conn is None:
            raise InternalError("Database is not open")
        with self._lock:
            conn = self._conn
            try:
                yield conn
                conn.commit()
            except sqlite3.Error as exc:
                conn.rollback()
                log.exception("Database operation failed")
                raise InternalError("Database operation failed") from exc
            except Exception:
                conn.rollback()
                raise
