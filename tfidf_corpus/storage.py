"""Shared sqlite connection handed to the components that need storage."""

import logging
import sqlite3
import threading

from tfidf_corpus.errors import StorageError

logger = logging.getLogger(__name__)


class StorageConnection:
    """Thin wrapper around a sqlite3 connection whose lock serializes statements."""

    def __init__(self, database):
        self.database = database
        try:
            self._conn = sqlite3.connect(database, check_same_thread=False)
            self._conn.execute("PRAGMA foreign_keys = ON")
        except sqlite3.Error as e:
            raise StorageError("Could not open database %r: %s" % (database, e)) from e
        self.lock = threading.RLock()
        self.closed = False

    def execute(self, sql, params=()):
        """Run one statement and commit; returns the fetched rows."""
        with self.lock:
            try:
                cursor = self._conn.execute(sql, params)
                rows = cursor.fetchall()
                self._conn.commit()
            except sqlite3.Error as e:
                raise StorageError("Statement failed: %s" % e) from e
        return rows

    def close(self):
        with self.lock:
            if not self.closed:
                self._conn.close()
                self.closed = True


class ConnectionProvider:
    """Creates the shared StorageConnection on first use and keeps it.

    Build one provider at process start and pass it to whatever needs
    storage. Every get_shared_connection() call on the same provider
    returns the same StorageConnection object until close() is called.
    """

    def __init__(self, database=":memory:"):
        self.database = database
        self._connection = None
        self._lock = threading.Lock()

    def get_shared_connection(self):
        """Return the shared connection, opening it on the first call."""
        connection = self._connection
        if connection is not None:
            return connection
        with self._lock:
            if self._connection is None:
                self._connection = StorageConnection(self.database)
                logger.info("Opened storage connection to %s", self.database)
            return self._connection

    def close(self):
        """Close the shared connection; the next get reopens it."""
        with self._lock:
            if self._connection is not None:
                self._connection.close()
                self._connection = None
                logger.info("Closed storage connection to %s", self.database)

    def __enter__(self):
        return self

    def __exit__(self, exc_type, exc, tb):
        self.close()
        return False
