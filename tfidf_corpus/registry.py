"""Registry of documents already seen, keyed by content fingerprint."""

from tfidf_corpus.fingerprint import compute_fingerprint

_SCHEMA = """
CREATE TABLE IF NOT EXISTS seen_documents (
    fingerprint TEXT PRIMARY KEY,
    times_seen INTEGER NOT NULL DEFAULT 1
)
"""


class DocumentRegistry:
    """Records fingerprints of registered documents in shared storage.

    Only fingerprints are stored, never document text.
    """

    def __init__(self, connection):
        self.connection = connection
        self.connection.execute(_SCHEMA)

    def record(self, text):
        """Record text; return True if it had not been seen before."""
        fingerprint = compute_fingerprint(text)
        with self.connection.lock:
            seen = self._times_seen(fingerprint)
            if seen:
                self.connection.execute(
                    "UPDATE seen_documents SET times_seen = times_seen + 1 "
                    "WHERE fingerprint = ?",
                    (fingerprint,),
                )
            else:
                self.connection.execute(
                    "INSERT INTO seen_documents (fingerprint) VALUES (?)",
                    (fingerprint,),
                )
        return not seen

    def contains(self, text):
        """True if text has been recorded before."""
        return self._times_seen(compute_fingerprint(text)) > 0

    def times_seen(self, text):
        """How many times text has been recorded."""
        return self._times_seen(compute_fingerprint(text))

    def count(self):
        """Number of distinct documents recorded."""
        rows = self.connection.execute("SELECT COUNT(*) FROM seen_documents")
        return rows[0][0]

    def _times_seen(self, fingerprint):
        rows = self.connection.execute(
            "SELECT times_seen FROM seen_documents WHERE fingerprint = ?",
            (fingerprint,),
        )
        return rows[0][0] if rows else 0
