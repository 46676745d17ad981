"""Content fingerprints for deduplicating documents."""

import hashlib

from tfidf_corpus.errors import require_text

FINGERPRINT_LENGTH = 32


def compute_fingerprint(content):
    """Return the 32-character uppercase hex MD5 digest of content.

    The digest is taken over the UTF-8 encoding, so it is defined for every
    str, including "" and non-ASCII text, and is case sensitive.
    """
    require_text(content, "content")
    return hashlib.md5(content.encode("utf-8")).hexdigest().upper()
