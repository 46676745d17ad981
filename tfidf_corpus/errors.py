"""Exception hierarchy for TF-IDF corpus scoring."""


class TfIdfError(Exception):
    """Base exception for all tfidf_corpus errors."""


class InvalidArgumentError(TfIdfError, ValueError):
    """Raised when a text argument is missing or is not a string."""


class ConfigurationError(TfIdfError):
    """Raised when the configuration file cannot be read or parsed."""


class StorageError(TfIdfError):
    """Raised when the shared storage connection fails."""


def require_text(text, name="text"):
    """Return text unchanged, or raise InvalidArgumentError if it is not a str."""
    if text is None:
        raise InvalidArgumentError("%s must not be None" % name)
    if not isinstance(text, str):
        raise InvalidArgumentError(
            "%s must be a str, got %s" % (name, type(text).__name__)
        )
    return text
