"""Analysis error taxonomy. Each error carries a stable error_code and the HTTP status it maps to."""


class AnalysisError(Exception):
    """Base class for every failure surfaced by the analysis entry point."""

    error_code = "ANALYSIS_ERROR"
    http_status = 500

    def __init__(self, message: str, cause: Exception | None = None):
        super().__init__(message)
        self.message = message
        self.cause = cause


class InvalidInput(AnalysisError):
    """Word list or vector mapping cannot be analyzed (e.g. a word has no vector)."""

    error_code = "INVALID_INPUT"
    http_status = 400


class InsufficientWords(InvalidInput):
    """Fewer than the minimum number of words after cleaning."""

    error_code = "INSUFFICIENT_WORDS"

    def __init__(self, count: int, minimum: int):
        super().__init__(f"Need at least {minimum} words to find the odd one out, got {count}")
        self.count = count
        self.minimum = minimum


class InsufficientUniqueWords(InvalidInput):
    """Fewer than the minimum number of distinct words once duplicates are removed."""

    error_code = "INSUFFICIENT_UNIQUE_WORDS"

    def __init__(self, count: int, minimum: int, duplicates_removed: list[str]):
        removed = ", ".join(duplicates_removed)
        super().__init__(
            f"Need at least {minimum} distinct words, got {count} after removing duplicates ({removed})"
        )
        self.count = count
        self.minimum = minimum
        self.duplicates_removed = duplicates_removed


class ProviderNotReady(AnalysisError):
    """Embedding provider has not been initialized and will not initialize itself."""

    error_code = "PROVIDER_NOT_READY"
    http_status = 503


class ProviderInitFailed(AnalysisError):
    """Embedding provider failed to load its model."""

    error_code = "PROVIDER_INIT_FAILED"
    http_status = 503


class EmbeddingFailed(AnalysisError):
    """A word's vector could not be produced; the whole request is aborted."""

    error_code = "EMBEDDING_FAILED"
    http_status = 502

    def __init__(self, word: str | None, message: str, cause: Exception | None = None):
        super().__init__(message, cause=cause)
        self.word = word


class MalformedVector(AnalysisError):
    """Provider returned a vector that breaks the one-dimension-per-request invariant."""

    error_code = "MALFORMED_VECTOR"
    http_status = 500

    def __init__(self, word: str, expected: int, actual: int, reason: str | None = None):
        super().__init__(
            reason or f"Embedding for {word!r} has dimension {actual}, expected {expected}"
        )
        self.word = word
        self.expected = expected
        self.actual = actual


class AnalysisSuperseded(AnalysisError):
    """A newer request from the same session replaced this one; its result is discarded."""

    error_code = "ANALYSIS_SUPERSEDED"
    http_status = 409
