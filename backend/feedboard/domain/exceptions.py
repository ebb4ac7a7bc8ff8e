"""Domain-specific exceptions — framework-independent."""


class FeedboardError(Exception):
    """Base class for every error raised by the feed core."""


class InvalidInputError(FeedboardError, ValueError):
    """Raised when client-supplied data fails validation.

    The caller has to correct the input; retrying the same request is pointless.
    """

    def __init__(self, message: str = "invalid input", field: str | None = None):
        self.message = message
        self.field = field
        super().__init__(message)


class StoreNotReadyError(FeedboardError):
    """Raised when the article store is used before ``initialize()`` completed."""

    def __init__(self, store: str):
        self.store = store
        super().__init__(f"{store} is not initialized")
