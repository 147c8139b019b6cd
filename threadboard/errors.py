class InvalidCursorError(ValueError):
    """Raised when an ``after``/``before`` cursor is not a canonical timestamp."""

    def __init__(self, cursor):
        self.cursor = cursor
        super().__init__(f"Invalid cursor: {cursor!r}")


class PaginationValidationError(ValueError):
    """Raised for page bounds that are negative or not integers."""


class StorageUnavailableError(Exception):
    """The persistence layer failed; the original error is chained as ``__cause__``."""


class NotFoundError(LookupError):
    pass


class PermissionDeniedError(Exception):
    pass
