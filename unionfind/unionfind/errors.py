class UnionFindError(Exception):
    """Base class for errors raised by the unionfind package."""


class ElementError(UnionFindError, TypeError):
    """Raised when a value outside the integer element domain is used as an element."""
    def __init__(self, value, message: str | None = None):
        if message is None:
            message = f"Elements must be integers, got {type(value).__name__}: {value!r}"
        super().__init__(message)
        self.value = value


class EdgeListError(UnionFindError, ValueError):
    """Raised when an edge table cannot be read as pairs of elements."""
    def __init__(self, message: str, *, row: int | None = None, cause: Exception | None = None):
        if row is not None:
            message = f"{message} [row={row}]"
        super().__init__(message)
        self.row = row
        self.cause = cause


class ConfigError(UnionFindError, ValueError):
    """Raised when a configuration file holds an unusable value."""
    def __init__(self, message: str, *, path: str | None = None):
        if path:
            message = f"{message} [file={path}]"
        super().__init__(message)
        self.path = path
