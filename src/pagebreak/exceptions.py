"""Custom exceptions for pagination."""


class PagebreakError(Exception):
    """Base exception for all pagination errors."""

    def __init__(self, message: str, *args, **kwargs):
        self.message = message
        super().__init__(message, *args, **kwargs)


class ConfigurationError(PagebreakError):
    """Raised when a pagination container carries invalid attributes."""

    def __init__(self, message: str, errors: list | None = None, *args, **kwargs):
        self.errors = errors or []
        super().__init__(message, *args, **kwargs)


class OutOfBoundsError(PagebreakError):
    """Raised when a page would be written outside of the output directory."""

    def __init__(self, relative_path: str, resolved_path: str):
        self.relative_path = relative_path
        self.resolved_path = resolved_path
        super().__init__(
            f"Error on page {relative_path}: Pagination URL resolves outside "
            f"of output directory: {resolved_path}"
        )


class InvariantError(PagebreakError):
    """Raised when the document no longer has the structure found at hydration."""

    pass


class SourceNotFoundError(PagebreakError):
    """Raised when the source directory of a batch run does not exist."""

    def __init__(self, path: str):
        self.path = path
        super().__init__(f"Couldn't find source directory: {path}")
