"""Custom exceptions for the preview server."""


class PreviewError(Exception):
    """Base exception for preview server errors."""

    def __init__(
        self,
        message: str,
        page: str = None,
        file_path: str = None,
    ):
        self.page = page
        self.file_path = file_path
        super().__init__(message)


class PageLoadError(PreviewError):
    """Raised when a page file cannot be read."""

    pass


class ConfigurationError(PreviewError):
    """Raised when the server configuration is invalid."""

    pass
