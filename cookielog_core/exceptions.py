"""Custom exceptions for cookie log processing."""


class CookieLogError(Exception):
    """Base exception for all cookie log operations."""
    pass


class SourceError(CookieLogError):
    """Raised when the underlying log stream fails."""
    pass


class SourceReadError(SourceError):
    """Raised when a line cannot be read from the log stream."""
    pass


class SourceCloseError(SourceError):
    """Raised when the log stream cannot be released."""
    pass


class SchemaValidationError(CookieLogError):
    """Raised when the log header is missing or does not match the expected columns."""
    pass


class ConfigError(CookieLogError):
    """Raised when settings cannot be loaded or are invalid."""
    pass


class FileProcessingError(CookieLogError):
    """Raised when the log file cannot be opened for processing."""
    pass
