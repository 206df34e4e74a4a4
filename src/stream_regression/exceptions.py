"""Project-specific exceptions."""


class StreamRegressionError(Exception):
    """Base exception for the project."""


class ConfigError(StreamRegressionError):
    """Raised when runtime configuration is missing or invalid."""


class DatasetReadError(StreamRegressionError, OSError):
    """Raised when a dataset cannot be opened or read as delimited rows."""


class RenderError(StreamRegressionError):
    """Raised when a relationship plot cannot be drawn or written."""
