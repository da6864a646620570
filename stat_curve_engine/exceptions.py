"""Project-wide exception types."""

class StatEngineError(Exception):
    """Base exception for all engine errors."""


class DomainError(StatEngineError, ValueError):
    """Raised when a math function is called outside its mathematical domain."""


class ParameterError(StatEngineError, ValueError):
    """Raised when distribution parameters or sample counts are invalid."""


class ResourceLimitError(StatEngineError):
    """Raised when a run would exceed configured resource limits."""


class ConfigError(StatEngineError):
    """Raised when configuration is missing or malformed."""


class ConfigValidationError(ConfigError):
    """Raised when validation fails for supplied configuration."""


class QueryDecodeError(ConfigValidationError):
    """Raised when a URL query value cannot be decoded into engine inputs."""
