class ConfigurationError(ValueError):
    """Raised when a room shape or allocation parameter is unusable."""
