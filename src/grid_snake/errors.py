"""Exception types for the grid snake engine."""


class ConfigurationError(ValueError):
    """Raised when an engine or grid is built from invalid parameters."""
