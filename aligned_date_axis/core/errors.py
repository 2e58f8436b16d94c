"""Exceptions raised by the date axis."""


class ConfigurationError(ValueError):
    """Raised when an axis is configured inconsistently.

    Invalid configuration fails fast at the point it is set (or when the
    render pass is built from it) instead of silently degrading.
    """
