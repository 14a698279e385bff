"""Configuration error taxonomy for fieldcore.

Validation rejections are never raised; they are handled inside the engine
(revert plus optional report). The errors below signal programming mistakes
and are allowed to propagate to the host.
"""


class ConfigurationError(Exception):
    """A field was configured in a way that cannot work."""
    pass


class UnsupportedTypeError(ConfigurationError):
    """No default parser exists for the field kind and none was supplied."""
    pass


class BuilderError(ConfigurationError):
    """The builder was asked to build without a required part."""
    pass


class EngineDisposedError(ConfigurationError):
    """An event was delivered to an engine after it was disposed."""
    pass


class ConfigLoadError(ConfigurationError):
    """A field definition file could not be turned into engines."""

    def __init__(self, message: str, source: str | None = None):
        super().__init__(message)
        self.source = source

    def __str__(self) -> str:
        base = super().__str__()
        return f"{self.source}: {base}" if self.source else base
