"""Exceptions raised by oatts."""


class OattsError(Exception):
    """Base class for all oatts errors."""


class SpecError(OattsError):
    """The API document could not be loaded, parsed or resolved."""

    def __init__(self, message: str, source: str | None = None):
        self.source = source
        if source:
            message = f"{source}: {message}"
        super().__init__(message)


class SampleError(OattsError):
    """A sample value was requested for a schema that cannot produce one."""


class OptionsError(OattsError):
    """Generation options (e.g. custom values) are invalid."""
