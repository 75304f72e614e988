"""Errors raised while building or sending a console request.

Every error here is local to one "try it" invocation: the controller turns
it into a Failure outcome and the console stays usable.
"""


class ConsoleError(Exception):
    """Base class for console errors."""


class ConfigurationError(ConsoleError):
    """Parameter entries do not match what the console understands."""


class UnknownLocation(ConfigurationError):
    def __init__(self, value: str):
        self.value = value
        super().__init__(f"unknown parameter location: {value!r}")


class AssemblyError(ConfigurationError):
    """The request cannot be assembled from the given parameters."""


class EmptyPathParameter(AssemblyError):
    def __init__(self, name: str):
        self.name = name
        super().__init__(f"path parameter {name!r} cannot be empty")


class UnresolvedPlaceholder(AssemblyError):
    def __init__(self, name: str):
        self.name = name
        super().__init__(f"path placeholder {{{name}}} has no matching path parameter")


class UnusedPathParameter(AssemblyError):
    def __init__(self, name: str):
        self.name = name
        super().__init__(f"path parameter {name!r} does not appear in the path template")


class TransportError(ConsoleError):
    """Raised when the request never produced an HTTP response."""

    def __init__(self, message: str):
        self.message = message
        super().__init__(message)


class InvalidHeader(AssemblyError):
    def __init__(self, name: str):
        self.name = name
        super().__init__(f"header {name!r} must contain only ASCII characters")
