"""Exceptions raised by cassette-serializers."""


class CassetteSerializerError(Exception):
    """Base exception for all cassette-serializers errors."""

    pass


class UnrecognizedSerializerError(CassetteSerializerError, ValueError):
    """Raised when a serializer name is neither registered nor built in."""

    def __init__(self, name: str, known: list[str] | None = None):
        known = known or []
        message = f"Unknown serializer: {name!r}"
        if known:
            message += f". Built-in serializers are: {', '.join(known)}"
        super().__init__(message)
        self.name = name
        self.known = known


class DependencyUnavailableError(CassetteSerializerError, ImportError):
    """Raised when a built-in serializer needs a library that is not installed."""

    def __init__(self, name: str, dependency: str, install_hint: str):
        super().__init__(
            f"{dependency} is required for the {name!r} serializer. {install_hint}"
        )
        # ImportError.__init__ resets ``name``, so set it afterwards
        self.name = name
        self.dependency = dependency
