class ResourceError(Exception):
    """Base class for errors raised by resourceful."""


class SerializationError(ResourceError):
    """Raised when a body serializer fails.

    The request is abandoned before any ``req`` event is emitted and before
    the transport is called. The serializer's exception is kept as
    ``__cause__``.
    """

    def __init__(self, method: str, path: str, message: str):
        self.method = method
        self.path = path
        self.message = f"Failed to serialize body for {method} {path}: {message}"
        super().__init__(self.message)


class InvalidArgumentError(ResourceError, TypeError):
    """Raised for arguments of the wrong type, such as a non-callable callback."""
