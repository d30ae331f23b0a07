from .errors import InvalidArgumentError, ResourceError, SerializationError

__all__ = ["InvalidArgumentError", "ResourceError", "SerializationError"]
