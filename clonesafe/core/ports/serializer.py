from typing import Protocol, Any


class Serializer(Protocol):
    """
    Defines the interface for encoding/decoding messages relayed between
    execution contexts.

    Implementations must be:
    - deterministic
    - pure (no side effects)
    - strict: values outside the wire vocabulary are rejected, never coerced
    """

    def serialize(self, message: Any) -> bytes:
        """Encode a sanitized Python object into bytes for the channel."""

    def deserialize(self, data: bytes) -> Any:
        """Decode bytes received from the channel into a Python object."""
