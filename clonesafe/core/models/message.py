from dataclasses import dataclass, asdict
from typing import Any, Callable, Awaitable


@dataclass
class Message:
    """
    Envelope of a value relayed across the clone boundary.
    The relay encodes/decodes messages via the Serializer, while callers
    manipulate them in this native Python form.
    """
    type: str
    """
    type of message, e.g. "result", "error", "unserializable"
    """

    data: dict[Any, Any]
    """
    A dictionary of sanitized data
    """

    def to_dict(self) -> dict[str, Any]:
        """Return a plain dictionary representation of the message."""
        return asdict(self)


SendMessage = Callable[[Message], Awaitable[None]]
"""
Coroutine provided by the channel for sending a message to the other context.
"""
