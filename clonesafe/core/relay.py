import logging
from typing import Any

from clonesafe.core.facade import CloneGuard
from clonesafe.core.models.message import Message, SendMessage
from clonesafe.core.models.signal import UNSERIALIZABLE, Unserializable
from clonesafe.core.ports.serializer import Serializer


UNSERIALIZABLE_TYPE = "unserializable"


def is_unserializable(message: Message) -> bool:
    return message.type == UNSERIALIZABLE_TYPE and message.data.get("tag") == UNSERIALIZABLE


class ValueRelay:
    """
    Wraps values into messages that are safe to send across the boundary.

    Values are sanitized before being enveloped. A value that cannot be
    sanitized is not an error for the relay: it is replaced by an
    "unserializable" message carrying the original message type, so the
    receiving side can tell the user what could not be transmitted.
    """

    def __init__(self, guard: CloneGuard, serializer: Serializer) -> None:
        self._guard = guard
        self._serializer = serializer
        self._logger = logging.getLogger("core.relay")

    def prepare(self, type: str, value: Any) -> Message:
        try:
            sanitized = self._guard.sanitize_for_transport(value)
        except Unserializable:
            self._logger.warning(
                f"Value of type {value.__class__.__name__} for '{type}' cannot be relayed"
            )
            return Message(
                type=UNSERIALIZABLE_TYPE,
                data={"type": type, "tag": UNSERIALIZABLE}
            )

        return Message(type=type, data={"value": sanitized})

    def encode(self, type: str, value: Any) -> bytes:
        return self._serializer.serialize(self.prepare(type, value).to_dict())

    def decode(self, data: bytes) -> Message:
        raw = self._serializer.deserialize(data)
        return Message(type=raw["type"], data=raw["data"])

    async def send(self, send: SendMessage, type: str, value: Any) -> Message:
        message = self.prepare(type, value)
        await send(message)
        self._logger.debug(f"Sent message: {message.type}")
        return message
