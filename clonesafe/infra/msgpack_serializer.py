import msgpack
from typing import Any

from clonesafe.core.ports.clone import CloneCheck
from clonesafe.core.ports.serializer import Serializer


class MsgPackSerializer(Serializer):
    """
    MsgPack-based implementation of the Serializer interface.

    - deterministic binary encoding
    - compact
    - refuses anything that is not plain data (errors, instances, sets)
    """
    def serialize(self, message: Any) -> bytes:
        return msgpack.packb(message, use_bin_type=True)

    def deserialize(self, data: bytes) -> Any:
        return msgpack.unpackb(data, raw=False)


class MsgPackCloneCheck(CloneCheck):
    """
    Native clone primitive of hosts whose channel speaks msgpack.

    A value is cloneable exactly when the channel's codec can encode it,
    so the check is an encode attempt whose result is discarded.
    """
    def __call__(self, value: Any) -> None:
        msgpack.packb(value, use_bin_type=True)
