from collections.abc import Mapping
from typing import Any

from clonesafe.bootstrap.deps import get_guard
from clonesafe.core.models.signal import UNSERIALIZABLE, Unserializable


__all__ = [
    "UNSERIALIZABLE",
    "Unserializable",
    "is_serializable",
    "omit_unserializable",
    "sanitize_for_transport",
]


def is_serializable(value: Any) -> bool:
    return get_guard().is_serializable(value)


def omit_unserializable(mapping: Mapping[Any, Any]) -> dict[Any, Any]:
    return get_guard().omit_unserializable(mapping)


def sanitize_for_transport(value: Any) -> Any:
    return get_guard().sanitize_for_transport(value)
