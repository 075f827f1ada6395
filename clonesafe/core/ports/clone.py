from typing import Protocol, Any


class CloneCheck(Protocol):
    """
    Defines the interface of a clone-capability primitive.

    A primitive answers a single question: can this value cross the
    boundary between two execution contexts? It answers by returning
    normally, or by raising when the value cannot be cloned.

    Implementations must be:
    - pure (no side effects on the checked value)
    - deterministic for a given value
    """

    def __call__(self, value: Any) -> None:
        """Raise if `value` cannot be cloned, return None otherwise."""
