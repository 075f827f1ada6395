UNSERIALIZABLE = "__clonesafe_unserializable_value"
"""
Tag identifying a value that cannot cross the clone boundary.
The relay layer forwards it so the receiving side can inform the user.
"""


class Unserializable(Exception):
    """
    Raised by the sanitization pipeline when a value cannot be represented
    on the other side of the boundary.

    Carries no payload: callers only need to know *that* the value could not
    be transmitted, not why. The underlying cause, if any, is chained.
    """

    tag: str = UNSERIALIZABLE

    def __init__(self) -> None:
        super().__init__(UNSERIALIZABLE)
