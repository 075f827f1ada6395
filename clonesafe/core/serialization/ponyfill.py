import datetime
import decimal
import enum
import inspect
import io
import re
import uuid
from collections.abc import Mapping
from typing import Any


class DataCloneError(TypeError):
    """Raised when a value falls outside the structured clone vocabulary."""


class StructuredClonePonyfill:
    """
    Pure-Python stand-in for a host's structured clone primitive.

    The ponyfill walks the value graph and raises `DataCloneError` on the
    first member that has no structured clone equivalent: routines, classes,
    modules, generators, open streams and any object type it does not know.

    It is deliberately permissive in one respect: exception instances are
    cloneable (their args and attributes are walked). Some hosts reject
    errors at transport time, which the serializability oracle accounts for.

    Cycles are accepted: every container is visited at most once.
    """

    LEAVES: tuple[type, ...] = (
        type(None),
        bool,
        int,
        float,
        str,
        bytes,
        bytearray,
        datetime.date,
        datetime.time,
        datetime.timedelta,
        decimal.Decimal,
        uuid.UUID,
        re.Pattern,
        enum.Enum,
    )

    def __call__(self, value: Any) -> None:
        self._walk(value, set())

    def _walk(self, value: Any, memo: set[int]) -> None:
        if isinstance(value, self.LEAVES):
            return

        if id(value) in memo:
            return

        if (
            inspect.isroutine(value)
            or inspect.isclass(value)
            or inspect.ismodule(value)
            or isinstance(value, io.IOBase)
        ):
            raise DataCloneError(f"{type(value).__name__} object could not be cloned")

        memo.add(id(value))

        if isinstance(value, (list, tuple, set, frozenset)):
            for item in value:
                self._walk(item, memo)
        elif isinstance(value, Mapping):
            for key, item in value.items():
                self._walk(key, memo)
                self._walk(item, memo)
        elif isinstance(value, BaseException):
            self._walk(value.args, memo)
            self._walk(vars(value), memo)
        elif hasattr(value, "__dict__"):
            self._walk(vars(value), memo)
        else:
            raise DataCloneError(f"{type(value).__name__} object could not be cloned")
