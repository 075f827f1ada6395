import enum
import inspect
import logging
from collections.abc import Mapping
from typing import Any, Callable

from clonesafe.core.models.signal import Unserializable
from clonesafe.core.serialization.flatten import ChainFlattener


def is_sequence(value: Any) -> bool:
    return isinstance(value, (list, tuple))


def is_composite(value: Any) -> bool:
    """
    Object-like values: mappings, errors and attribute-carrying instances.
    Routines, classes, modules and enum members are scalars even though
    they have a __dict__.
    """
    if isinstance(value, enum.Enum):
        return False

    if inspect.isroutine(value) or inspect.isclass(value) or inspect.ismodule(value):
        return False

    if isinstance(value, (Mapping, BaseException)):
        return True

    if inspect.getattr_static(value, "__dict__", None) is not None:
        return True

    return any("__slots__" in vars(cls) for cls in type(value).__mro__[:-1])


class Sanitizer:
    """
    Prepares arbitrary values for the clone boundary.

    Values are routed by shape:

    - sequences are rebuilt element by element; elements that cannot be
      sanitized are dropped
    - composite objects are flattened into a plain dict of their
      serializable properties, inherited ones included
    - scalars are passed through when the oracle accepts them

    `Unserializable` is raised for a rejected scalar, or for a composite
    whose flattening failed.
    """

    def __init__(
        self,
        oracle: Callable[[Any], bool],
        flattener: ChainFlattener | None = None
    ) -> None:
        self._oracle = oracle
        self._flattener = flattener or ChainFlattener(oracle)
        self._logger = logging.getLogger("core.serialization.sanitize")

    def sanitize(self, value: Any) -> Any:
        if is_sequence(value):
            sanitized = []
            for index, item in enumerate(value):
                try:
                    sanitized.append(self.sanitize(item))
                except Unserializable:
                    self._logger.debug(f"Dropped unserializable element #{index}")
            return sanitized

        if is_composite(value):
            try:
                return self._flattener.flatten(value)
            except Exception as ex:
                self._logger.debug(f"Could not flatten {type(value).__name__}: {ex}")
                raise Unserializable() from ex

        if not self._oracle(value):
            raise Unserializable()

        return value

    def omit_unserializable(self, mapping: Mapping[Any, Any]) -> dict[Any, Any]:
        """
        Shallow filter: keep the entries whose value passes the oracle.
        No recursion and no chain walk.
        """
        return {key: value for key, value in mapping.items() if self._oracle(value)}
