import logging
from collections.abc import Mapping
from dataclasses import dataclass
from typing import Any, Callable


@dataclass(frozen=True)
class ShapeDescriptor:
    """
    Own property names of one link of an object's ownership chain.
    """

    owner: str
    """
    Human-readable name of the link, e.g. "<keys>", "<instance>", "ValueError".
    """

    names: tuple[Any, ...]
    """
    Names declared by this link, in declaration order.
    """

    by_item: bool = False
    """
    Whether names are resolved with item lookup (mapping keys) instead of
    attribute lookup.
    """


def is_dunder(name: Any) -> bool:
    return (
        isinstance(name, str)
        and len(name) > 4
        and name.startswith("__")
        and name.endswith("__")
    )


class ChainFlattener:
    """
    Flattens an object and everything it inherits into a plain dict.

    The ownership chain of an object is, most-derived first: its mapping
    keys (if it is a mapping), its instance ``__dict__``, then every class
    of its MRO. Names are discovered by walking that chain, but each value
    is resolved on the original object, so normal shadowing applies and
    properties see the real instance.

    The first link declaring a name wins: once a name has been seen it is
    never tested again against an ancestor. Only values accepted by the
    oracle make it into the result.
    """

    def __init__(self, oracle: Callable[[Any], bool]) -> None:
        self._oracle = oracle
        self._logger = logging.getLogger("core.serialization.flatten")

    def shape_chain(self, obj: Any) -> list[ShapeDescriptor]:
        chain: list[ShapeDescriptor] = []

        if isinstance(obj, Mapping):
            chain.append(ShapeDescriptor("<keys>", tuple(obj.keys()), by_item=True))

        instance_dict = getattr(obj, "__dict__", None)
        if isinstance(instance_dict, dict):
            chain.append(ShapeDescriptor(
                "<instance>",
                tuple(name for name in instance_dict if not is_dunder(name))
            ))

        for cls in type(obj).__mro__:
            chain.append(ShapeDescriptor(
                cls.__qualname__,
                tuple(name for name in vars(cls) if not is_dunder(name))
            ))

        return chain

    def flatten(self, obj: Any) -> dict[Any, Any]:
        accepted: dict[Any, Any] = {}
        seen: set[Any] = set()

        for shape in self.shape_chain(obj):
            for name in shape.names:
                if name in seen:
                    continue
                seen.add(name)

                if shape.by_item:
                    value = obj[name]
                else:
                    try:
                        value = getattr(obj, name)
                    except AttributeError:
                        # unset slot or property declaring itself absent
                        continue

                if self._oracle(value):
                    accepted[name] = value
                else:
                    self._logger.debug(f"Dropped '{name}' from {shape.owner}")

        return accepted
