from collections.abc import Mapping
from typing import Any

from clonesafe.core.models.environment import HostEnvironment
from clonesafe.core.models.signal import UNSERIALIZABLE, Unserializable
from clonesafe.core.serialization.flatten import ChainFlattener
from clonesafe.core.serialization.oracle import SerializabilityOracle
from clonesafe.core.serialization.sanitize import Sanitizer


__all__ = ["CloneGuard", "UNSERIALIZABLE", "Unserializable"]


class CloneGuard:
    """
    Public entry point of clonesafe.

    Bundles the oracle, the flattener and the sanitizer built for one host
    environment. Instances hold no per-call state and can be shared.
    """

    def __init__(self, oracle: SerializabilityOracle) -> None:
        self._oracle = oracle
        self._flattener = ChainFlattener(oracle)
        self._sanitizer = Sanitizer(oracle, self._flattener)

    @classmethod
    def for_environment(cls, environment: HostEnvironment) -> "CloneGuard":
        return cls(SerializabilityOracle(environment))

    @property
    def oracle(self) -> SerializabilityOracle:
        return self._oracle

    @property
    def environment(self) -> HostEnvironment:
        return self._oracle.environment

    def is_serializable(self, value: Any) -> bool:
        return self._oracle.can_serialize(value)

    def omit_unserializable(self, mapping: Mapping[Any, Any]) -> dict[Any, Any]:
        return self._sanitizer.omit_unserializable(mapping)

    def sanitize_for_transport(self, value: Any) -> Any:
        """
        Return a clone-safe substitute of `value`.

        Raises:
            Unserializable: when `value` is a scalar the boundary refuses,
            or an object that could not be flattened.
        """
        return self._sanitizer.sanitize(value)
