import logging
from typing import Any

from clonesafe.core.models.environment import HostEnvironment
from clonesafe.core.ports.clone import CloneCheck
from clonesafe.core.serialization.ponyfill import StructuredClonePonyfill


ERROR_CLONE_QUIRK_FAMILY = "firefox"
"""
Host family whose transport refuses error objects even when the ponyfill
reports them as cloneable.
"""


class SerializabilityOracle:
    """
    Decides whether a single value can cross the clone boundary.

    The oracle runs the active clone primitive on the value: the host's
    native primitive when the environment offers one, the ponyfill
    otherwise. Any failure of the primitive means "not serializable" and is
    never propagated.

    On top of the primitive's answer, the oracle corrects one known false
    positive: in the Firefox family, errors are rejected by the real
    transport while the ponyfill accepts them. When the ponyfill is the
    active primitive there, errors are reported as unserializable.
    """

    def __init__(
        self,
        environment: HostEnvironment,
        ponyfill: CloneCheck | None = None
    ) -> None:
        self._environment = environment
        self._ponyfill = ponyfill or StructuredClonePonyfill()
        self._logger = logging.getLogger("core.serialization.oracle")

    @property
    def environment(self) -> HostEnvironment:
        return self._environment

    @property
    def clone(self) -> CloneCheck:
        """The primitive currently in use."""
        native = self._environment.native_clone
        return native if native is not None else self._ponyfill

    @property
    def is_native(self) -> bool:
        return self._environment.native_clone is not None

    def can_serialize(self, value: Any) -> bool:
        try:
            self.clone(value)
        except Exception as ex:
            self._logger.debug(f"{type(value).__name__} rejected by clone primitive: {ex}")
            return False

        if (
            isinstance(value, BaseException)
            and not self.is_native
            and self._environment.matches(ERROR_CLONE_QUIRK_FAMILY)
        ):
            self._logger.debug(
                f"{type(value).__name__} rejected: errors cannot be relayed "
                f"in {self._environment.name} without a native clone primitive"
            )
            return False

        return True

    __call__ = can_serialize
