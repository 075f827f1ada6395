from dataclasses import dataclass, field
from typing import Iterable

from clonesafe.core.ports.clone import CloneCheck


FIREFOX_NATIVE_CLONE_SINCE = 94
"""
First Firefox major version shipping a native structured clone primitive.
Older versions must rely on the ponyfill.
"""


@dataclass(frozen=True)
class HostEnvironment:
    """
    Identity of the host the values are relayed to.

    The environment is passed explicitly to the serializability oracle,
    which only uses it to detect host-specific clone quirks.
    """

    name: str
    """
    Host name, e.g. "chrome", "firefox", "electron".
    """

    family: str
    """
    Host family, e.g. "chromium", "firefox", "webkit".
    """

    major_version: int | None = None
    """
    Major version of the host, when known.
    """

    native_clone: CloneCheck | None = field(default=None, compare=False)
    """
    Clone primitive offered natively by the host, or None when the host
    has none and the ponyfill must stand in for it.
    """

    def matches(self, selector: str | Iterable[str]) -> bool:
        """
        Check the host against a name or family.

        `selector` is a name or family ("firefox"), a negated one ("!firefox"),
        or an iterable of such entries, in which case any match wins.
        """
        if not isinstance(selector, str):
            return any(self.matches(entry) for entry in selector)

        selector = selector.strip().lower()
        if selector.startswith("!"):
            return not self.matches(selector[1:])

        return selector in (self.name.lower(), self.family.lower())

    @classmethod
    def detect(
        cls,
        name: str,
        family: str,
        major_version: int | None = None,
        native_clone: CloneCheck | None = None,
        has_native: bool | None = None
    ) -> "HostEnvironment":
        """
        Build an environment, deciding whether `native_clone` is available.

        When `has_native` is None, availability is derived from the host:
        Firefox older than 94 has no native primitive, every other host does.
        """
        if has_native is None:
            has_native = not (
                family.lower() == "firefox"
                and major_version is not None
                and major_version < FIREFOX_NATIVE_CLONE_SINCE
            )

        return cls(
            name=name,
            family=family,
            major_version=major_version,
            native_clone=native_clone if has_native else None
        )
