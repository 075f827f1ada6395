import os

from pydantic_settings import BaseSettings, PydanticBaseSettingsSource, YamlConfigSettingsSource

from clonesafe.bootstrap.config.settings import ClonesafeConfig


class FakeClonesafeConfig(ClonesafeConfig, BaseSettings):
    @classmethod
    def settings_customise_sources(
        cls,
        settings_cls: type[BaseSettings],
        init_settings: PydanticBaseSettingsSource,
        env_settings: PydanticBaseSettingsSource,
        dotenv_settings: PydanticBaseSettingsSource,
        file_secret_settings: PydanticBaseSettingsSource,
    ) -> tuple[PydanticBaseSettingsSource, ...]:
        return (YamlConfigSettingsSource(settings_cls, yaml_file=os.environ["TEST_CLONESAFECONFIG"]),)


class Base:
    kind = "base"
    level = 1

    def describe(self):
        return f"{self.kind}:{self.level}"


class Derived(Base):
    kind = "derived"

    def __init__(self, x):
        self.x = x


class Slotted:
    __slots__ = ("a", "b")

    def __init__(self, a):
        self.a = a


class WithProperty:
    def __init__(self):
        self.reads = 0

    @property
    def computed(self):
        self.reads += 1
        return "value"


class BrokenProperty:
    @property
    def broken(self):
        raise RuntimeError("getter failed")


class AssertionFailure(AssertionError):
    expected = 1

    def __init__(self, message, actual):
        super().__init__(message)
        self.actual = actual
        self.callback = lambda: None


class Proxy:
    __slots__ = ("target",)

    def __getattr__(self, name):
        raise RuntimeError(f"proxy has no {name}")
