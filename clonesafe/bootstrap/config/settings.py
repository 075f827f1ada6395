from typing import Annotated, Literal

from pydantic import BaseModel, Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict, PydanticBaseSettingsSource, YamlConfigSettingsSource

from clonesafe.bootstrap.config.loader import get_configfile


class HostSettings(BaseModel):
    name: Annotated[
        str,
        Field(
            description="Name of the host values are relayed to (e.g. 'chrome', 'firefox').",
            default="chrome"
        )
    ]

    family: Annotated[
        str,
        Field(
            description="Family of the host (e.g. 'chromium', 'firefox', 'webkit').",
            default="chromium"
        )
    ]

    major_version: Annotated[
        int | None,
        Field(
            description=(
                "Major version of the host, when known.\n"
                "Used to decide whether the host ships a native clone primitive."
            ),
            default=None
        )
    ]

    native_clone: Annotated[
        bool | None,
        Field(
            description=(
                "Force the availability of the host's native clone primitive.\n"
                "When unset, availability is derived from the family and version:\n"
                "Firefox older than 94 relies on the ponyfill, other hosts do not."
            ),
            default=None
        )
    ]

    @field_validator("name", "family")
    @classmethod
    def normalize(cls, v: str) -> str:
        v = v.strip().lower()
        if not v:
            raise ValueError("must not be empty")
        return v


class ClonesafeConfig(BaseSettings):
    model_config = SettingsConfigDict(
        env_prefix="CLONESAFE_",
        env_nested_delimiter="__",
        extra="allow"
    )

    host: Annotated[
        HostSettings,
        Field(
            description=(
                "Identity of the host environment.\n"
                "The serializability oracle uses it to detect host-specific clone\n"
                "quirks and to pick the native primitive or the ponyfill."
            ),
            default_factory=HostSettings
        )
    ]

    log_level: Annotated[
        Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"],
        Field(
            description="Logging verbosity.",
            default="INFO"
        )
    ]

    @classmethod
    def settings_customise_sources(
        cls,
        settings_cls: type[BaseSettings],
        init_settings: PydanticBaseSettingsSource,
        env_settings: PydanticBaseSettingsSource,
        dotenv_settings: PydanticBaseSettingsSource,
        file_secret_settings: PydanticBaseSettingsSource,
    ) -> tuple[PydanticBaseSettingsSource, ...]:
        configfile = get_configfile()
        if configfile is None:
            return init_settings, env_settings

        return init_settings, env_settings, YamlConfigSettingsSource(settings_cls, yaml_file=configfile)
