import json
from functools import lru_cache

from pydantic import ValidationError

from clonesafe.bootstrap.config.settings import ClonesafeConfig
from clonesafe.core.facade import CloneGuard
from clonesafe.core.helpers.utils import setup_logging
from clonesafe.core.models.environment import HostEnvironment
from clonesafe.core.relay import ValueRelay
from clonesafe.core.serialization.oracle import SerializabilityOracle
from clonesafe.infra.msgpack_serializer import MsgPackSerializer, MsgPackCloneCheck


@lru_cache
def get_environment() -> HostEnvironment:
    host = get_config().host
    return HostEnvironment.detect(
        name=host.name,
        family=host.family,
        major_version=host.major_version,
        native_clone=MsgPackCloneCheck(),
        has_native=host.native_clone
    )


@lru_cache
def get_oracle() -> SerializabilityOracle:
    return SerializabilityOracle(get_environment())


@lru_cache
def get_guard() -> CloneGuard:
    return CloneGuard(get_oracle())


@lru_cache
def get_relay() -> ValueRelay:
    return ValueRelay(get_guard(), MsgPackSerializer())


@lru_cache
def get_config() -> ClonesafeConfig:
    try:
        config = ClonesafeConfig()
    except ValidationError as ex:
        msg = ["Configuration validation failed:"]
        errs = json.loads(ex.json())
        for err in errs:
            msg.append(f"  {'.'.join(str(loc) for loc in err['loc'])}: {err['msg']}")
        raise SystemExit("\n".join(msg))

    setup_logging(config.log_level)
    return config
