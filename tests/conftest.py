import os
from typing import Generator

import pytest
import yaml

from clonesafe.bootstrap.config.loader import get_configfile
from clonesafe.core.facade import CloneGuard
from clonesafe.core.models.environment import HostEnvironment
from clonesafe.core.relay import ValueRelay
from clonesafe.infra.msgpack_serializer import MsgPackSerializer, MsgPackCloneCheck
from tests.helpers import FakeClonesafeConfig


@pytest.fixture
def serializer():
    return MsgPackSerializer()


@pytest.fixture
def chromium() -> HostEnvironment:
    return HostEnvironment("chrome", "chromium", 120, native_clone=MsgPackCloneCheck())


@pytest.fixture
def firefox() -> HostEnvironment:
    return HostEnvironment("firefox", "firefox", 120, native_clone=MsgPackCloneCheck())


@pytest.fixture
def legacy_firefox() -> HostEnvironment:
    return HostEnvironment("firefox", "firefox", 91)


@pytest.fixture
def guard(chromium) -> CloneGuard:
    return CloneGuard.for_environment(chromium)


@pytest.fixture
def legacy_guard(legacy_firefox) -> CloneGuard:
    return CloneGuard.for_environment(legacy_firefox)


@pytest.fixture
def relay(guard, serializer) -> ValueRelay:
    return ValueRelay(guard, serializer)


@pytest.fixture
def config_file(tmp_path):
    file = tmp_path / "clonesafe.yaml"

    data = {
        "host": {
            "name": "Firefox",
            "family": "firefox",
            "major_version": 91,
        },
        "log_level": "DEBUG",
    }

    file.write_text(yaml.dump(data))
    return file


@pytest.fixture
def clonesafe_config(config_file) -> Generator[FakeClonesafeConfig, None, None]:
    backup = os.environ.copy()

    try:
        os.environ["TEST_CLONESAFECONFIG"] = str(config_file)
        yield FakeClonesafeConfig()
    finally:
        os.environ.clear()
        os.environ.update(backup)


@pytest.fixture
def clean_configfile() -> Generator[None, None, None]:
    get_configfile.cache_clear()
    try:
        yield
    finally:
        get_configfile.cache_clear()
