from __future__ import annotations

import pytest
from faker import Faker

from faker_server.settings import Settings


@pytest.fixture
def anyio_backend() -> str:
    return "asyncio"


@pytest.fixture
def fake() -> Faker:
    f = Faker("en_US")
    f.seed_instance(1234)
    return f


@pytest.fixture
def server_settings() -> Settings:
    return Settings(env={"FAKER_SEED": "1234"})
