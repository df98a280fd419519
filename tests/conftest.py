from __future__ import annotations

from collections.abc import Iterator

import pytest
from fastapi.testclient import TestClient

from apology_generator.config import GeneratorConfig
from apology_generator.dependencies import get_flow
from apology_generator.flow import ApologyFlow
from apology_generator.server import create_app
from fakes import FakeProvider


@pytest.fixture(autouse=True)
def _no_ambient_credentials(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.delenv("GEMINI_API_KEY", raising=False)
    monkeypatch.delenv("APOLOGY_API_KEY", raising=False)


@pytest.fixture
def config() -> GeneratorConfig:
    return GeneratorConfig(api_key=None, copy_ack_seconds=0)


@pytest.fixture
def provider() -> FakeProvider:
    return FakeProvider()


@pytest.fixture
def client(config: GeneratorConfig, provider: FakeProvider) -> Iterator[TestClient]:
    app = create_app(config)
    app.dependency_overrides[get_flow] = lambda: ApologyFlow(provider, copy_ack_seconds=0)
    with TestClient(app) as test_client:
        yield test_client
