from fastapi.testclient import TestClient

from apology_generator.config import GeneratorConfig
from apology_generator.errors import CONFIGURATION_ERROR_MESSAGE
from apology_generator.server import create_app
from fakes import APOLOGY_TEXT, FakeProvider


def test_generate_returns_apology(client: TestClient, provider: FakeProvider) -> None:
    response = client.post("/v1/apology/generate", json={"description": "I missed our meeting yesterday"})

    assert response.status_code == 200
    assert response.json() == {"apology": APOLOGY_TEXT}
    assert len(provider.prompts) == 1
    assert "I missed our meeting yesterday" in provider.prompts[0]


def test_generate_rejects_blank_description(client: TestClient, provider: FakeProvider) -> None:
    response = client.post("/v1/apology/generate", json={"description": "   "})

    assert response.status_code == 400
    assert provider.prompts == []


def test_generate_surfaces_provider_message(client: TestClient, provider: FakeProvider) -> None:
    provider.error = RuntimeError("network timeout")

    response = client.post("/v1/apology/generate", json={"description": "I was late"})

    assert response.status_code == 502
    assert response.json()["detail"] == "network timeout"


def test_generate_without_credential_reports_configuration_error() -> None:
    app = create_app(GeneratorConfig(api_key=None))
    with TestClient(app) as client:
        response = client.post("/v1/apology/generate", json={"description": "I was late"})

    assert response.status_code == 503
    assert response.json()["detail"] == CONFIGURATION_ERROR_MESSAGE


def test_home_page_renders_form(client: TestClient) -> None:
    response = client.get("/")

    assert response.status_code == 200
    assert "text/html" in response.headers["content-type"]
    assert "Free AI Apology Generator" in response.text
    assert 'id="description"' in response.text
    assert "https://roihacks.gumroad.com/coffee" in response.text
    assert "const COPY_ACK_MS = 0;" in response.text


def test_about_page_renders(client: TestClient) -> None:
    response = client.get("/about")

    assert response.status_code == 200
    assert "About Us" in response.text
    assert "Our Mission" in response.text


def test_health(client: TestClient) -> None:
    response = client.get("/health")

    assert response.status_code == 200
    assert response.json()["status"] == "ok"


def test_home_page_copies_returned_text(client: TestClient) -> None:
    response = client.get("/")

    assert "navigator.clipboard.writeText(apology)" in response.text
    assert "apology = text" in response.text
