import pytest
from fastapi.testclient import TestClient
from code_reviewer.api import app, load_settings
from code_reviewer.config import Settings

DEFAULT_SETTINGS = {
    "LLM_PROVIDER": "gemini",
    "GEMINI_API_KEY": "test-gemini-key",
    "OPENAI_API_KEY": "test-openai-key",
    "ANTHROPIC_API_KEY": "test-anthropic-key",
    "GROK_API_KEY": "test-grok-key",
    "STRICT_REVIEW_TYPES": False,
}

def make_settings(**overrides):
    values = dict(DEFAULT_SETTINGS)
    values.update(overrides)
    return Settings(_env_file=None, **values)

@pytest.fixture(scope="module")
def client():
    return TestClient(app)

@pytest.fixture(autouse=True)
def use_settings():
    # Every test gets predictable settings; call the fixture to swap them
    def _use(**overrides):
        settings = make_settings(**overrides)
        app.dependency_overrides[load_settings] = lambda: settings
        return settings

    _use()
    yield _use
    app.dependency_overrides.clear()

@pytest.fixture
def base_payload():
    return {
        "code": "console.log(1)",
        "reviewType": "errors",
    }

@pytest.fixture
def settings_factory():
    return make_settings
