import pytest
from unittest import mock

from code_reviewer.api import app, load_settings
from code_reviewer.providers import ProviderError

class FakeProvider:
    display_name = "Fake"

    def __init__(self, text="Looks fine.", error=None):
        self.text = text
        self.error = error
        self.prompts = []

    async def complete(self, prompt):
        self.prompts.append(prompt)
        if self.error:
            raise self.error
        return self.text

@pytest.fixture
def fake_provider():
    provider = FakeProvider()
    with mock.patch("code_reviewer.api.get_provider", return_value=provider):
        yield provider

@pytest.mark.parametrize("payload", [
    {"reviewType": "review"},
    {"code": "print(1)"},
    {"code": "", "reviewType": "review"},
    {"code": "print(1)", "reviewType": ""},
    {},
    [],
])
def test_missing_fields_rejected_without_upstream_call(client, fake_provider, payload):
    response = client.post("/analyze-code", json=payload)

    assert response.status_code == 400
    assert response.json() == {"error": "Code and review type are required"}
    assert fake_provider.prompts == []

@pytest.mark.parametrize("review_type, marker", [
    ("review", "You are an expert code reviewer."),
    ("errors", "You are a bug detection expert."),
    ("improvements", "You are a code optimization expert."),
    ("refactor", "You are a refactoring expert."),
])
def test_each_review_type_uses_its_template(client, fake_provider, review_type, marker):
    response = client.post("/analyze-code", json={"code": "x = 1", "reviewType": review_type})

    assert response.status_code == 200
    assert len(fake_provider.prompts) == 1
    assert marker in fake_provider.prompts[0]
    assert "x = 1" in fake_provider.prompts[0]

def test_unknown_review_type_falls_back_to_review(client, fake_provider):
    response = client.post("/analyze-code", json={"code": "x = 1", "reviewType": "foo"})

    assert response.status_code == 200
    assert response.json()["reviewType"] == "foo"
    assert len(fake_provider.prompts) == 1
    assert "You are an expert code reviewer." in fake_provider.prompts[0]

def test_unknown_review_type_rejected_in_strict_mode(client, fake_provider, use_settings):
    use_settings(STRICT_REVIEW_TYPES=True)

    response = client.post("/analyze-code", json={"code": "x = 1", "reviewType": "foo"})

    assert response.status_code == 400
    assert response.json() == {"error": "Unsupported review type"}
    assert fake_provider.prompts == []

def test_provider_error_is_not_forwarded(client, fake_provider, base_payload):
    fake_provider.error = ProviderError("Fake", "quota exceeded for org-secret-123")

    response = client.post("/analyze-code", json=base_payload)

    assert response.status_code == 500
    assert response.json() == {"error": "Failed to analyze code with Fake"}
    assert "org-secret-123" not in response.text

def test_unexpected_exception_returns_internal_error(client, fake_provider, base_payload):
    fake_provider.error = RuntimeError("boom")

    response = client.post("/analyze-code", json=base_payload)

    assert response.status_code == 500
    assert response.json() == {"error": "Internal server error"}

def test_malformed_body_returns_internal_error(client, fake_provider):
    response = client.post(
        "/analyze-code",
        content="{not json",
        headers={"content-type": "application/json"},
    )

    assert response.status_code == 500
    assert response.json() == {"error": "Internal server error"}
    assert fake_provider.prompts == []

def test_unsupported_provider_is_reported(client, base_payload, use_settings):
    use_settings(LLM_PROVIDER="mystery")

    response = client.post("/analyze-code", json=base_payload)

    assert response.status_code == 500
    assert "Unknown LLM provider: mystery" in response.json()["error"]

def test_preflight_returns_cors_headers_and_empty_body(client):
    response = client.options("/analyze-code")

    assert response.status_code == 200
    assert response.content == b""
    assert response.headers["access-control-allow-origin"] == "*"
    assert response.headers["access-control-allow-headers"] == "authorization, x-client-info, apikey, content-type"

def test_every_response_carries_cors_headers(client, fake_provider, base_payload):
    responses = [
        client.post("/analyze-code", json=base_payload),
        client.post("/analyze-code", json={}),
    ]

    fake_provider.error = ProviderError("Fake", "upstream failure")
    responses.append(client.post("/analyze-code", json=base_payload))

    fake_provider.error = RuntimeError("boom")
    responses.append(client.post("/analyze-code", json=base_payload))

    assert [r.status_code for r in responses] == [200, 400, 500, 500]
    for response in responses:
        assert response.headers["access-control-allow-origin"] == "*"
        assert response.headers["access-control-allow-headers"] == "authorization, x-client-info, apikey, content-type"

def test_missing_key_response_carries_cors_headers(client, base_payload, use_settings):
    use_settings(GEMINI_API_KEY="")

    response = client.post("/analyze-code", json=base_payload)

    assert response.status_code == 500
    assert response.json() == {"error": "Gemini API key not configured"}
    assert response.headers["access-control-allow-origin"] == "*"

def test_settings_failure_returns_json_error(client, base_payload):
    app.dependency_overrides.pop(load_settings)

    with mock.patch("code_reviewer.api.config.Settings", side_effect=ValueError("invalid MAX_OUTPUT_TOKENS")):
        response = client.post("/analyze-code", json=base_payload)

    assert response.status_code == 500
    assert response.json() == {"error": "Internal server error"}
    assert response.headers["access-control-allow-origin"] == "*"
