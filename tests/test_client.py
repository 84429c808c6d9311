"""
Tests for the Pi8 HTTP client.

The requests session is mocked; no network access.
"""
from unittest.mock import MagicMock, patch

import pytest
import requests

from integrations.pi8.client import Pi8APIError, Pi8Client


def _response(status_code=200, payload=None, text="", json_error=None):
    response = MagicMock()
    response.status_code = status_code
    response.text = text
    if json_error is not None:
        response.json.side_effect = json_error
    else:
        response.json.return_value = payload
    return response


@pytest.fixture
def client(pi8_settings):
    return Pi8Client()


class TestPi8ClientConfig:
    """Credentials and headers."""

    def test_reads_settings(self, client):
        assert client.base_url == "https://pi8.example.com"
        assert client.timeout == 30

    def test_sends_api_key_and_integration_source(self, client):
        assert client.session.headers["x-api-key"] == "test-key"
        assert client.session.headers["x-integration-source"] == "imoveis-test"
        assert client.session.headers["Accept"] == "application/json"

    def test_missing_credentials_raise(self, settings):
        settings.PI8 = {"BASE_URL": "", "API_KEY": ""}
        with pytest.raises(Pi8APIError):
            Pi8Client()

    def test_explicit_arguments_override_settings(self, pi8_settings):
        client = Pi8Client(base_url="https://other.example.com/", api_key="k", timeout=5)
        assert client.base_url == "https://other.example.com"
        assert client.api_key == "k"
        assert client.timeout == 5


class TestPi8ClientGet:
    """Transport and status handling."""

    def test_builds_url_and_passes_timeout(self, client):
        with patch.object(client.session, "get", return_value=_response(payload={})) as get:
            client.get("/api/properties/published")
        get.assert_called_once_with(
            "https://pi8.example.com/api/properties/published", params=None, timeout=30
        )

    def test_non_200_raises_with_status(self, client):
        with patch.object(client.session, "get", return_value=_response(503, text="down")):
            with pytest.raises(Pi8APIError) as excinfo:
                client.get("/x")
        assert excinfo.value.status_code == 503
        assert excinfo.value.response_body == "down"

    def test_transport_error_raises(self, client):
        with patch.object(client.session, "get", side_effect=requests.ConnectionError("refused")):
            with pytest.raises(Pi8APIError):
                client.get("/x")

    def test_invalid_json_raises(self, client):
        bad = _response(json_error=ValueError("no json"), text="<html>")
        with patch.object(client.session, "get", return_value=bad):
            with pytest.raises(Pi8APIError):
                client.get("/x")

    def test_no_retry_on_failure(self, client):
        with patch.object(client.session, "get", return_value=_response(500)) as get:
            with pytest.raises(Pi8APIError):
                client.get("/x")
        assert get.call_count == 1


class TestPi8ClientEndpoints:
    """Envelope unwrapping for list and detail."""

    def test_published_summaries(self, client):
        payload = {"results": {"entities": [{"id": 1}, {"id": 2}]}}
        with patch.object(client.session, "get", return_value=_response(payload=payload)):
            assert client.fetch_published_summaries() == [{"id": 1}, {"id": 2}]

    def test_published_summaries_missing_envelope_is_empty(self, client):
        with patch.object(client.session, "get", return_value=_response(payload={})):
            assert client.fetch_published_summaries() == []

    def test_published_summaries_non_list_raises(self, client):
        payload = {"results": {"entities": "oops"}}
        with patch.object(client.session, "get", return_value=_response(payload=payload)):
            with pytest.raises(Pi8APIError):
                client.fetch_published_summaries()

    def test_property_detail(self, client):
        payload = {"results": {"id": 42, "codigo": "A1"}}
        with patch.object(client.session, "get", return_value=_response(payload=payload)) as get:
            assert client.fetch_property_detail(42) == {"id": 42, "codigo": "A1"}
        assert get.call_args[0][0] == "https://pi8.example.com/api/properties/published/42"

    def test_property_detail_without_results_raises(self, client):
        with patch.object(client.session, "get", return_value=_response(payload={"error": "x"})):
            with pytest.raises(Pi8APIError):
                client.fetch_property_detail(42)
