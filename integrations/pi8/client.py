"""
Pi8 property API client: API-key headers, bounded timeout, no retries.
"""

import logging

import requests
from django.conf import settings

logger = logging.getLogger(__name__)


class Pi8APIError(Exception):
    """Raised when the Pi8 API call fails or returns an unexpected payload."""

    def __init__(self, message, status_code=None, response_body=None):
        super().__init__(message)
        self.status_code = status_code
        self.response_body = response_body


class Pi8Client:
    """
    HTTP client for the Pi8 published-properties API.

    Authenticates with the ``x-api-key`` and ``x-integration-source``
    headers. Every failure is terminal for the call: the caller decides
    whether it aborts the batch (list fetch) or skips one item (detail).
    """

    DEFAULT_TIMEOUT = 30  # seconds
    PUBLISHED_PATH = "/api/properties/published"

    def __init__(self, base_url=None, api_key=None, integration_source=None, timeout=None):
        config = getattr(settings, "PI8", {})
        self.base_url = (base_url or config.get("BASE_URL", "")).rstrip("/")
        self.api_key = api_key or config.get("API_KEY", "")
        self.integration_source = integration_source or config.get("INTEGRATION_SOURCE", "")
        self.timeout = timeout or config.get("TIMEOUT") or self.DEFAULT_TIMEOUT

        if not all([self.base_url, self.api_key]):
            raise Pi8APIError(
                "Pi8 credentials not configured. Set PI8_BASE_URL and "
                "PI8_API_KEY environment variables."
            )

        self.session = requests.Session()
        self.session.headers.update({
            "x-api-key": self.api_key,
            "x-integration-source": self.integration_source,
            "Accept": "application/json",
            "Content-Type": "application/json",
        })

    def get(self, path, params=None):
        """GET request, returns parsed JSON."""
        url = f"{self.base_url}/{path.lstrip('/')}"

        try:
            response = self.session.get(url, params=params, timeout=self.timeout)
        except requests.RequestException as exc:
            raise Pi8APIError(f"Request to {url} failed: {exc}") from exc

        if response.status_code != 200:
            raise Pi8APIError(
                f"API returned {response.status_code} for {url}: {response.text[:500]}",
                status_code=response.status_code,
                response_body=response.text,
            )

        try:
            return response.json()
        except ValueError as exc:
            raise Pi8APIError(
                f"Failed to parse response from {url}: {exc}",
                status_code=response.status_code,
                response_body=response.text,
            ) from exc

    def fetch_published_summaries(self):
        """
        Fetch the list of published properties.

        Response shape: {"results": {"entities": [{...}, ...]}}
        """
        data = self.get(self.PUBLISHED_PATH)
        results = data.get("results") if isinstance(data, dict) else None
        entities = results.get("entities") if isinstance(results, dict) else None
        if entities is None:
            entities = []
        if not isinstance(entities, list):
            raise Pi8APIError(
                f"Unexpected published list payload: {str(data)[:500]}",
                response_body=data,
            )

        logger.info("Fetched %d published properties from Pi8", len(entities))
        return entities

    def fetch_property_detail(self, external_id):
        """
        Fetch one fully detailed property, including empreendimento,
        broker, prices and image URLs.

        Response shape: {"results": {...}}
        """
        data = self.get(f"{self.PUBLISHED_PATH}/{external_id}")
        results = data.get("results") if isinstance(data, dict) else None
        if not isinstance(results, dict):
            raise Pi8APIError(
                f"Unexpected detail payload for property {external_id}: {str(data)[:500]}",
                response_body=data,
            )
        return results
