"""Coralogix management API client for outgoing webhooks and alert definitions."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any, TypeVar
from urllib.parse import quote

import requests
from pydantic import ValidationError

from .errors import CoralogixAPIError, CoralogixRequestError, CoralogixResponseError
from .models import (
    AlertDef,
    AlertDefProperties,
    CoralogixModel,
    CreateAlertDefResponse,
    CreateOutgoingWebhookRequest,
    CreateOutgoingWebhookResponse,
    GetOutgoingWebhookResponse,
    OutgoingWebhook,
)

logger = logging.getLogger(__name__)

DEFAULT_BASE_URL = "https://api.eu2.coralogix.com/mgmt/openapi"
DEFAULT_TIMEOUT = 10.0

ResponseT = TypeVar("ResponseT", bound=CoralogixModel)


@dataclass
class CoralogixConfig:
    """Configuration for Coralogix API access."""

    api_key: str
    base_url: str = DEFAULT_BASE_URL
    timeout: float = DEFAULT_TIMEOUT  # Seconds, applied to every request


class CoralogixClient:
    """Client for interacting with the Coralogix management API.

    Each call is a single request. Nothing is retried.
    """

    def __init__(self, config: CoralogixConfig, session: requests.Session | None = None):
        self.config = config
        self.session = session or requests.Session()
        # API key as-is, no Bearer prefix
        self.session.headers.update({"Authorization": config.api_key, "Accept": "application/json"})

    def close(self) -> None:
        """Close the underlying HTTP session."""
        self.session.close()

    def __enter__(self) -> CoralogixClient:
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.close()

    def _url(self, path: str) -> str:
        return f"{self.config.base_url.rstrip('/')}/{path.lstrip('/')}"

    def _make_request(self, method: str, path: str, data: dict[str, Any] | None = None) -> dict[str, Any]:
        """Make an authenticated request and return the decoded JSON body."""
        url = self._url(path)
        headers: dict[str, str] = {}

        # Only add Content-Type for requests with body data
        if data is not None:
            headers["Content-Type"] = "application/json"

        logger.debug(f"{method} {url}")
        if data is not None:
            logger.debug(f"Request body: {data}")

        try:
            response = self.session.request(
                method=method, url=url, headers=headers, json=data, timeout=self.config.timeout
            )
        except requests.exceptions.Timeout as e:
            raise CoralogixRequestError(f"{method} {path} timed out after {self.config.timeout}s") from e
        except requests.exceptions.RequestException as e:
            raise CoralogixRequestError(f"{method} {path} failed: {e}") from e

        if not response.ok:
            status = response.status_code
            if status == 401:
                message = "Authentication failed: invalid API key"
            elif status == 403:
                message = "Authentication failed: API key does not have permission"
            else:
                message = f"API request failed: {status} - {response.text}"
            raise CoralogixAPIError(f"{method} {path}: {message}", status_code=status, body=response.text)

        try:
            body = response.json()
        except ValueError as e:
            raise CoralogixResponseError(f"{method} {path}: response is not valid JSON") from e

        if not isinstance(body, dict):
            raise CoralogixResponseError(f"{method} {path}: expected a JSON object, got {type(body).__name__}")

        logger.debug(f"Response body: {body}")
        return body

    def _parse(self, model: type[ResponseT], body: dict[str, Any], operation: str) -> ResponseT:
        try:
            return model.model_validate(body)
        except ValidationError as e:
            raise CoralogixResponseError(f"{operation}: unexpected response body: {e}") from e

    def create_outgoing_webhook(self, request: CreateOutgoingWebhookRequest) -> str:
        """Create an outgoing webhook and return its id."""
        body = self._make_request("POST", "v1/outgoing-webhooks", data=request.to_payload())
        return self._parse(CreateOutgoingWebhookResponse, body, "CreateOutgoingWebhook").id

    def get_outgoing_webhook(self, webhook_id: str) -> OutgoingWebhook:
        """Fetch a single outgoing webhook by id."""
        # Escaped so an id cannot add path segments or a query string
        body = self._make_request("GET", f"v1/outgoing-webhooks/{quote(webhook_id, safe='')}")
        return self._parse(GetOutgoingWebhookResponse, body, "GetOutgoingWebhook").webhook

    def get_webhook_external_id(self, webhook_id: str) -> int:
        """Get the numeric external id that alerts use to reference a webhook."""
        return self.get_outgoing_webhook(webhook_id).external_id

    def create_alert_def(self, properties: AlertDefProperties) -> AlertDef:
        """Create an alert definition.

        Returns the created definition, carrying its id and alert version id.
        """
        body = self._make_request("POST", "v3/alert-defs", data=properties.to_payload())
        return self._parse(CreateAlertDefResponse, body, "CreateAlertDef").alert_def
