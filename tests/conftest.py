"""
Root test configuration and fixtures for the alert provisioner.

Tests never reach the network: the client is always given a
requests.Session whose `request` method is a mock.

Note: sys.path manipulation is handled here to ensure imports work correctly.
"""

from __future__ import annotations

import sys
from pathlib import Path
from typing import Any
from unittest.mock import MagicMock

import pytest
import requests

# Add project root to path to allow imports
project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root))

from coralogix import CoralogixClient, CoralogixConfig  # noqa: E402
from provisioner.settings import Settings  # noqa: E402

TEST_API_KEY = "cxup_test_key"
TEST_BASE_URL = "https://api.test.coralogix.com/mgmt/openapi"

# Environment variables read by Settings; cleared so the host environment
# cannot leak into tests
SETTINGS_ENV_VARS = [
    "CORALOGIX_API_KEY",
    "CORALOGIX_API_URL",
    "CORALOGIX_API_TIMEOUT",
    "WEBHOOK_URL",
    "WEBHOOK_NAME",
    "ERROR_NUMBER",
    "APPLICATION_NAME",
    "SUBSYSTEM_NAME",
    "ALERT_THRESHOLD",
    "ALERT_NAME",
    "ALERT_DESCRIPTION",
    "LOG_LEVEL",
]


def create_mock_response(
    status_code: int = 200,
    json_body: Any = None,
    text: str = "",
) -> MagicMock:
    """Create a mock requests.Response."""
    response = MagicMock()
    response.status_code = status_code
    response.ok = 200 <= status_code < 300
    response.text = text
    if json_body is None:
        response.json.side_effect = ValueError("No JSON object could be decoded")
    else:
        response.json.return_value = json_body
    return response


@pytest.fixture(autouse=True)
def clean_env(monkeypatch: pytest.MonkeyPatch) -> None:
    for name in SETTINGS_ENV_VARS:
        monkeypatch.delenv(name, raising=False)


@pytest.fixture
def make_response():
    """Factory for mock HTTP responses."""
    return create_mock_response


@pytest.fixture
def mock_session() -> requests.Session:
    """A real Session (so headers behave) whose request method is mocked."""
    session = requests.Session()
    session.request = MagicMock()  # type: ignore[method-assign]
    return session


@pytest.fixture
def client(mock_session: requests.Session) -> CoralogixClient:
    config = CoralogixConfig(api_key=TEST_API_KEY, base_url=TEST_BASE_URL, timeout=5)
    return CoralogixClient(config, session=mock_session)


@pytest.fixture
def settings() -> Settings:
    """Settings with defaults and a test API key, ignoring any .env file."""
    return Settings(_env_file=None, coralogix_api_key=TEST_API_KEY)  # type: ignore[call-arg]


@pytest.fixture
def webhook_responses(make_response):
    """Successful responses for the three provisioning calls, in order."""
    return [
        make_response(json_body={"id": "wh-123"}),
        make_response(
            json_body={
                "webhook": {
                    "id": "wh-123",
                    "name": "AWS fn webhook",
                    "url": "https://example.com/hook",
                    "externalId": 4242,
                    "type": "GENERIC",
                }
            }
        ),
        make_response(
            json_body={
                "alertDef": {
                    "id": "alert-1",
                    "alertVersionId": "version-1",
                    "alertDefProperties": {"name": "ignored"},
                }
            }
        ),
    ]
