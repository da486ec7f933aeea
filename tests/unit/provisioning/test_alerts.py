"""Tests for webhook and alert definition builders."""

from __future__ import annotations

import uuid

import pytest
from pydantic import ValidationError

from coralogix.models import AlertDefPriority, LogSeverity, LogsTimeWindow, WebhookMethod
from provisioner.alerts import (
    build_alert_def,
    build_outgoing_webhook_request,
    default_alert_name,
    lucene_query_for_error_number,
)


class TestLuceneQuery:
    def test_escapes_colon(self):
        assert lucene_query_for_error_number("50") == 'logRecord.body:"error\\: 50"'

    def test_uses_given_error_number(self):
        assert lucene_query_for_error_number("404").endswith('error\\: 404"')


def test_default_alert_name():
    assert default_alert_name("50") == "Alert for increased error number 50 occurrence"


class TestBuildOutgoingWebhookRequest:
    def test_generic_get_webhook(self):
        request = build_outgoing_webhook_request("https://example.com/hook", webhook_uuid="fixed")

        assert request.to_payload() == {
            "data": {
                "name": "AWS fn webhook",
                "type": "GENERIC",
                "url": "https://example.com/hook",
                "genericWebhook": {"method": "GET", "uuid": "fixed"},
            }
        }

    def test_generates_fresh_uuid(self):
        first = build_outgoing_webhook_request("https://example.com/hook")
        second = build_outgoing_webhook_request("https://example.com/hook")

        first_uuid = first.data.generic_webhook.uuid
        assert uuid.UUID(first_uuid).version == 4
        assert first_uuid != second.data.generic_webhook.uuid

    def test_custom_name_and_method(self):
        request = build_outgoing_webhook_request("https://example.com/hook", name="Other", method=WebhookMethod.POST)

        payload = request.to_payload()
        assert payload["data"]["name"] == "Other"
        assert payload["data"]["genericWebhook"]["method"] == "POST"


class TestBuildAlertDef:
    """Test the logs-threshold alert body."""

    def _payload(self, **overrides):
        kwargs = {
            "name": "Alert for increased error number 50 occurrence",
            "description": "This alert triggers when the error number exceeds a threshold.",
            "lucene_query": 'logRecord.body:"error\\: 50"',
            "application_name": "sample-app",
            "subsystem_name": "yak",
        }
        kwargs.update(overrides)
        return build_alert_def(4242, **kwargs).to_payload()

    def test_full_payload(self):
        assert self._payload() == {
            "name": "Alert for increased error number 50 occurrence",
            "description": "This alert triggers when the error number exceeds a threshold.",
            "type": "ALERT_DEF_TYPE_LOGS_THRESHOLD",
            "priority": "ALERT_DEF_PRIORITY_P1",
            "notificationGroup": {"webhooks": [{"integration": {"integrationId": 4242}}]},
            "logsThreshold": {
                "rules": [
                    {
                        "condition": {
                            "conditionType": "LOGS_THRESHOLD_CONDITION_TYPE_MORE_THAN_OR_UNSPECIFIED",
                            "threshold": 2,
                            "timeWindow": {"logsTimeWindowSpecificValue": "LOGS_TIME_WINDOW_VALUE_MINUTES_30"},
                        }
                    }
                ],
                "logsFilter": {
                    "simpleFilter": {
                        "luceneQuery": 'logRecord.body:"error\\: 50"',
                        "labelFilters": {
                            "applicationName": [
                                {"operation": "LOG_FILTER_OPERATION_TYPE_IS_OR_UNSPECIFIED", "value": "sample-app"}
                            ],
                            "subsystemName": [
                                {"operation": "LOG_FILTER_OPERATION_TYPE_IS_OR_UNSPECIFIED", "value": "yak"}
                            ],
                            "severities": ["LOG_SEVERITY_ERROR"],
                        },
                    }
                },
            },
        }

    def test_custom_threshold_window_and_priority(self):
        payload = self._payload(threshold=10, time_window=LogsTimeWindow.HOUR_1, priority=AlertDefPriority.P3)

        condition = payload["logsThreshold"]["rules"][0]["condition"]
        assert condition["threshold"] == 10
        assert condition["timeWindow"]["logsTimeWindowSpecificValue"] == "LOGS_TIME_WINDOW_VALUE_HOUR_1"
        assert payload["priority"] == "ALERT_DEF_PRIORITY_P3"

    def test_empty_labels_are_omitted(self):
        payload = self._payload(application_name="", subsystem_name=None)

        label_filters = payload["logsThreshold"]["logsFilter"]["simpleFilter"]["labelFilters"]
        assert label_filters == {"severities": ["LOG_SEVERITY_ERROR"]}

    def test_multiple_severities(self):
        payload = self._payload(severities=[LogSeverity.ERROR, LogSeverity.CRITICAL])

        label_filters = payload["logsThreshold"]["logsFilter"]["simpleFilter"]["labelFilters"]
        assert label_filters["severities"] == ["LOG_SEVERITY_ERROR", "LOG_SEVERITY_CRITICAL"]

    def test_no_description_is_omitted(self):
        assert "description" not in self._payload(description=None)

    def test_negative_threshold_rejected(self):
        with pytest.raises(ValidationError):
            self._payload(threshold=-1)
