"""Builders for the webhook and alert definition request bodies."""

from __future__ import annotations

import uuid
from collections.abc import Iterable

from coralogix.models import (
    AlertDefPriority,
    AlertDefProperties,
    AlertDefType,
    CreateOutgoingWebhookRequest,
    GenericWebhookConfig,
    IntegrationType,
    LabelFilters,
    LabelFilterType,
    LogFilterOperation,
    LogsFilter,
    LogSeverity,
    LogsSimpleFilter,
    LogsThreshold,
    LogsThresholdCondition,
    LogsThresholdConditionType,
    LogsThresholdRule,
    LogsTimeWindow,
    NotificationGroup,
    OutgoingWebhookInputData,
    TimeWindow,
    WebhookMethod,
    WebhooksSettings,
    WebhookType,
)

DEFAULT_WEBHOOK_NAME = "AWS fn webhook"
DEFAULT_THRESHOLD = 2
DEFAULT_TIME_WINDOW = LogsTimeWindow.MINUTES_30


def lucene_query_for_error_number(error_number: str) -> str:
    """Lucene query matching log bodies containing 'error: <error_number>'.

    The colon is escaped since it is a field separator in Lucene syntax.
    """
    return f'logRecord.body:"error\\: {error_number}"'


def default_alert_name(error_number: str) -> str:
    return f"Alert for increased error number {error_number} occurrence"


def build_outgoing_webhook_request(
    url: str,
    name: str = DEFAULT_WEBHOOK_NAME,
    method: WebhookMethod = WebhookMethod.GET,
    webhook_uuid: str | None = None,
) -> CreateOutgoingWebhookRequest:
    """Build a generic outgoing webhook request.

    A fresh UUID4 identifies the generic webhook config unless one is given.
    """
    return CreateOutgoingWebhookRequest(
        data=OutgoingWebhookInputData(
            name=name,
            type=WebhookType.GENERIC,
            url=url,
            generic_webhook=GenericWebhookConfig(
                method=method,
                uuid=webhook_uuid or str(uuid.uuid4()),
            ),
        )
    )


def _label_filter(value: str) -> list[LabelFilterType]:
    return [LabelFilterType(operation=LogFilterOperation.IS, value=value)]


def build_alert_def(
    webhook_external_id: int,
    *,
    name: str,
    description: str | None,
    lucene_query: str,
    application_name: str | None = None,
    subsystem_name: str | None = None,
    threshold: float = DEFAULT_THRESHOLD,
    time_window: LogsTimeWindow = DEFAULT_TIME_WINDOW,
    priority: AlertDefPriority = AlertDefPriority.P1,
    severities: Iterable[LogSeverity] = (LogSeverity.ERROR,),
) -> AlertDefProperties:
    """Build a logs-threshold alert that notifies the given webhook.

    The alert has a single rule: more than `threshold` matching logs within
    `time_window`. Matching logs satisfy the Lucene query and every label
    filter that is set. Empty application or subsystem names add no filter.
    """
    severity_list = list(severities)
    label_filters = LabelFilters(
        application_name=_label_filter(application_name) if application_name else None,
        subsystem_name=_label_filter(subsystem_name) if subsystem_name else None,
        severities=severity_list or None,
    )

    return AlertDefProperties(
        name=name,
        description=description,
        type=AlertDefType.LOGS_THRESHOLD,
        priority=priority,
        notification_group=NotificationGroup(
            webhooks=[WebhooksSettings(integration=IntegrationType(integration_id=webhook_external_id))]
        ),
        logs_threshold=LogsThreshold(
            rules=[
                LogsThresholdRule(
                    condition=LogsThresholdCondition(
                        condition_type=LogsThresholdConditionType.MORE_THAN,
                        threshold=threshold,
                        time_window=TimeWindow(logs_time_window_specific_value=time_window),
                    )
                )
            ],
            logs_filter=LogsFilter(
                simple_filter=LogsSimpleFilter(lucene_query=lucene_query, label_filters=label_filters)
            ),
        ),
    )
