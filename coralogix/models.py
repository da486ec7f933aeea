"""Request and response models for the Coralogix management API.

Field names are snake_case in Python and camelCase on the wire. Use
`to_payload()` to get the JSON body for a request.
"""

from __future__ import annotations

from enum import Enum
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, field_validator
from pydantic.alias_generators import to_camel


class CoralogixModel(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True, extra="ignore")

    def to_payload(self) -> dict[str, Any]:
        """Serialize to the camelCase JSON body, omitting unset optional fields."""
        return self.model_dump(mode="json", by_alias=True, exclude_none=True)


# === Outgoing webhooks (v1) ===


class WebhookType(Enum):
    GENERIC = "GENERIC"


class WebhookMethod(Enum):
    GET = "GET"
    POST = "POST"
    PUT = "PUT"


class GenericWebhookConfig(CoralogixModel):
    method: WebhookMethod = WebhookMethod.GET
    uuid: str


class OutgoingWebhookInputData(CoralogixModel):
    name: str
    type: WebhookType = WebhookType.GENERIC
    url: str | None = None
    generic_webhook: GenericWebhookConfig | None = None


class CreateOutgoingWebhookRequest(CoralogixModel):
    data: OutgoingWebhookInputData


class CreateOutgoingWebhookResponse(CoralogixModel):
    id: str


class OutgoingWebhook(CoralogixModel):
    """Webhook as returned by the API.

    `external_id` is the numeric id that alert notification groups refer to.
    The API may encode it as a JSON string since it is an int64.
    """

    id: str
    external_id: int
    name: str | None = None
    url: str | None = None

    @field_validator("external_id", mode="before")
    @classmethod
    def reject_bool_external_id(cls, v: Any) -> Any:
        # bool is an int subclass and would otherwise coerce to 0 or 1
        if isinstance(v, bool):
            raise ValueError("externalId must be a number or numeric string, not a boolean")
        return v


class GetOutgoingWebhookResponse(CoralogixModel):
    webhook: OutgoingWebhook


# === Alert definitions (v3) ===


class AlertDefType(Enum):
    LOGS_THRESHOLD = "ALERT_DEF_TYPE_LOGS_THRESHOLD"


class AlertDefPriority(Enum):
    P1 = "ALERT_DEF_PRIORITY_P1"
    P2 = "ALERT_DEF_PRIORITY_P2"
    P3 = "ALERT_DEF_PRIORITY_P3"
    P4 = "ALERT_DEF_PRIORITY_P4"
    P5 = "ALERT_DEF_PRIORITY_P5_OR_UNSPECIFIED"


class LogsThresholdConditionType(Enum):
    MORE_THAN = "LOGS_THRESHOLD_CONDITION_TYPE_MORE_THAN_OR_UNSPECIFIED"
    LESS_THAN = "LOGS_THRESHOLD_CONDITION_TYPE_LESS_THAN"


class LogsTimeWindow(Enum):
    MINUTES_5 = "LOGS_TIME_WINDOW_VALUE_MINUTES_5_OR_UNSPECIFIED"
    MINUTES_10 = "LOGS_TIME_WINDOW_VALUE_MINUTES_10"
    MINUTES_15 = "LOGS_TIME_WINDOW_VALUE_MINUTES_15"
    MINUTES_20 = "LOGS_TIME_WINDOW_VALUE_MINUTES_20"
    MINUTES_30 = "LOGS_TIME_WINDOW_VALUE_MINUTES_30"
    HOUR_1 = "LOGS_TIME_WINDOW_VALUE_HOUR_1"
    HOURS_2 = "LOGS_TIME_WINDOW_VALUE_HOURS_2"
    HOURS_4 = "LOGS_TIME_WINDOW_VALUE_HOURS_4"
    HOURS_6 = "LOGS_TIME_WINDOW_VALUE_HOURS_6"
    HOURS_12 = "LOGS_TIME_WINDOW_VALUE_HOURS_12"
    HOURS_24 = "LOGS_TIME_WINDOW_VALUE_HOURS_24"
    HOURS_36 = "LOGS_TIME_WINDOW_VALUE_HOURS_36"


class LogFilterOperation(Enum):
    IS = "LOG_FILTER_OPERATION_TYPE_IS_OR_UNSPECIFIED"
    INCLUDES = "LOG_FILTER_OPERATION_TYPE_INCLUDES"
    ENDS_WITH = "LOG_FILTER_OPERATION_TYPE_ENDS_WITH"
    STARTS_WITH = "LOG_FILTER_OPERATION_TYPE_STARTS_WITH"


class LogSeverity(Enum):
    VERBOSE = "LOG_SEVERITY_VERBOSE_UNSPECIFIED"
    DEBUG = "LOG_SEVERITY_DEBUG"
    INFO = "LOG_SEVERITY_INFO"
    WARNING = "LOG_SEVERITY_WARNING"
    ERROR = "LOG_SEVERITY_ERROR"
    CRITICAL = "LOG_SEVERITY_CRITICAL"


class IntegrationType(CoralogixModel):
    integration_id: int | None = None  # Webhook external id


class WebhooksSettings(CoralogixModel):
    integration: IntegrationType


class NotificationGroup(CoralogixModel):
    webhooks: list[WebhooksSettings] | None = None


class TimeWindow(CoralogixModel):
    logs_time_window_specific_value: LogsTimeWindow | None = None


class LogsThresholdCondition(CoralogixModel):
    condition_type: LogsThresholdConditionType = LogsThresholdConditionType.MORE_THAN
    threshold: float = Field(ge=0)
    time_window: TimeWindow


class LogsThresholdRule(CoralogixModel):
    condition: LogsThresholdCondition


class LabelFilterType(CoralogixModel):
    operation: LogFilterOperation = LogFilterOperation.IS
    value: str


class LabelFilters(CoralogixModel):
    application_name: list[LabelFilterType] | None = None
    subsystem_name: list[LabelFilterType] | None = None
    severities: list[LogSeverity] | None = None


class LogsSimpleFilter(CoralogixModel):
    lucene_query: str | None = None
    label_filters: LabelFilters | None = None


class LogsFilter(CoralogixModel):
    simple_filter: LogsSimpleFilter | None = None


class LogsThreshold(CoralogixModel):
    rules: list[LogsThresholdRule]
    logs_filter: LogsFilter | None = None


class AlertDefProperties(CoralogixModel):
    name: str
    description: str | None = None
    type: AlertDefType = AlertDefType.LOGS_THRESHOLD
    priority: AlertDefPriority = AlertDefPriority.P1
    notification_group: NotificationGroup | None = None
    logs_threshold: LogsThreshold | None = None


class AlertDef(CoralogixModel):
    id: str
    alert_version_id: str


class CreateAlertDefResponse(CoralogixModel):
    alert_def: AlertDef
