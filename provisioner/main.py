#!/usr/bin/env python3
"""
Provision a Coralogix log-threshold alert wired to an outgoing webhook.

Steps, each run exactly once and in order:
    1. Create a generic outgoing webhook pointing at WEBHOOK_URL
    2. Look up the webhook's numeric external id
    3. Create an alert definition that notifies that webhook when logs
       matching 'error: <ERROR_NUMBER>' exceed ALERT_THRESHOLD in 30 minutes

The first failing step stops the run. Nothing is retried or rolled back.

Usage:
    provision-coralogix-alert [--env-file .env] [--debug] [--dry-run]
"""

from __future__ import annotations

import argparse
import json
import sys
from dataclasses import dataclass

from dotenv import load_dotenv

from coralogix import CoralogixClient, CoralogixError
from coralogix.models import AlertDefProperties

from .alerts import (
    build_alert_def,
    build_outgoing_webhook_request,
    default_alert_name,
    lucene_query_for_error_number,
)
from .errors import ConfigError, ProvisioningError
from .logging_config import configure_logging, get_logger
from .settings import Settings, load_settings

logger = get_logger(__name__)

# Stand-in for the webhook external id when nothing is sent
DRY_RUN_EXTERNAL_ID = 0


@dataclass
class ProvisionResult:
    """Identifiers of everything created by one run."""

    webhook_id: str
    webhook_external_id: int
    alert_id: str
    alert_version_id: str


def alert_def_from_settings(settings: Settings, webhook_external_id: int) -> AlertDefProperties:
    """Build the alert definition described by the settings."""
    return build_alert_def(
        webhook_external_id,
        name=settings.alert_name or default_alert_name(settings.error_number),
        description=settings.alert_description,
        lucene_query=lucene_query_for_error_number(settings.error_number),
        application_name=settings.application_name,
        subsystem_name=settings.subsystem_name,
        threshold=settings.alert_threshold,
    )


def provision(client: CoralogixClient, settings: Settings) -> ProvisionResult:
    """Run the three provisioning calls in order.

    Raises:
        ProvisioningError: naming the step that failed, wrapping the API error
    """
    try:
        webhook_id = client.create_outgoing_webhook(
            build_outgoing_webhook_request(settings.webhook_url, name=settings.webhook_name)
        )
    except CoralogixError as e:
        raise ProvisioningError("creating outgoing webhook", e) from e
    logger.info(f"Outgoing webhook created successfully with ID: {webhook_id}")

    try:
        webhook_external_id = client.get_webhook_external_id(webhook_id)
    except CoralogixError as e:
        raise ProvisioningError("getting webhook external ID", e) from e
    logger.info(f"Webhook external ID: {webhook_external_id}")

    try:
        alert_def = client.create_alert_def(alert_def_from_settings(settings, webhook_external_id))
    except CoralogixError as e:
        raise ProvisioningError("creating alert definition", e) from e
    logger.info(f"Alert created successfully with ID: {alert_def.id}, Version ID: {alert_def.alert_version_id}")

    return ProvisionResult(
        webhook_id=webhook_id,
        webhook_external_id=webhook_external_id,
        alert_id=alert_def.id,
        alert_version_id=alert_def.alert_version_id,
    )


def dry_run(settings: Settings) -> None:
    """Log the request bodies that a real run would send."""
    webhook_request = build_outgoing_webhook_request(settings.webhook_url, name=settings.webhook_name)
    alert_def = alert_def_from_settings(settings, DRY_RUN_EXTERNAL_ID)

    logger.info(f"Dry run: would POST to {settings.coralogix_api_url}")
    logger.info("Outgoing webhook request:\n" + json.dumps(webhook_request.to_payload(), indent=2))
    logger.info(
        f"Alert definition request (integrationId {DRY_RUN_EXTERNAL_ID} is replaced by the real external id):\n"
        + json.dumps(alert_def.to_payload(), indent=2)
    )


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Create a Coralogix outgoing webhook and a log-threshold alert that notifies it"
    )
    parser.add_argument("--env-file", default=".env", help="Path to the .env file (default: .env)")
    parser.add_argument("--debug", action="store_true", help="Log request URLs and bodies")
    parser.add_argument("--dry-run", action="store_true", help="Show the requests without calling the API")
    return parser


def main(argv: list[str] | None = None) -> int:
    """Main entry point. Returns the process exit code."""
    args = build_parser().parse_args(argv)

    # Load .env before configuring logging so LOG_LEVEL from the file applies
    load_dotenv(args.env_file)
    configure_logging(source="provision", debug=args.debug)

    try:
        settings = load_settings(args.env_file, require_api_key=not args.dry_run)
        if args.dry_run:
            dry_run(settings)
            return 0
        client = CoralogixClient(settings.coralogix_config())
    except ConfigError as e:
        logger.error(str(e))
        return 1

    try:
        with client:
            result = provision(client, settings)
    except ProvisioningError as e:
        logger.error(str(e))
        return 1

    print(f"webhook_id={result.webhook_id}")
    print(f"webhook_external_id={result.webhook_external_id}")
    print(f"alert_id={result.alert_id}")
    print(f"alert_version_id={result.alert_version_id}")
    return 0


if __name__ == "__main__":
    sys.exit(main())
