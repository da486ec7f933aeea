"""Provision a Coralogix log-threshold alert that notifies an outgoing webhook."""
