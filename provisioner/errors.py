"""Provisioner error classes."""

from __future__ import annotations


class ConfigError(Exception):
    """Raised when required configuration is missing or invalid."""

    pass


class ProvisioningError(Exception):
    """Raised when a provisioning step fails.

    Wraps the underlying Coralogix error and records which step failed.
    """

    def __init__(self, step: str, cause: Exception):
        super().__init__(f"Error {step}: {cause}")
        self.step = step
        self.cause = cause
