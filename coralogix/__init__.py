"""Client for the Coralogix management API."""

from .client import CoralogixClient, CoralogixConfig
from .errors import CoralogixAPIError, CoralogixError, CoralogixRequestError, CoralogixResponseError

__all__ = [
    "CoralogixAPIError",
    "CoralogixClient",
    "CoralogixConfig",
    "CoralogixError",
    "CoralogixRequestError",
    "CoralogixResponseError",
]
