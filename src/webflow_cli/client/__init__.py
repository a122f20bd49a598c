"""HTTP client, authentication and error types."""

from webflow_cli.client.errors import (
    ApiError,
    ConfigurationError,
    DecodeError,
    RequestConstructionError,
    SerializationError,
    TransportError,
    WebflowCLIError,
)
from webflow_cli.client.webflow import WebflowClient, new_client

__all__ = [
    "ApiError",
    "ConfigurationError",
    "DecodeError",
    "RequestConstructionError",
    "SerializationError",
    "TransportError",
    "WebflowCLIError",
    "WebflowClient",
    "new_client",
]
