"""Configuration types for the REST client."""

from __future__ import annotations

import dataclasses
import uuid
from dataclasses import dataclass, field
from typing import Dict, Optional, Union

__all__ = [
    "AdvancedOptions",
    "ClientConfig",
    "ClientConfigBuilder",
    "DEFAULT_SERVICE_NAME",
    "DEFAULT_BASE_API_URL",
    "DEFAULT_API_TIMEOUT_SECS",
]

DEFAULT_SERVICE_NAME = "introspection-client"
"""Service name used when none is configured."""

DEFAULT_BASE_API_URL = "https://api.introspection.dev"
"""Default base URL of the REST API (tasks and files)."""

DEFAULT_API_TIMEOUT_SECS = 30
"""Default HTTP timeout for REST API calls, in seconds."""


@dataclass
class AdvancedOptions:
    """Advanced options for the REST client: headers, API host and debugging."""

    base_api_url: Optional[str] = None
    """Base URL of the REST API; falls back to the environment or the default."""

    additional_headers: Optional[Dict[str, str]] = None
    """Extra HTTP headers sent with every request."""

    debug: bool = False
    """Enable debug logging."""


def _as_uuid(value: Union[uuid.UUID, str]) -> uuid.UUID:
    if isinstance(value, uuid.UUID):
        return value
    if isinstance(value, str):
        return uuid.UUID(value)
    raise TypeError(f"project_id must be a UUID or a string, not {type(value).__name__}")


@dataclass
class ClientConfig:
    """Configuration for the REST client."""

    token: Optional[str] = None
    """Authentication token (env: INTROSPECTION_TOKEN)."""

    service_name: Optional[str] = None
    """Service name (env: INTROSPECTION_SERVICE_NAME)."""

    project_id: Optional[uuid.UUID] = None
    """Default project ID used by calls that need one (env: INTROSPECTION_PROJECT_ID)."""

    advanced: Optional[AdvancedOptions] = None
    """Advanced REST options."""

    @classmethod
    def builder(cls) -> "ClientConfigBuilder":
        """Return a fresh builder."""
        return ClientConfigBuilder()

    @classmethod
    def with_token(cls, token: str) -> "ClientConfig":
        """Create a configuration holding only a token."""
        return cls(token=str(token))

    def with_advanced(self, advanced: AdvancedOptions) -> "ClientConfig":
        """Return a copy of this configuration with the given advanced options."""
        return dataclasses.replace(self, advanced=advanced)


@dataclass
class ClientConfigBuilder:
    """Step-by-step construction of a ClientConfig; every field is optional."""

    _token: Optional[str] = field(default=None, repr=False)
    _service_name: Optional[str] = field(default=None, repr=False)
    _project_id: Optional[uuid.UUID] = field(default=None, repr=False)
    _advanced: Optional[AdvancedOptions] = field(default=None, repr=False)

    def token(self, token: str) -> "ClientConfigBuilder":
        """Set the authentication token."""
        self._token = str(token)
        return self

    def service_name(self, service_name: str) -> "ClientConfigBuilder":
        """Set the service name."""
        self._service_name = str(service_name)
        return self

    def project_id(self, project_id: Union[uuid.UUID, str]) -> "ClientConfigBuilder":
        """Set the default project ID from a UUID or its string form."""
        self._project_id = _as_uuid(project_id)
        return self

    def advanced(self, advanced: AdvancedOptions) -> "ClientConfigBuilder":
        """Set the advanced options."""
        self._advanced = advanced
        return self

    def build(self) -> ClientConfig:
        """Build the configuration; unset fields stay None."""
        return ClientConfig(
            token=self._token,
            service_name=self._service_name,
            project_id=self._project_id,
            advanced=self._advanced,
        )