"""Pydantic models for client settings and CLI configuration."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field, field_validator

from webflow_cli.config.constants import (
    DEFAULT_API_VERSION,
    DEFAULT_BASE_URL,
    DEFAULT_PAGE_SIZE,
    DEFAULT_TIMEOUT,
)


def _validate_base_url(v: str) -> str:
    if not v.startswith(("http://", "https://")):
        raise ValueError("URL must start with http:// or https://")
    return v.rstrip("/")


class ClientSettings(BaseModel):
    """Immutable settings applied when a client is constructed."""

    model_config = ConfigDict(frozen=True)

    base_url: str = Field(
        default=DEFAULT_BASE_URL, description="API base URL",
    )
    timeout: float = Field(
        default=DEFAULT_TIMEOUT, gt=0, le=600, description="Request timeout in seconds",
    )
    page_size: int = Field(
        default=DEFAULT_PAGE_SIZE, ge=0, description="Items per page when paginating",
    )
    api_version: str = Field(
        default=DEFAULT_API_VERSION, description="Value of the Accept-Version header",
    )

    @field_validator("base_url")
    @classmethod
    def validate_base_url(cls, v: str) -> str:
        return _validate_base_url(v)


class WebflowProfile(BaseModel):
    """A named connection profile."""

    name: str
    token: str | None = Field(default=None, description="Webflow API token")
    base_url: str = Field(default=DEFAULT_BASE_URL, description="API base URL")
    timeout: float = Field(
        default=DEFAULT_TIMEOUT, gt=0, le=600, description="Request timeout in seconds",
    )
    page_size: int = Field(
        default=DEFAULT_PAGE_SIZE, ge=0, description="Items per page",
    )

    @field_validator("base_url")
    @classmethod
    def validate_base_url(cls, v: str) -> str:
        return _validate_base_url(v)

    @property
    def auth_configured(self) -> bool:
        return bool(self.token)

    def to_settings(self) -> ClientSettings:
        return ClientSettings(
            base_url=self.base_url,
            timeout=self.timeout,
            page_size=self.page_size,
        )


class CLIConfig(BaseModel):
    """Root configuration model."""

    default_profile: str | None = None
    default_format: str = "table"
    profiles: dict[str, WebflowProfile] = Field(default_factory=dict)
