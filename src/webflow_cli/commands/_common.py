"""Shared helpers for CLI commands: client factory and options."""

from __future__ import annotations

from typing import Annotated

import typer

from webflow_cli.client.webflow import WebflowClient, new_client
from webflow_cli.config.manager import ConfigManager

# Shared Typer option type aliases
ProfileOpt = Annotated[
    str | None,
    typer.Option("--profile", "-p", help="Connection profile"),
]
TokenOpt = Annotated[
    str | None,
    typer.Option("--token", help="API token override"),
]
BaseUrlOpt = Annotated[
    str | None,
    typer.Option("--base-url", help="API base URL override"),
]
FormatOpt = Annotated[
    str,
    typer.Option("--format", "-f", help="Output format (table, json, yaml, csv)"),
]


def get_manager() -> ConfigManager:
    return ConfigManager()


def make_client(
    profile: str | None,
    token: str | None,
    base_url: str | None,
    *,
    page_size: int | None = None,
) -> WebflowClient:
    """Create a WebflowClient from CLI options, env vars, or config profile."""
    resolved = get_manager().resolve_profile(
        profile_name=profile, token=token, base_url=base_url,
    )
    return new_client(
        resolved.token or "",
        resolved.to_settings(),
        page_size=page_size,
    )
