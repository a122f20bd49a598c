"""Typed exceptions and error handling decorator."""

from __future__ import annotations

import functools
from typing import Any, Callable, TypeVar

from rich.console import Console

F = TypeVar("F", bound=Callable[..., Any])

err_console = Console(stderr=True)


class WebflowCLIError(Exception):
    """Base exception for webflow-cli."""

    exit_code: int = 1


class TransportError(WebflowCLIError):
    """The HTTP call could not complete (network failure or timeout)."""

    exit_code = 2


class ApiError(WebflowCLIError):
    """Well-formed error reported by the Webflow API."""

    exit_code = 3

    def __init__(self, code: int, name: str, status_code: int | None = None) -> None:
        self.code = code
        self.name = name
        self.status_code = status_code
        super().__init__(f"api returned an error ({code}): {name}")


class DecodeError(WebflowCLIError):
    """A response body was not valid JSON or did not match the expected shape."""

    exit_code = 4


class SerializationError(WebflowCLIError):
    """A request body could not be encoded as JSON."""

    exit_code = 5


class ConfigurationError(WebflowCLIError):
    """Invalid client construction input or CLI configuration."""

    exit_code = 6


class RequestConstructionError(WebflowCLIError):
    """The HTTP method or URL of a request is invalid."""

    exit_code = 7


def error_handler(func: F) -> F:
    """Decorator that catches WebflowCLIError and prints user-friendly messages."""

    @functools.wraps(func)
    def wrapper(*args: Any, **kwargs: Any) -> Any:
        try:
            return func(*args, **kwargs)
        except WebflowCLIError as exc:
            err_console.print(f"[bold red]Error:[/] {exc}")
            raise SystemExit(exc.exit_code)
        except ValueError as exc:
            err_console.print(f"[bold red]Error:[/] {exc}")
            raise SystemExit(1)

    return wrapper  # type: ignore[return-value]
