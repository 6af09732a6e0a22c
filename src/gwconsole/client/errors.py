"""Typed exceptions and error handling decorator."""

from __future__ import annotations

import functools
from typing import TYPE_CHECKING, Any, Callable, TypeVar

from rich.console import Console

if TYPE_CHECKING:
    from gwconsole.models.gateway import Gateway

F = TypeVar("F", bound=Callable[..., Any])

err_console = Console(stderr=True)


class ConsoleError(Exception):
    """Base exception for gwconsole."""

    exit_code: int = 1


class ManagementConnectionError(ConsoleError):
    """Transport failure; the server may or may not have seen the request."""

    exit_code = 2

    def __init__(self, detail: str = "") -> None:
        self.detail = detail
        msg = "connection error"
        if detail:
            msg = f"{msg}: {detail}"
        super().__init__(msg)


class ConfigurationError(ConsoleError):
    """Invalid local configuration."""

    exit_code = 6


class ValidationError(ConsoleError):
    """Input rejected before anything was sent to the server."""

    exit_code = 7

    def __init__(self, detail: str = "") -> None:
        super().__init__(detail or "Validation error")


class ApiError(ConsoleError):
    """The management server reported a failure."""

    exit_code = 8

    def __init__(
        self,
        message: str,
        *,
        status_code: int | None = None,
        code: str | None = None,
    ) -> None:
        self.message = message
        self.status_code = status_code
        self.code = code
        super().__init__(message)


class AuthenticationError(ApiError):
    """Not logged in, login rejected, or session no longer valid."""

    exit_code = 3


class CloneError(ConsoleError):
    """Base for failures of the clone workflow."""


class CreateFailedError(CloneError):
    """The server rejected the create call; nothing was created."""

    exit_code = 9


class PublishFailedError(CloneError):
    """The gateway was created but publishing it failed.

    The object exists on the server in an unpublished state. ``gateway``
    holds what the create call returned so the publish can be retried.
    """

    exit_code = 10

    def __init__(self, message: str, gateway: Gateway) -> None:
        self.gateway = gateway
        super().__init__(message)


def error_handler(func: F) -> F:
    """Decorator that catches ConsoleError and prints user-friendly messages."""

    @functools.wraps(func)
    def wrapper(*args: Any, **kwargs: Any) -> Any:
        try:
            return func(*args, **kwargs)
        except PublishFailedError as exc:
            err_console.print(f"[bold red]Error:[/] {exc}")
            err_console.print(
                f"[yellow]Gateway '{exc.gateway.name}' ({exc.gateway.uid}) was "
                "created but not published. Run 'gwconsole gateway publish' "
                "to retry.[/]"
            )
            raise SystemExit(exc.exit_code)
        except ConsoleError as exc:
            err_console.print(f"[bold red]Error:[/] {exc}")
            raise SystemExit(exc.exit_code)
        except ValueError as exc:
            err_console.print(f"[bold red]Error:[/] {exc}")
            raise SystemExit(1)

    return wrapper  # type: ignore[return-value]
