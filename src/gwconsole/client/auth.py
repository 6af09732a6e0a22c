"""Session header authentication for the management API."""

from __future__ import annotations

from collections.abc import Generator

import httpx

from gwconsole.config.constants import SESSION_HEADER


class SessionTokenAuth(httpx.Auth):
    """Authenticate using the session id returned by login (X-chkp-sid header)."""

    def __init__(self, token: str) -> None:
        self.token = token

    def auth_flow(
        self, request: httpx.Request,
    ) -> Generator[httpx.Request, httpx.Response, None]:
        request.headers[SESSION_HEADER] = self.token
        yield request


def resolve_auth(session_token: str | None) -> httpx.Auth | None:
    """Resolve authentication from the session token, if there is one."""
    if session_token:
        return SessionTokenAuth(session_token)
    return None
