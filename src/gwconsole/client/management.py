"""Management server HTTP client."""

from __future__ import annotations

import json
import logging
from enum import Enum
from typing import Any

import httpx

from gwconsole.client.auth import resolve_auth
from gwconsole.client.errors import (
    ApiError,
    AuthenticationError,
    ManagementConnectionError,
    ValidationError,
)
from gwconsole.config.constants import DEFAULT_API_BASE
from gwconsole.config.models import ConsoleSettings, Session

logger = logging.getLogger(__name__)


class Operation(str, Enum):
    """Web API commands this console issues."""

    LOGIN = "login"
    LOGOUT = "logout"
    LIST_GATEWAYS = "show-simple-gateways"
    GET_GATEWAY = "show-simple-gateway"
    CREATE_GATEWAY = "add-simple-gateway"
    PUBLISH = "publish"


# A 2xx reply counts as success only if it carries one of these keys.
# Logout has no marker; any 2xx reply is accepted.
_SUCCESS_MARKERS: dict[Operation, tuple[str, ...]] = {
    Operation.LOGIN: ("sid",),
    Operation.LOGOUT: (),
    Operation.LIST_GATEWAYS: ("objects",),
    Operation.GET_GATEWAY: ("uid", "object"),
    Operation.CREATE_GATEWAY: ("uid", "object"),
    Operation.PUBLISH: ("task-id", "task_id"),
}


class ManagementClient:
    """Synchronous client for the management web API.

    One instance is bound to a server URL and, after login, a session token.
    Each :meth:`call` performs exactly one POST and never retries.
    """

    def __init__(
        self,
        server_url: str,
        session_token: str | None = None,
        settings: ConsoleSettings | None = None,
    ) -> None:
        if not server_url:
            raise ValidationError("server URL required")
        settings = settings or ConsoleSettings()
        self.server_url = server_url.rstrip("/")
        self.session_token = session_token
        self.base_url = f"{self.server_url}{DEFAULT_API_BASE}"
        if not settings.verify_ssl:
            logger.warning("TLS certificate verification is disabled")
        self._client = httpx.Client(
            base_url=self.base_url,
            auth=resolve_auth(session_token),
            verify=settings.verify_ssl,
            timeout=settings.timeout,
            headers={"Accept": "application/json"},
        )

    @classmethod
    def for_session(
        cls, session: Session, settings: ConsoleSettings | None = None,
    ) -> ManagementClient:
        return cls(session.server_url, session.session_token, settings)

    def close(self) -> None:
        self._client.close()

    def __enter__(self) -> ManagementClient:
        return self

    def __exit__(self, *args: Any) -> None:
        self.close()

    def _decode(self, response: httpx.Response) -> dict[str, Any]:
        try:
            data = response.json()
        except (json.JSONDecodeError, UnicodeDecodeError) as exc:
            raise ManagementConnectionError(
                f"malformed response from {self.server_url} "
                f"(HTTP {response.status_code})"
            ) from exc
        if not isinstance(data, dict):
            raise ManagementConnectionError(
                f"unexpected response from {self.server_url}: expected a JSON object"
            )
        return data

    def _handle_response(
        self, operation: Operation, response: httpx.Response,
    ) -> dict[str, Any]:
        data = self._decode(response)
        markers = _SUCCESS_MARKERS[operation]
        if response.is_success and (
            not markers or any(key in data for key in markers)
        ):
            return data
        message = data.get("message") or f"{operation.value} failed"
        code = data.get("code")
        status = response.status_code
        logger.debug(
            "%s rejected (HTTP %s, code=%s): %s", operation.value, status, code, message,
        )
        if status == 401:
            raise AuthenticationError(message, status_code=status, code=code)
        raise ApiError(message, status_code=status, code=code)

    def call(
        self, operation: Operation, payload: dict[str, Any] | None = None,
    ) -> dict[str, Any]:
        """Issue one command and return the decoded reply.

        Raises :class:`ApiError` when the server reports a failure and
        :class:`ManagementConnectionError` when no usable reply arrived.
        """
        operation = Operation(operation)
        if operation is not Operation.LOGIN and not self.session_token:
            raise AuthenticationError("not authenticated")
        logger.debug("POST %s/%s", self.base_url, operation.value)
        try:
            response = self._client.post(f"/{operation.value}", json=payload or {})
        except httpx.TimeoutException as exc:
            raise ManagementConnectionError(
                f"request to {self.server_url} timed out: {exc}"
            ) from exc
        except (httpx.InvalidURL, httpx.UnsupportedProtocol) as exc:
            raise ManagementConnectionError(
                f"invalid server URL {self.server_url}: {exc}"
            ) from exc
        except httpx.HTTPError as exc:
            raise ManagementConnectionError(
                f"cannot connect to {self.server_url}: {exc}"
            ) from exc
        return self._handle_response(operation, response)
