"""Login and logout against the management server."""

from __future__ import annotations

import logging

import pydantic

from gwconsole.client.errors import (
    ApiError,
    AuthenticationError,
    ManagementConnectionError,
    ValidationError,
)
from gwconsole.client.management import ManagementClient, Operation
from gwconsole.config.models import ConsoleSettings, Session
from gwconsole.config.store import SESSION_TOKEN_KEY, SessionStore

logger = logging.getLogger(__name__)


class Authenticator:
    """Owns the persisted Session: the only writer of login state."""

    def __init__(
        self,
        store: SessionStore | None = None,
        settings: ConsoleSettings | None = None,
    ) -> None:
        self.store = store or SessionStore()
        self.settings = settings or ConsoleSettings()

    def current_session(self) -> Session:
        return self.store.load()

    def login(
        self,
        server_url: str,
        username: str,
        password: str,
        domain: str | None = None,
    ) -> Session:
        """Exchange credentials for a session id and persist the new Session."""
        if not server_url or not server_url.strip():
            raise ValidationError("server URL required")
        try:
            server_url = Session(server_url=server_url).server_url
        except pydantic.ValidationError as exc:
            raise ValidationError(f"Invalid server URL {server_url!r}") from exc

        payload: dict[str, object] = {
            "username": username,
            "password": password,
            "enter-last-published-session": False,
        }
        domain = domain or self.settings.default_domain
        if domain:
            payload["domain"] = domain

        with ManagementClient(server_url, settings=self.settings) as client:
            try:
                data = client.call(Operation.LOGIN, payload)
            except ApiError as exc:
                raise AuthenticationError(
                    exc.message or "Login failed",
                    status_code=exc.status_code,
                    code=exc.code,
                ) from exc

        session = Session(server_url=server_url, session_token=str(data["sid"]))
        self.store.save(session)
        logger.info("Logged in to %s as %s", server_url, username)
        return session

    def logout(self, session: Session) -> None:
        """End the server session if possible; local state is always cleared."""
        try:
            if session.is_authenticated:
                with ManagementClient.for_session(session, self.settings) as client:
                    client.call(Operation.LOGOUT)
                logger.info("Logged out of %s", session.server_url)
        except (ApiError, ManagementConnectionError) as exc:
            logger.warning("Logout request failed, clearing local session anyway: %s", exc)
        finally:
            self.store.remove(SESSION_TOKEN_KEY)

    def clear(self) -> None:
        self.store.clear()
