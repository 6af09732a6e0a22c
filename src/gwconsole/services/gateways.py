"""Reading gateway objects: list, fetch, refreshable view and local search."""

from __future__ import annotations

import itertools
import logging
import threading
from collections.abc import Sequence
from typing import Any

import pydantic

from gwconsole.client.errors import ApiError, AuthenticationError, ConsoleError
from gwconsole.client.management import ManagementClient, Operation
from gwconsole.config.constants import DETAILS_LEVEL_FULL
from gwconsole.config.models import ConsoleSettings, Session
from gwconsole.models.gateway import Gateway

logger = logging.getLogger(__name__)


def require_session(session: Session) -> None:
    if not session.is_authenticated:
        raise AuthenticationError("not authenticated")


def list_gateways(
    session: Session, settings: ConsoleSettings | None = None,
) -> list[Gateway]:
    """Fetch all simple gateways at full detail, in server order."""
    require_session(session)
    settings = settings or ConsoleSettings()
    with ManagementClient.for_session(session, settings) as client:
        data = client.call(Operation.LIST_GATEWAYS, {
            "details-level": DETAILS_LEVEL_FULL,
            "limit": settings.list_limit,
        })
    gateways = [
        parse_gateway(obj, Operation.LIST_GATEWAYS) for obj in data.get("objects") or []
    ]
    logger.debug("Fetched %d gateways from %s", len(gateways), session.server_url)
    return gateways


def parse_gateway(obj: Any, operation: Operation) -> Gateway:
    try:
        return Gateway.model_validate(obj)
    except pydantic.ValidationError as exc:
        raise ApiError(
            f"malformed response to {operation.value}: {exc.error_count()} invalid field(s)"
        ) from exc


def unwrap_object(data: dict[str, Any]) -> dict[str, Any]:
    """Some servers wrap a single object as ``{"object": {...}}``."""
    inner = data.get("object")
    if "uid" not in data and isinstance(inner, dict):
        return inner
    return data


def get_gateway(
    session: Session, uid: str, settings: ConsoleSettings | None = None,
) -> Gateway:
    """Fetch one gateway by uid at full detail."""
    require_session(session)
    with ManagementClient.for_session(session, settings) as client:
        data = client.call(Operation.GET_GATEWAY, {
            "uid": uid,
            "details-level": DETAILS_LEVEL_FULL,
        })
    return parse_gateway(unwrap_object(data), Operation.GET_GATEWAY)


def filter_gateways(gateways: Sequence[Gateway], term: str) -> list[Gateway]:
    """Case-insensitive substring match on name and IPv4 address."""
    if not term.strip():
        return list(gateways)
    term = term.lower()
    return [
        gw for gw in gateways
        if term in gw.name.lower() or term in (gw.ipv4_address or "").lower()
    ]


class GatewayCollection:
    """Last fetched gateway list with last-refresh-wins updates.

    Every :meth:`refresh` takes a new token before fetching. When the fetch
    completes, its result is applied only if no later refresh has started;
    otherwise it is dropped and the current view is returned unchanged.
    """

    def __init__(
        self, session: Session, settings: ConsoleSettings | None = None,
    ) -> None:
        self.session = session
        self.settings = settings or ConsoleSettings()
        self._lock = threading.Lock()
        self._tokens = itertools.count(1)
        self._latest = 0
        self._gateways: tuple[Gateway, ...] = ()

    @property
    def gateways(self) -> list[Gateway]:
        with self._lock:
            return list(self._gateways)

    @property
    def refresh_token(self) -> int:
        return self._latest

    def _begin_refresh(self) -> int:
        with self._lock:
            self._latest = next(self._tokens)
            return self._latest

    def refresh(self) -> list[Gateway]:
        token = self._begin_refresh()
        try:
            fetched = list_gateways(self.session, self.settings)
        except ConsoleError:
            with self._lock:
                stale = token != self._latest
            if not stale:
                raise
            logger.debug("Discarding failure of superseded refresh %d", token)
            return self.gateways
        with self._lock:
            if token == self._latest:
                self._gateways = tuple(fetched)
            else:
                logger.debug(
                    "Discarding result of refresh %d, refresh %d is newer",
                    token, self._latest,
                )
            return list(self._gateways)

    def get(self, uid: str) -> Gateway:
        return get_gateway(self.session, uid, self.settings)

    def filter(self, term: str) -> list[Gateway]:
        return filter_gateways(self.gateways, term)
