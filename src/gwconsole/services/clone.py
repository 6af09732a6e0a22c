"""Create a gateway from an existing one, then publish it."""

from __future__ import annotations

import logging
from typing import Any

import pydantic

from gwconsole.client.errors import (
    ApiError,
    CreateFailedError,
    ManagementConnectionError,
    PublishFailedError,
    ValidationError,
)
from gwconsole.client.management import ManagementClient, Operation
from gwconsole.config.models import ConsoleSettings, Session
from gwconsole.models.gateway import CloneRequest, Gateway
from gwconsole.services.gateways import require_session, unwrap_object

logger = logging.getLogger(__name__)


def validate_clone_request(request: CloneRequest) -> None:
    missing = [
        label for label, value in (
            ("name", request.name), ("IPv4 address", request.ipv4_address),
        )
        if not value or not value.strip()
    ]
    if missing:
        raise ValidationError(f"Clone requires a non-empty {' and '.join(missing)}")


def build_clone_payload(source: Gateway, request: CloneRequest) -> dict[str, Any]:
    """Create payload for ``add-simple-gateway``.

    Only the new identity plus version, OS, interfaces and firewall
    settings are taken from the source. Its uid is never sent.
    """
    payload: dict[str, Any] = {
        "name": request.name.strip(),
        "ip_address": request.ipv4_address.strip(),
        "comment": request.comment or f"Clone of {source.name}",
    }
    if source.version is not None:
        payload["version"] = source.version
    if source.os_name is not None:
        payload["os_name"] = source.os_name
    if source.interfaces:
        payload["interfaces"] = [iface.as_received() for iface in source.interfaces]
    payload["firewall"] = True
    if source.firewall_settings is not None:
        payload["firewall_settings"] = source.firewall_settings
    return payload


def _publish(client: ManagementClient) -> str:
    data = client.call(Operation.PUBLISH)
    return str(data.get("task-id") or data.get("task_id"))


def publish_changes(
    session: Session, settings: ConsoleSettings | None = None,
) -> str:
    """Publish pending session changes and return the server task id.

    Also the way to retry after :class:`PublishFailedError`.
    """
    require_session(session)
    with ManagementClient.for_session(session, settings) as client:
        task_id = _publish(client)
    logger.info("Publish started, task %s", task_id)
    return task_id


def clone_gateway(
    session: Session,
    source: Gateway,
    request: CloneRequest,
    settings: ConsoleSettings | None = None,
) -> Gateway:
    """Create a copy of *source* under the identity in *request* and publish it.

    Publish runs only after a confirmed create. If publish fails the new
    object stays on the server unpublished and :class:`PublishFailedError`
    carries it; nothing is rolled back.
    """
    require_session(session)
    validate_clone_request(request)
    payload = build_clone_payload(source, request)

    with ManagementClient.for_session(session, settings) as client:
        try:
            data = client.call(Operation.CREATE_GATEWAY, payload)
        except ApiError as exc:
            raise CreateFailedError(
                f"Failed to create gateway '{payload['name']}': {exc.message}"
            ) from exc
        obj = unwrap_object(data)
        try:
            created = Gateway.model_validate({"name": payload["name"], **obj})
        except pydantic.ValidationError as exc:
            # The object exists server-side; keep its identity and go on to publish.
            logger.warning("Unparseable create reply for %s: %s", obj.get("uid"), exc)
            created = Gateway(uid=str(obj.get("uid", "")), name=payload["name"])
        logger.info("Created gateway %s (%s) from %s", created.name, created.uid, source.uid)

        try:
            task_id = _publish(client)
        except (ApiError, ManagementConnectionError) as exc:
            logger.warning("Publish failed after creating %s: %s", created.uid, exc)
            raise PublishFailedError(
                f"Gateway '{created.name}' created but publish failed: {exc}",
                gateway=created,
            ) from exc
    logger.info("Published gateway %s, task %s", created.uid, task_id)
    return created
