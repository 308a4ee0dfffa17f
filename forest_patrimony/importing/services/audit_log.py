"""Structured log records for patrimony imports."""

from __future__ import annotations

import logging
from typing import Any, Optional

from ..types import AuthorizationScope

logger = logging.getLogger(__name__)


def log_import_event(
    event_name: str,
    *,
    level: str,
    scope: Optional[AuthorizationScope] = None,
    user_id: Optional[str] = None,
    details: Optional[dict[str, Any]] = None,
    kpis: Optional[dict[str, Any]] = None,
    severity: int = logging.INFO,
) -> dict[str, Any]:
    """Emit one record describing an import and return its payload.

    The payload is also attached to the record as ``import_event`` so
    handlers can ship it without parsing the message.
    """
    payload: dict[str, Any] = {
        "event": event_name,
        "level": level,
        "user_id": user_id,
        "tenant_id": scope.tenant_id if scope is not None else None,
        "privileged": bool(scope and scope.is_privileged),
        **(details or {}),
    }
    if kpis:
        payload["kpis"] = dict(kpis)
    logger.log(
        severity,
        "%s level=%s tenant=%s payload=%s",
        event_name,
        level,
        payload["tenant_id"],
        payload,
        extra={"import_event": payload},
    )
    return payload
