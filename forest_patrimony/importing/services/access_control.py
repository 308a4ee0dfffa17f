"""Permission and authorization-scope helpers for import operations."""

from __future__ import annotations

from typing import Any

from django.core.exceptions import PermissionDenied
from django.utils.module_loading import import_string

from ..config import get_import_settings
from ..levels import LevelDescriptor
from ..types import AuthorizationScope


def _to_user_id(user: Any) -> str:
    if user is None:
        return ""
    raw_id = getattr(user, "id", None)
    if raw_id is None:
        return ""
    return str(raw_id)


def _read_attribute_path(source: Any, path: str) -> Any:
    value = source
    for part in path.split("."):
        value = getattr(value, part, None)
        if value is None:
            return None
    return value


def default_scope_provider(user: Any) -> AuthorizationScope:
    """Superusers act across tenants; everyone else is bound to their tenant."""
    tenant_value = _read_attribute_path(user, get_import_settings().tenant_attribute)
    tenant_id = str(tenant_value) if tenant_value not in (None, "") else None
    return AuthorizationScope(
        is_privileged=bool(getattr(user, "is_superuser", False)),
        tenant_id=tenant_id,
    )


def resolve_authorization_scope(user: Any) -> AuthorizationScope:
    """Return the caller's scope using the configured provider."""
    provider = import_string(get_import_settings().scope_provider)
    return provider(user)


def _has_permission(user: Any, descriptor: LevelDescriptor) -> bool:
    if user is None or not getattr(user, "is_authenticated", False):
        return False

    if getattr(user, "is_superuser", False) or getattr(user, "is_staff", False):
        return True

    app_label, model_name = descriptor.model_label.split(".", 1)
    model = model_name.lower()
    return bool(
        user.has_perm(f"{app_label}.add_{model}")
        or user.has_perm(f"{app_label}.change_{model}")
    )


def require_import_access(user: Any, descriptor: LevelDescriptor) -> str:
    """Validate import access and return normalized user id."""
    if not _has_permission(user, descriptor):
        raise PermissionDenied(
            f"User is not allowed to import patrimony level {descriptor.level}."
        )
    return _to_user_id(user)
