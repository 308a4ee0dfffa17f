"""Persistence repositories used by the reconciliation engine."""

from __future__ import annotations

from typing import Any, Mapping, Optional, Protocol

from django.apps import apps
from django.core.exceptions import ValidationError
from django.db import transaction

from ..levels import LEVELS, LevelDescriptor
from ..types import AuthorizationScope


class PatrimonyRepository(Protocol):
    """Natural-key lookup plus create/update for one hierarchy level."""

    def find_by_natural_key(
        self, parent_id: Optional[str], scope: AuthorizationScope, code: str
    ) -> Any | None: ...

    def create(
        self,
        fields: Mapping[str, Any],
        *,
        parent_id: Optional[str] = None,
        tenant_id: Optional[str] = None,
    ) -> Any: ...

    def update(self, record_id: Any, fields: Mapping[str, Any]) -> Any: ...

    def get_in_scope(self, record_id: Any, scope: AuthorizationScope) -> Any | None: ...


class DjangoPatrimonyRepository:
    """ORM-backed repository; every write runs in its own savepoint."""

    def __init__(self, descriptor: LevelDescriptor):
        self.descriptor = descriptor
        self.model = apps.get_model(descriptor.model_label)

    def _scoped(self, scope: AuthorizationScope):
        queryset = self.model.objects.all()
        if scope.is_privileged:
            return queryset
        if scope.tenant_id is None:
            return queryset.none()
        return queryset.filter(**{self.descriptor.tenant_lookup: scope.tenant_id})

    def find_by_natural_key(
        self, parent_id: Optional[str], scope: AuthorizationScope, code: str
    ) -> Any | None:
        queryset = self._scoped(scope).filter(code=code)
        if self.descriptor.parent_field:
            queryset = queryset.filter(**{f"{self.descriptor.parent_field}_id": parent_id})
        return queryset.order_by("created_at").first()

    def get_in_scope(self, record_id: Any, scope: AuthorizationScope) -> Any | None:
        try:
            return self._scoped(scope).filter(pk=record_id).first()
        except (ValidationError, ValueError):
            return None

    def create(
        self,
        fields: Mapping[str, Any],
        *,
        parent_id: Optional[str] = None,
        tenant_id: Optional[str] = None,
    ) -> Any:
        payload = dict(fields)
        if self.descriptor.parent_field:
            payload[f"{self.descriptor.parent_field}_id"] = parent_id
        elif tenant_id is not None:
            payload["organization_id"] = tenant_id

        with transaction.atomic():
            instance = self.model(**payload)
            instance.full_clean(validate_unique=False, validate_constraints=False)
            instance.save(force_insert=True)
        return instance

    def update(self, record_id: Any, fields: Mapping[str, Any]) -> Any:
        with transaction.atomic():
            instance = self.model.objects.select_for_update().get(pk=record_id)
            for field_name, value in fields.items():
                setattr(instance, field_name, value)
            instance.full_clean(validate_unique=False, validate_constraints=False)
            instance.save(update_fields=sorted(set(fields) | {"updated_at"}))
        return instance


def get_repository(level: str | LevelDescriptor) -> DjangoPatrimonyRepository:
    descriptor = level if isinstance(level, LevelDescriptor) else LEVELS[str(level)]
    return DjangoPatrimonyRepository(descriptor)
