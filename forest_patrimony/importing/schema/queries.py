"""Import query root definitions."""

from __future__ import annotations

import graphene

from ..services import require_import_access, resolve_import_template, resolve_level_descriptor
from .types import PatrimonyImportTemplateType


class PatrimonyImportQuery(graphene.ObjectType):
    patrimony_import_template = graphene.Field(
        PatrimonyImportTemplateType,
        level=graphene.String(required=True),
    )

    def resolve_patrimony_import_template(self, info, level: str):
        descriptor = resolve_level_descriptor(level)
        user = getattr(info.context, "user", None)
        require_import_access(user, descriptor)
        return resolve_import_template(descriptor.level)
