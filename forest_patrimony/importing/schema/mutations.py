"""Import mutation root definitions."""

from __future__ import annotations

import logging
from collections.abc import Mapping
from typing import Any

import graphene
from graphene_file_upload.scalars import Upload

from ..services import (
    ImportServiceError,
    import_patrimony_file,
    log_import_event,
    require_import_access,
    resolve_authorization_scope,
    resolve_level_descriptor,
)
from .types import ImportPatrimonyPayloadType


def _input_get(value: Any, key: str, default: Any = None) -> Any:
    if isinstance(value, dict):
        return value.get(key, default)
    return getattr(value, key, default)


def _uploaded_file_from(raw_file: Any, context: Any) -> Any:
    """Return the upload bound to the input, else the request's first file.

    Multipart clients that do not map variables leave ``file`` empty and only
    populate ``request.FILES``.
    """
    if hasattr(raw_file, "read"):
        return raw_file
    candidates: list[Any] = []
    if isinstance(raw_file, Mapping):
        candidates.append(raw_file.get("file"))
    candidates.extend((getattr(context, "FILES", None) or {}).values())
    return next((item for item in candidates if hasattr(item, "read")), raw_file)


def _rejected_payload(exc: ImportServiceError) -> dict[str, Any]:
    return {
        "ok": False,
        "created": 0,
        "updated": 0,
        "skipped": 0,
        "errors": [],
        "issues": [exc.as_issue()],
    }


class ImportPatrimonyInput(graphene.InputObjectType):
    file = Upload(required=True)
    level = graphene.String(required=True)
    parent_id = graphene.ID()
    file_name = graphene.String()


class ImportPatrimonyMutation(graphene.Mutation):
    class Arguments:
        input = ImportPatrimonyInput(required=True)

    Output = ImportPatrimonyPayloadType

    def mutate(self, info, input):
        user = getattr(info.context, "user", None)
        level = _input_get(input, "level")
        parent_id = _input_get(input, "parent_id")

        try:
            descriptor = resolve_level_descriptor(level)
        except ImportServiceError as exc:
            return _rejected_payload(exc)

        user_id = require_import_access(user, descriptor)
        scope = resolve_authorization_scope(user)
        uploaded_file = _uploaded_file_from(_input_get(input, "file"), info.context)
        file_name = _input_get(input, "file_name") or getattr(uploaded_file, "name", None)

        try:
            outcome = import_patrimony_file(
                uploaded_file,
                level=descriptor.level,
                scope=scope,
                parent_id=parent_id,
                file_name=file_name,
                user_id=user_id,
            )
        except ImportServiceError as exc:
            log_import_event(
                "patrimony_import_rejected",
                level=descriptor.level,
                scope=scope,
                user_id=user_id,
                details={
                    "parent_id": parent_id,
                    "file_name": file_name,
                    "code": exc.code,
                    "message": exc.message,
                },
                severity=logging.WARNING,
            )
            return _rejected_payload(exc)

        return {"ok": True, "issues": [], **outcome}


class PatrimonyImportMutations(graphene.ObjectType):
    import_patrimony = ImportPatrimonyMutation.Field()
