"""GraphQL type definitions for patrimony imports."""

from __future__ import annotations

import graphene


class ImportColumnRuleType(graphene.ObjectType):
    name = graphene.String(required=True)
    required = graphene.Boolean(required=True)
    data_type = graphene.String(required=True)
    spellings = graphene.List(graphene.NonNull(graphene.String), required=True)
    allowed_values = graphene.List(graphene.NonNull(graphene.String))
    default_value = graphene.String()


class PatrimonyImportTemplateType(graphene.ObjectType):
    level = graphene.String(required=True)
    label = graphene.String(required=True)
    parent_level = graphene.String()
    natural_key = graphene.List(graphene.NonNull(graphene.String), required=True)
    required_columns = graphene.List(graphene.NonNull(ImportColumnRuleType), required=True)
    optional_columns = graphene.List(graphene.NonNull(ImportColumnRuleType), required=True)
    accepted_formats = graphene.List(graphene.NonNull(graphene.String), required=True)
    max_rows = graphene.Int(required=True)
    max_file_size_bytes = graphene.Int(required=True)


class ImportRowErrorType(graphene.ObjectType):
    row = graphene.Int(required=True)
    code = graphene.String()
    error = graphene.String(required=True)


class ImportIssueType(graphene.ObjectType):
    code = graphene.String(required=True)
    message = graphene.String(required=True)
    row_number = graphene.Int()
    field_path = graphene.String()


class ImportPatrimonyPayloadType(graphene.ObjectType):
    ok = graphene.Boolean(required=True)
    created = graphene.Int(required=True)
    updated = graphene.Int(required=True)
    skipped = graphene.Int(required=True)
    errors = graphene.List(graphene.NonNull(ImportRowErrorType), required=True)
    issues = graphene.List(graphene.NonNull(ImportIssueType), required=True)
