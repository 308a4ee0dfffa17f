"""Domain exceptions for import services."""

from __future__ import annotations

from ..constants import ImportIssueCode


class ImportServiceError(Exception):
    """Typed error used by import services to provide issue code and context."""

    def __init__(
        self,
        code: str,
        message: str,
        *,
        row_number: int | None = None,
        field_path: str | None = None,
    ) -> None:
        super().__init__(message)
        self.code = code
        self.message = message
        self.row_number = row_number
        self.field_path = field_path

    def as_issue(self) -> dict[str, object]:
        return {
            "code": self.code,
            "message": self.message,
            "row_number": self.row_number,
            "field_path": self.field_path,
        }


class FormatError(ImportServiceError):
    """The upload could not be decoded as a supported tabular file."""

    def __init__(self, message: str, *, code: str = ImportIssueCode.INVALID_FILE_FORMAT) -> None:
        super().__init__(code, message)


class MissingColumnError(ImportServiceError):
    """A column required by the target level is absent from the header row."""

    def __init__(self, field_name: str) -> None:
        super().__init__(
            ImportIssueCode.MISSING_REQUIRED_COLUMN,
            f"Missing required column: {field_name}",
            field_path=field_name,
        )
        self.field_name = field_name


class EmptyFileError(ImportServiceError):
    def __init__(self, message: str = "The file does not contain any records.") -> None:
        super().__init__(ImportIssueCode.EMPTY_FILE, message)


class ParentNotFoundError(ImportServiceError):
    def __init__(self, level: str, parent_id: str) -> None:
        super().__init__(
            ImportIssueCode.PARENT_NOT_FOUND,
            f"Parent level {level} record '{parent_id}' was not found.",
            field_path="parent_id",
        )
        self.level = level
        self.parent_id = parent_id


class ImportAccessError(ImportServiceError):
    def __init__(self, message: str, *, code: str = ImportIssueCode.TENANT_REQUIRED) -> None:
        super().__init__(code, message)
