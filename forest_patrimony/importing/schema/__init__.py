"""Import GraphQL schema exports."""

from .mutations import PatrimonyImportMutations
from .queries import PatrimonyImportQuery

__all__ = ["PatrimonyImportQuery", "PatrimonyImportMutations"]
