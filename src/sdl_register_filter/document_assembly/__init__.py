"""Document assembly exports."""

from .assembly_models import OPERATION_ROOT_TYPES, AssemblyResult
from .document_assembler import EmptyResultError, assemble_document

__all__ = [
    "OPERATION_ROOT_TYPES",
    "AssemblyResult",
    "EmptyResultError",
    "assemble_document",
]
