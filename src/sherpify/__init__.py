from .check import check_document
from .errors import (
    DuplicateIdentifierError,
    MalformedTypeError,
    SchemaError,
    SchemaValidationError,
    SchemaVersionError,
    SherpifyError,
)
from .generation import GenerationProfile, TypeEmitter, generate_client, parse_type
from .generator import ClientSpec, generate_module, write_module
from .loader import load_sherpadoc
from .model import Document, build_document

__all__ = [
    "SherpifyError",
    "SchemaError",
    "SchemaVersionError",
    "SchemaValidationError",
    "MalformedTypeError",
    "DuplicateIdentifierError",
    "GenerationProfile",
    "TypeEmitter",
    "generate_client",
    "parse_type",
    "ClientSpec",
    "generate_module",
    "write_module",
    "Document",
    "build_document",
    "check_document",
    "load_sherpadoc",
]
