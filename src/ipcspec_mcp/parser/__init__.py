"""Parser package for extracting IPC specs from TypeScript source."""

from .specs import ParamSpec, FunctionSpec, TypeSpec, ImportSpec, ParsedContents
from .languages import GrammarSpec, TYPESCRIPT_GRAMMAR, BUILTIN_TYPES, LANGUAGE_EXTENSIONS
from .text import dedent, concat_regex
from .scanner import Declaration, get_declaration_regex, scan_declarations
from .extractor import (
    SignatureParseError,
    is_builtin_type,
    collect_custom_types,
    collect_custom_types_from_code,
    get_function_specs,
    parse_specs,
)

__all__ = [
    "ParamSpec",
    "FunctionSpec",
    "TypeSpec",
    "ImportSpec",
    "ParsedContents",
    "GrammarSpec",
    "TYPESCRIPT_GRAMMAR",
    "BUILTIN_TYPES",
    "LANGUAGE_EXTENSIONS",
    "dedent",
    "concat_regex",
    "Declaration",
    "get_declaration_regex",
    "scan_declarations",
    "SignatureParseError",
    "is_builtin_type",
    "collect_custom_types",
    "collect_custom_types_from_code",
    "get_function_specs",
    "parse_specs",
]
