"""Spec dataclasses produced by the declaration parser."""

from dataclasses import dataclass, field
from typing import Optional


@dataclass(frozen=True)
class ParamSpec:
    """A single function parameter, captured verbatim from source."""
    name: str                           # Pattern text (e.g., "abc" or "{ abc }")
    type: Optional[str] = None          # Annotation text without the colon
    default_value: Optional[str] = None # Initializer text

    def to_dict(self) -> dict:
        return {
            "name": self.name,
            "type": self.type,
            "default_value": self.default_value,
        }


@dataclass(frozen=True)
class FunctionSpec:
    """An exported function signature recovered from its header."""
    name: str                                   # Empty string for anonymous functions
    params: tuple[ParamSpec, ...] = ()          # Source order, duplicates kept
    return_type: str = "void"                   # Return annotation text
    custom_types: frozenset[str] = frozenset()  # Non-builtin types in the signature

    def format_params(self, with_types: bool = True) -> str:
        """Render the parameter list as it would appear in a signature.

        Untyped parameters are rendered as ``any`` when types are requested.
        Example: ``a: Foo, b: any``
        """
        parts = []
        for param in self.params:
            if with_types:
                parts.append(f"{param.name}: {param.type or 'any'}")
            else:
                parts.append(param.name)
        return ", ".join(parts)

    def to_dict(self) -> dict:
        return {
            "name": self.name,
            "params": [p.to_dict() for p in self.params],
            "return_type": self.return_type,
            "custom_types": sorted(self.custom_types),
        }


@dataclass(frozen=True)
class TypeSpec:
    """A type alias or interface declaration."""
    kind: str           # "type" | "interface"
    name: str
    is_exported: bool
    definition: str     # Verbatim, newline-terminated declaration text

    def to_dict(self) -> dict:
        return {
            "kind": self.kind,
            "name": self.name,
            "is_exported": self.is_exported,
            "definition": self.definition,
        }


@dataclass(frozen=True)
class ImportSpec:
    """A static import or a require() assignment."""
    kind: str                                   # "import" | "require"
    from_path: Optional[str]                    # Module path, None if not captured
    definition: str                             # Verbatim, newline-terminated statement text
    custom_types: frozenset[str] = frozenset()  # Type-only bindings

    def to_dict(self) -> dict:
        return {
            "kind": self.kind,
            "from_path": self.from_path,
            "definition": self.definition,
            "custom_types": sorted(self.custom_types),
        }


@dataclass(frozen=True)
class ParsedContents:
    """Everything extracted from a single source text."""
    functions: tuple[FunctionSpec, ...] = field(default_factory=tuple)
    types: tuple[TypeSpec, ...] = field(default_factory=tuple)
    imports: tuple[ImportSpec, ...] = field(default_factory=tuple)

    def is_empty(self) -> bool:
        return not (self.functions or self.types or self.imports)

    def to_dict(self) -> dict:
        return {
            "functions": [f.to_dict() for f in self.functions],
            "types": [t.to_dict() for t in self.types],
            "imports": [i.to_dict() for i in self.imports],
        }
