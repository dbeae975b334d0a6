"""Grammar table describing the tree-sitter nodes the extractor keys on."""

from dataclasses import dataclass


@dataclass
class GrammarSpec:
    """Node types and fields of a tree-sitter grammar used for spec extraction."""
    # tree-sitter language name (for tree-sitter-language-pack)
    ts_language: str

    # Top-level nodes that declare a function with a signature
    function_node_types: list[str]

    # Statement wrapping an exported declaration, and its declaration field
    export_node_type: str
    export_declaration_fields: list[str]

    # Parameter list children that describe one parameter
    parameter_node_types: list[str]
    rest_pattern_node_type: str

    # Plain named type reference, and a qualified one (ns.Foo)
    type_reference_node_type: str
    qualified_reference_node_type: str

    # Generic instantiation Foo<Bar>; only its name field is recorded
    generic_node_type: str

    # Destructuring element "key: value" inside an object pattern
    binding_element_node_type: str
    binding_identifier_node_type: str

    # Import statement, its clause, and its named specifiers
    import_node_type: str
    import_clause_node_type: str
    named_imports_node_type: str
    import_specifier_node_type: str

    # Anonymous token marking a type-only import
    type_only_token: str

    # Parents whose "name" field declares a type rather than referencing one
    declaring_node_types: list[str]


TYPESCRIPT_GRAMMAR = GrammarSpec(
    ts_language="typescript",
    function_node_types=[
        "function_declaration",
        "generator_function_declaration",
        "function_expression",
        "function",
    ],
    export_node_type="export_statement",
    export_declaration_fields=["declaration", "value"],
    parameter_node_types=["required_parameter", "optional_parameter"],
    rest_pattern_node_type="rest_pattern",
    type_reference_node_type="type_identifier",
    qualified_reference_node_type="nested_type_identifier",
    generic_node_type="generic_type",
    binding_element_node_type="pair_pattern",
    binding_identifier_node_type="identifier",
    import_node_type="import_statement",
    import_clause_node_type="import_clause",
    named_imports_node_type="named_imports",
    import_specifier_node_type="import_specifier",
    type_only_token="type",
    declaring_node_types=[
        "type_parameter",
        "type_alias_declaration",
        "interface_declaration",
        "class_declaration",
        "abstract_class_declaration",
        "enum_declaration",
    ],
)


# Reserved primitive and utility type names, never collected as custom types
BUILTIN_TYPES = frozenset({
    "string",
    "number",
    "boolean",
    "void",
    "any",
    "unknown",
    "null",
    "undefined",
    "never",
    "object",
    "Function",
})


# File extensions the parser accepts
LANGUAGE_EXTENSIONS = {
    ".ts": "typescript",
    ".mts": "typescript",
    ".cts": "typescript",
}
