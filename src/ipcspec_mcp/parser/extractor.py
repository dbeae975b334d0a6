"""Spec extraction: regex-delimited fragments re-parsed with tree-sitter."""

import logging

from tree_sitter_language_pack import get_parser

from .specs import ParamSpec, FunctionSpec, TypeSpec, ImportSpec, ParsedContents
from .languages import GrammarSpec, TYPESCRIPT_GRAMMAR, BUILTIN_TYPES
from .scanner import scan_declarations
from .text import dedent

logger = logging.getLogger(__name__)


class SignatureParseError(ValueError):
    """Raised when a reconstructed function-header fragment fails to parse."""


def is_builtin_type(type_name: str) -> bool:
    """Check whether a type name is one of the reserved builtin types."""
    return type_name in BUILTIN_TYPES


def _node_text(node, source_bytes: bytes) -> str:
    return source_bytes[node.start_byte:node.end_byte].decode("utf-8")


def _add_custom_type(name: str, custom_types: set[str]) -> None:
    if not is_builtin_type(name):
        custom_types.add(name)


def _same_node(a, b) -> bool:
    return a.type == b.type and a.start_byte == b.start_byte and a.end_byte == b.end_byte


def _is_declared_name(node, grammar: GrammarSpec) -> bool:
    """True if the node is the name slot of a declaration (e.g. <T>, interface Foo)."""
    parent = node.parent
    if parent is None or parent.type not in grammar.declaring_node_types:
        return False
    name_node = parent.child_by_field_name("name")
    return name_node is not None and _same_node(name_node, node)


def _has_token(node, token: str) -> bool:
    """Check for an anonymous keyword token among a node's direct children."""
    return any(not child.is_named and child.type == token for child in node.children)


def _children_of_type(node, node_type: str) -> list:
    return [child for child in node.children if child.type == node_type]


def _collect_type_only_imports(
    node,
    custom_types: set[str],
    source_bytes: bytes,
    grammar: GrammarSpec,
) -> None:
    """Record local names of type-only named import bindings."""
    statement_type_only = _has_token(node, grammar.type_only_token)

    for clause in _children_of_type(node, grammar.import_clause_node_type):
        # "import type { A } from" may attach the keyword to the clause
        clause_type_only = statement_type_only or _has_token(clause, grammar.type_only_token)
        for named in _children_of_type(clause, grammar.named_imports_node_type):
            for specifier in _children_of_type(named, grammar.import_specifier_node_type):
                if not (clause_type_only or _has_token(specifier, grammar.type_only_token)):
                    continue
                local = specifier.child_by_field_name("alias")
                if local is None:
                    local = specifier.child_by_field_name("name")
                if local is not None:
                    _add_custom_type(_node_text(local, source_bytes), custom_types)


def collect_custom_types(
    node,
    custom_types: set[str],
    source_bytes: bytes,
    grammar: GrammarSpec = TYPESCRIPT_GRAMMAR,
) -> None:
    """Recursively collect custom type names referenced under a node.

    Rules are applied at every node and the walk continues into all
    children, with two exceptions: generic type arguments and the parts
    of a qualified name are not visited. Object type members, union and
    intersection members, array element types and function type parts
    are all reached by the walk itself.

    Args:
        node: tree-sitter node (None is ignored)
        custom_types: Set the names are added to
        source_bytes: Source the tree was parsed from
        grammar: Grammar table describing the node types
    """
    if node is None:
        return

    if node.type == grammar.generic_node_type:
        # Foo<Bar> records Foo only
        name_node = node.child_by_field_name("name")
        if name_node is not None:
            _add_custom_type(_node_text(name_node, source_bytes), custom_types)
        return

    if node.type == grammar.qualified_reference_node_type:
        _add_custom_type(_node_text(node, source_bytes), custom_types)
        return

    if node.type == grammar.type_reference_node_type:
        if not _is_declared_name(node, grammar):
            _add_custom_type(_node_text(node, source_bytes), custom_types)

    elif node.type == grammar.binding_element_node_type:
        # { abc: Custom } destructured in a parameter list
        children = node.children
        if len(children) == 3 and children[2].type == grammar.binding_identifier_node_type:
            _add_custom_type(_node_text(children[2], source_bytes), custom_types)

    elif node.type == grammar.import_node_type:
        _collect_type_only_imports(node, custom_types, source_bytes, grammar)

    for child in node.children:
        collect_custom_types(child, custom_types, source_bytes, grammar)


def _parse(source_bytes: bytes, grammar: GrammarSpec = TYPESCRIPT_GRAMMAR):
    parser = get_parser(grammar.ts_language)
    return parser.parse(source_bytes)


def collect_custom_types_from_code(code: str) -> set[str]:
    """Collect custom type names from an arbitrary source fragment.

    The fragment is dedented before parsing.
    """
    source_bytes = dedent(code).encode("utf-8")
    tree = _parse(source_bytes)

    custom_types: set[str] = set()
    collect_custom_types(tree.root_node, custom_types, source_bytes)
    return custom_types


def _annotation_text(node, source_bytes: bytes) -> str:
    """Text of a type annotation without its leading colon."""
    text = _node_text(node, source_bytes).strip()
    if text.startswith(":"):
        text = text[1:]
    return text.strip()


def _extract_param(node, source_bytes: bytes, grammar: GrammarSpec) -> ParamSpec:
    """Build a ParamSpec from a required_parameter/optional_parameter node."""
    pattern = node.child_by_field_name("pattern")
    if pattern is None:
        name = ""
    elif pattern.type == grammar.rest_pattern_node_type and pattern.named_children:
        # ...args is named "args"
        name = _node_text(pattern.named_children[0], source_bytes)
    else:
        name = _node_text(pattern, source_bytes)

    type_node = node.child_by_field_name("type")
    value_node = node.child_by_field_name("value")

    return ParamSpec(
        name=name,
        type=_annotation_text(type_node, source_bytes) if type_node is not None else None,
        default_value=_node_text(value_node, source_bytes) if value_node is not None else None,
    )


def _extract_function(node, source_bytes: bytes, grammar: GrammarSpec) -> FunctionSpec:
    """Build a FunctionSpec from a function declaration node."""
    name_node = node.child_by_field_name("name")
    name = _node_text(name_node, source_bytes) if name_node is not None else ""

    params = []
    parameters = node.child_by_field_name("parameters")
    if parameters is not None:
        for child in parameters.named_children:
            if child.type in grammar.parameter_node_types:
                params.append(_extract_param(child, source_bytes, grammar))

    return_node = node.child_by_field_name("return_type")
    return_type = _annotation_text(return_node, source_bytes) if return_node is not None else "void"

    custom_types: set[str] = set()
    collect_custom_types(node, custom_types, source_bytes, grammar)

    return FunctionSpec(
        name=name,
        params=tuple(params),
        return_type=return_type,
        custom_types=frozenset(custom_types),
    )


def _unwrap_function(node, grammar: GrammarSpec):
    """Return the function node of a top-level statement, looking through export."""
    if node.type == grammar.export_node_type:
        for field_name in grammar.export_declaration_fields:
            inner = node.child_by_field_name(field_name)
            if inner is not None:
                node = inner
                break
    if node.type in grammar.function_node_types:
        return node
    return None


def get_function_specs(code: str, skip_dedent: bool = False) -> list[FunctionSpec]:
    """Extract function specs from a fragment of function declarations.

    Args:
        code: Source containing one or more function declarations
        skip_dedent: Set when the caller already normalized the code

    Returns:
        FunctionSpec list in declaration order

    Raises:
        SignatureParseError: If the fragment contains syntax errors
    """
    normalized = code if skip_dedent else dedent(code)
    source_bytes = normalized.encode("utf-8")
    tree = _parse(source_bytes)

    if tree.root_node.has_error:
        logger.warning("Failed to parse function signatures:\n%s", normalized)
        raise SignatureParseError("Function signature fragment contains syntax errors")

    specs = []
    for node in tree.root_node.children:
        func = _unwrap_function(node, TYPESCRIPT_GRAMMAR)
        if func is not None:
            specs.append(_extract_function(func, source_bytes, TYPESCRIPT_GRAMMAR))

    return specs


def parse_specs(contents: str) -> ParsedContents:
    """Parse source text into function, type and import specs.

    The text is dedented once and scanned for declarations. Function
    headers are closed with an empty body and parsed together in a
    single pass once scanning is done.

    Args:
        contents: Raw TypeScript source

    Returns:
        ParsedContents with specs in encounter order

    Raises:
        SignatureParseError: If the collected function headers fail to parse
    """
    normalized = dedent(contents)

    type_specs = []
    import_specs = []
    signatures = []

    for declaration in scan_declarations(normalized):
        if declaration.kind == "function":
            signatures.append(declaration.text.rstrip() + "}\n")
        elif declaration.kind in ("type", "interface"):
            type_specs.append(TypeSpec(
                kind=declaration.kind,
                name=declaration.name,
                is_exported=declaration.is_exported,
                definition=declaration.text,
            ))
        else:
            import_specs.append(ImportSpec(
                kind=declaration.kind,
                from_path=declaration.from_path,
                definition=declaration.text,
                custom_types=frozenset(collect_custom_types_from_code(declaration.text)),
            ))

    function_specs = get_function_specs("".join(signatures), skip_dedent=True)

    logger.debug(
        "Parsed %d functions, %d types, %d imports",
        len(function_specs), len(type_specs), len(import_specs),
    )

    return ParsedContents(
        functions=tuple(function_specs),
        types=tuple(type_specs),
        imports=tuple(import_specs),
    )
