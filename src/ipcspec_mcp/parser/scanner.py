"""Line-anchored declaration scanner.

Delimits raw declaration fragments with a single ordered-alternative regex.
Nothing here understands nested type syntax; fragments are re-parsed with
tree-sitter by the extractor.
"""

import logging
import re
from dataclasses import dataclass
from typing import Iterator, Optional

from .text import concat_regex

logger = logging.getLogger(__name__)


# Alternatives in priority order. Each one is wrapped in a group named after
# the declaration kind it recognizes.
DECLARATION_PATTERNS = [
    # Exported function header up to and including the opening brace
    r"(?P<function>^export\s+function\s+\w+\s*\([^)]*\)\s*(?::\s*[^<\n]+)?\s+\{\n)",
    # Interface with its full body
    r"|(?P<interface>^(?P<interface_export>export\s+)?interface\s+(?P<interface_name>\w+)\s*\{[\s\S]*?\n\}\n)",
    # Type alias through the terminating semicolon
    r"|(?P<type>^(?P<type_export>export\s+)?type\s+(?P<type_name>\w+)\s*=\s*[\s\S]*?;\n)",
    # Static import
    r"|(?P<import>^import\s+[\s\S]*?from\s*['\"](?P<import_path>.*?)['\"];?\n)",
    # require() assignment
    r"|(?P<require>^const[\s\S]*?require\(\s*['\"](?P<require_path>.*?)['\"]\s*\);?\n)",
]

DECLARATION_KINDS = ("function", "interface", "type", "import", "require")


@dataclass
class Declaration:
    """A raw declaration fragment found by the scanner."""
    kind: str                       # One of DECLARATION_KINDS
    text: str                       # Exact matched text, newline-terminated
    name: Optional[str] = None      # Type/interface name
    is_exported: bool = False       # "export" preceded the type/interface keyword
    from_path: Optional[str] = None # Module path for import/require


def get_declaration_regex() -> re.Pattern:
    """Build the combined multiline declaration regex."""
    return concat_regex(DECLARATION_PATTERNS, re.MULTILINE)


def _to_declaration(match: re.Match) -> Declaration:
    """Route a regex match to a Declaration based on the alternative that fired."""
    kind = next(k for k in DECLARATION_KINDS if match.group(k) is not None)
    text = match.group(kind)

    if kind in ("interface", "type"):
        return Declaration(
            kind=kind,
            text=text,
            name=match.group(f"{kind}_name"),
            is_exported=match.group(f"{kind}_export") is not None,
        )
    if kind in ("import", "require"):
        return Declaration(
            kind=kind,
            text=text,
            from_path=match.group(f"{kind}_path"),
        )
    return Declaration(kind=kind, text=text)


def scan_declarations(text: str) -> Iterator[Declaration]:
    """Yield declaration fragments from already-normalized text.

    Matches are non-overlapping and in encounter order. Lines that match
    none of the alternatives are skipped without error.
    """
    regex = get_declaration_regex()
    for match in regex.finditer(text):
        declaration = _to_declaration(match)
        logger.debug("Scanned %s declaration at offset %d", declaration.kind, match.start())
        yield declaration
