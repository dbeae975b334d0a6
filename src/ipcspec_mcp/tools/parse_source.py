"""Parse source text into IPC specs."""

from ..parser import parse_specs, ParsedContents


def summarize_contents(contents: ParsedContents) -> dict:
    """Serialize parsed contents with per-kind counts."""
    result = contents.to_dict()
    result["counts"] = {
        "functions": len(contents.functions),
        "types": len(contents.types),
        "imports": len(contents.imports),
    }
    return result


def parse_source(source: str) -> dict:
    """Extract function, type and import specs from TypeScript source.
    
    Args:
        source: TypeScript source text
    
    Returns:
        Dict with functions, types, imports and counts
    """
    return summarize_contents(parse_specs(source))
