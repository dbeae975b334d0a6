"""Ad hoc custom type extraction and builtin checks."""

from ..parser import collect_custom_types_from_code, is_builtin_type


def collect_types(code: str) -> dict:
    """Collect custom type names referenced in a source fragment.
    
    Args:
        code: Any TypeScript fragment (signature, type alias, import, ...)
    
    Returns:
        Dict with the sorted list of custom type names
    """
    custom_types = sorted(collect_custom_types_from_code(code))
    return {
        "count": len(custom_types),
        "custom_types": custom_types
    }


def check_builtin_type(type_name: str) -> dict:
    """Report whether a type name is a reserved builtin."""
    return {
        "type_name": type_name,
        "is_builtin": is_builtin_type(type_name)
    }
