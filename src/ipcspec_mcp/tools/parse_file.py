"""Parse a TypeScript file from disk into IPC specs."""

import os
from pathlib import Path
from typing import Optional

from ..parser import parse_specs, LANGUAGE_EXTENSIONS
from .parse_source import summarize_contents


DEFAULT_MAX_FILE_SIZE = 500 * 1024  # 500KB


def resolve_source_path(path: str, project_path: Optional[str] = None) -> Path:
    """Resolve a file path, relative paths against the project directory."""
    file_path = Path(path).expanduser()
    if not file_path.is_absolute():
        base = Path(project_path).expanduser() if project_path else Path.cwd()
        file_path = base / file_path
    return file_path.resolve()


def parse_file(
    path: str,
    project_path: Optional[str] = None,
    max_size: int = DEFAULT_MAX_FILE_SIZE,
) -> dict:
    """Read a TypeScript file and extract its specs.
    
    Args:
        path: File path (absolute, or relative to project_path)
        project_path: Base directory for relative paths (default: cwd)
        max_size: Maximum file size in bytes
    
    Returns:
        Dict with file path, functions, types, imports and counts
    """
    file_path = resolve_source_path(path, project_path)
    
    if not file_path.is_file():
        return {"error": f"File not found: {file_path}"}
    
    if file_path.suffix not in LANGUAGE_EXTENSIONS:
        return {"error": f"Unsupported file type: {file_path.suffix or file_path.name}"}
    
    try:
        size = file_path.stat().st_size
    except OSError as e:
        return {"error": f"Cannot stat file: {e}"}
    
    if size > max_size:
        return {"error": f"File too large: {size} bytes (limit {max_size})"}
    
    content = file_path.read_text(encoding="utf-8", errors="replace")
    
    result = {"file": file_path.as_posix()}
    result.update(summarize_contents(parse_specs(content)))
    return result


def max_file_size_from_env() -> int:
    """Read the file size limit from IPCSPEC_MAX_FILE_SIZE."""
    value = os.environ.get("IPCSPEC_MAX_FILE_SIZE")
    if not value:
        return DEFAULT_MAX_FILE_SIZE
    try:
        return int(value)
    except ValueError:
        return DEFAULT_MAX_FILE_SIZE
