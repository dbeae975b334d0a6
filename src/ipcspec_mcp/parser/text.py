"""Text helpers shared by the scanner and the signature parser."""

import re


def dedent(text: str) -> str:
    """Remove the common leading whitespace from every line.

    The indent is the shortest leading-whitespace run among non-blank lines.
    Lines shorter than the indent (blank ones included) become empty.
    Relative indentation between lines is preserved.

    Example:
        "    a\\n      b" -> "a\\n  b"
    """
    lines = text.split("\n")
    indents = [len(line) - len(line.lstrip()) for line in lines if line.strip()]

    # No content lines: every line clamps to empty
    if not indents:
        return "\n".join("" for _ in lines)

    indent = min(indents)
    return "\n".join(line[indent:] for line in lines)


def concat_regex(parts: list[str], flags: int = 0) -> re.Pattern:
    """Concatenate regex sources into one compiled pattern.

    Parts are joined verbatim, so alternation bars must be part of the parts.
    """
    return re.compile("".join(parts), flags)
