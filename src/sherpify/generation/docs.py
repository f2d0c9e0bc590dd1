"""Rendering of documentation strings as Python comments."""

from __future__ import annotations

from ..model import Section


def doc_lines(docs: str) -> list[str]:
    """Split documentation into stripped, non-blank lines."""
    lines = [line.strip() for line in docs.splitlines()]
    return [line for line in lines if line]


def block_comment(docs: str, indent: str = "") -> list[str]:
    """Render every documentation line as a leading comment line."""
    return [f"{indent}# {line}" for line in doc_lines(docs)]


def adaptive_comment(docs: str, indent: str = "") -> tuple[list[str], str]:
    """Render documentation for a declaration that fits on one line.

    Returns:
        The leading comment lines and the trailing comment to append to the
        declaration line. A single line of documentation becomes the
        trailing comment; longer documentation becomes leading lines.
    """
    lines = doc_lines(docs)
    if len(lines) == 1:
        return [], f"  # {lines[0]}"
    return [f"{indent}# {line}" for line in lines], ""


def section_outline(section: Section, depth: int = 0) -> list[str]:
    """Render the documentation of a section tree as an outline.

    Each nested section gets a heading with one "#" per nesting level,
    starting at one for the direct children of the root.
    """
    lines = block_comment(section.docs)
    for subsection in section.sections:
        lines.extend(["#", f"# {'#' * (depth + 1)} {subsection.name}", "#"])
        lines.extend(section_outline(subsection, depth + 1))
    return lines
