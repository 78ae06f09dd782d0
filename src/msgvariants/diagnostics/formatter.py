"""Diagnostic text rendering.

Every MessageModelError built from a Diagnostic uses this rendering as its
exception message.

Python 3.13+. Zero external dependencies.
"""

from .codes import Diagnostic

__all__ = ["format_diagnostic"]


def format_diagnostic(diagnostic: Diagnostic) -> str:
    """Render a diagnostic in compiler style.

    The first line carries severity, code name and message. Subject, tried
    candidates and hint follow as indented ``=`` notes, each only when set.

    Example:
        >>> print(format_diagnostic(ErrorTemplate.missing_value("COUNT")))
        error[MISSING_VALUE]: No value supplied for placeholder 'COUNT'
          = subject: COUNT
          = help: Pass 'COUNT' in the interpolation values
    """
    lines = [f"{diagnostic.severity}[{diagnostic.code.name}]: {diagnostic.message}"]

    if diagnostic.subject:
        lines.append(f"  = subject: {diagnostic.subject}")

    if diagnostic.tried:
        lines.append(f"  = tried: {', '.join(diagnostic.tried)}")

    if diagnostic.hint:
        lines.append(f"  = help: {diagnostic.hint}")

    return "\n".join(lines)
