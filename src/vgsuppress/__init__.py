"""
vgsuppress - Valgrind suppression files for Python.

Parses suppression-file text into immutable records and decides whether a
captured stack trace is covered by a suppression's calling context.
"""

from vgsuppress.suppression import (
    ELLIPSIS,
    FrameEllipsis,
    FunctionGlob,
    ObjectGlob,
    ParseError,
    StackFrame,
    Suppression,
    SuppressionMatcher,
    SuppressionSet,
    glob_matches,
    matches_stack,
    parse_suppression,
    parse_suppressions,
)

__version__ = "0.1.0"

__all__ = [
    "ELLIPSIS",
    "FrameEllipsis",
    "FunctionGlob",
    "ObjectGlob",
    "ParseError",
    "StackFrame",
    "Suppression",
    "SuppressionMatcher",
    "SuppressionSet",
    "glob_matches",
    "matches_stack",
    "parse_suppression",
    "parse_suppressions",
]
