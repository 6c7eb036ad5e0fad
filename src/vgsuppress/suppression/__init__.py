"""
Suppression module for Valgrind suppression files.

Exports:
    - FunctionGlob, ObjectGlob, FrameEllipsis: Calling context line variants
    - Suppression: A parsed suppression block
    - SuppressionSet: Ordered collection of suppressions
    - StackFrame: A resolved frame of a captured stack trace
    - MemcheckKind: Memcheck suppression kinds
    - ParseError (and subclasses in errors): Syntax errors with line numbers
    - parse_suppressions / parse_suppression: Text to records
    - glob_matches: Valgrind-style '*'/'?' glob matching
    - matches_stack / SuppressionMatcher: Stack trace matching
"""

from vgsuppress.suppression.errors import (
    EmptyFrameList,
    InvalidName,
    MissingSelector,
    ParameterAfterFrame,
    ParseError,
    UnexpectedClose,
    UnexpectedLine,
    UnrecognizedFrameLine,
    UnterminatedBlock,
)
from vgsuppress.suppression.glob import glob_matches
from vgsuppress.suppression.matcher import (
    SuppressionMatcher,
    frame_matches,
    matches_stack,
)
from vgsuppress.suppression.models import (
    ELLIPSIS,
    FrameEllipsis,
    FramePattern,
    FunctionGlob,
    MemcheckKind,
    ObjectGlob,
    StackFrame,
    Suppression,
    SuppressionSet,
)
from vgsuppress.suppression.parser import parse_suppression, parse_suppressions

__all__ = [
    "ELLIPSIS",
    "EmptyFrameList",
    "InvalidName",
    "FrameEllipsis",
    "FramePattern",
    "FunctionGlob",
    "MemcheckKind",
    "MissingSelector",
    "ObjectGlob",
    "ParameterAfterFrame",
    "ParseError",
    "StackFrame",
    "Suppression",
    "SuppressionMatcher",
    "SuppressionSet",
    "UnexpectedClose",
    "UnexpectedLine",
    "UnrecognizedFrameLine",
    "UnterminatedBlock",
    "frame_matches",
    "glob_matches",
    "matches_stack",
    "parse_suppression",
    "parse_suppressions",
]
