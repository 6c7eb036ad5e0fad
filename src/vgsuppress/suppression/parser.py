"""
Parser for Valgrind suppression files.

Functions:
- parse_suppressions: Parse a whole file into a SuppressionSet
- parse_suppression: Parse text holding exactly one block

Takes text, not paths; reading files is left to the caller.
"""

import re
from dataclasses import dataclass, field

from vgsuppress.shared.infrastructure.logging import get_logger
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
from vgsuppress.suppression.models import (
    ELLIPSIS,
    FramePattern,
    FunctionGlob,
    ObjectGlob,
    Suppression,
    SuppressionSet,
)

logger = get_logger(__name__)

OPEN_BRACE = "{"
CLOSE_BRACE = "}"
ELLIPSIS_TOKEN = "..."
FUNCTION_PREFIX = "fun:"
OBJECT_PREFIX = "obj:"

# "<word>:..." looks like a calling context line even when the prefix is unknown
_FRAME_SHAPED = re.compile(r"^[A-Za-z_][A-Za-z0-9_]*:")


@dataclass
class _OpenBlock:
    """Accumulates one suppression between its braces."""

    opened_at: int
    name: str | None = None
    tools: list[str] = field(default_factory=list)
    kind: str | None = None
    parameters: list[str] = field(default_factory=list)
    frames: list[FramePattern] = field(default_factory=list)

    def close(self, lineno: int) -> list[Suppression]:
        if self.kind is None:
            # Closed before the selector line was seen
            if self.name is None:
                raise EmptyFrameList(lineno)
            raise MissingSelector(lineno, CLOSE_BRACE)
        if not self.frames:
            raise EmptyFrameList(lineno)
        return [
            Suppression(
                name=self.name,
                tool=tool,
                kind=self.kind,
                parameters=tuple(self.parameters),
                frames=tuple(self.frames),
            )
            for tool in self.tools
        ]


def _parse_frame_line(line: str) -> FramePattern | None:
    """Return the frame pattern for a calling context line, or None if it is not one."""
    if line == ELLIPSIS_TOKEN:
        return ELLIPSIS
    if line.startswith(FUNCTION_PREFIX):
        return FunctionGlob(line[len(FUNCTION_PREFIX):].lstrip())
    if line.startswith(OBJECT_PREFIX):
        return ObjectGlob(line[len(OBJECT_PREFIX):].lstrip())
    return None


def _read_selector(block: _OpenBlock, line: str, lineno: int) -> None:
    tools, sep, kind = line.partition(":")
    # "Memcheck,Helgrind:Kind" applies to each listed tool
    names = tools.split(",")
    if not sep or not all(names):
        raise MissingSelector(lineno, line)
    block.tools = names
    block.kind = kind


def _read_body_line(block: _OpenBlock, line: str, lineno: int) -> None:
    frame = _parse_frame_line(line)
    if frame is not None:
        block.frames.append(frame)
        return

    if not block.frames:
        block.parameters.append(line)
        return

    if _FRAME_SHAPED.match(line):
        raise UnrecognizedFrameLine(lineno, line)
    raise ParameterAfterFrame(lineno, line)


def _parse(text: str) -> list[Suppression]:
    suppressions: list[Suppression] = []
    block: _OpenBlock | None = None

    for lineno, raw_line in enumerate(text.split("\n"), start=1):
        line = raw_line.strip()
        if not line or line.startswith("#"):
            continue

        if block is None:
            if line == OPEN_BRACE:
                block = _OpenBlock(opened_at=lineno)
            elif line == CLOSE_BRACE:
                raise UnexpectedClose(lineno, line)
            else:
                raise UnexpectedLine(lineno, line)
            continue

        if line == CLOSE_BRACE:
            suppressions.extend(block.close(lineno))
            block = None
        elif block.name is None:
            if CLOSE_BRACE in line:
                raise InvalidName(lineno, line)
            block.name = line
        elif block.kind is None:
            _read_selector(block, line, lineno)
        else:
            _read_body_line(block, line, lineno)

    if block is not None:
        raise UnterminatedBlock(block.opened_at)

    return suppressions


def parse_suppressions(text: str) -> SuppressionSet:
    """
    Parse suppression-file text.

    Args:
        text: Contents of a suppression file

    Returns:
        SuppressionSet with the records in file order

    Raises:
        ParseError: On the first syntax error; no records are returned
    """
    try:
        suppressions = _parse(text)
    except ParseError as e:
        logger.warning("suppression_parse_failed", error=str(e), line=e.line)
        raise

    logger.debug("suppressions_parsed", count=len(suppressions))
    return SuppressionSet(tuple(suppressions))


def parse_suppression(text: str) -> Suppression:
    """
    Parse text holding exactly one suppression block.

    Raises:
        ParseError: On a syntax error
        ValueError: If the text does not yield exactly one suppression
            (a block naming several tools yields one per tool)
    """
    suppressions = parse_suppressions(text)
    if len(suppressions) != 1:
        raise ValueError(f"Expected exactly one suppression, found {len(suppressions)}")
    return suppressions[0]
