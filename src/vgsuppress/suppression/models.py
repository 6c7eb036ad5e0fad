"""
Suppression models.

These models describe a parsed suppression file:
- FunctionGlob / ObjectGlob / FrameEllipsis: one line of a calling context
- Suppression: one ``{ ... }`` block
- SuppressionSet: the ordered records of one or more files
- StackFrame: a resolved frame of a captured, innermost-first stack trace

All of them are frozen and hold tuples, so parsed records can be shared
between threads without copying.

Text format (Valgrind user manual, "Suppressing errors"):
```
{
   <name>
   Memcheck:Param
   write(buf)
   fun:__write_nocancel
   obj:/lib/ld-2.3.4.so
   ...
   fun:main
}
```
"""

from __future__ import annotations

import re
from collections.abc import Iterator, Sequence
from dataclasses import dataclass
from enum import Enum
from typing import Any, Union

MEMCHECK_TOOL = "Memcheck"

_SIZED_KIND = re.compile(r"^(Addr|Value)(\d+)$")


@dataclass(frozen=True)
class FunctionGlob:
    """Matches a frame whose function name satisfies ``pattern``."""

    pattern: str

    def __str__(self) -> str:
        return f"fun:{self.pattern}"


@dataclass(frozen=True)
class ObjectGlob:
    """Matches a frame whose object (binary or shared library) path satisfies ``pattern``."""

    pattern: str

    def __str__(self) -> str:
        return f"obj:{self.pattern}"


@dataclass(frozen=True)
class FrameEllipsis:
    """Matches zero or more frames of any content (``...``)."""

    def __str__(self) -> str:
        return "..."


ELLIPSIS = FrameEllipsis()

FramePattern = Union[FunctionGlob, ObjectGlob, FrameEllipsis]


@dataclass(frozen=True)
class StackFrame:
    """
    One resolved frame of a captured stack trace.

    Either field may be missing when symbolication failed; a frame with
    neither satisfies no anchored pattern.
    """

    function_name: str | None = None
    object_path: str | None = None


class MemcheckKind(Enum):
    """Memcheck suppression kinds. Sized kinds carry the size separately."""

    ADDR = "Addr"
    COND = "Cond"
    FREE = "Free"
    LEAK = "Leak"
    OVERLAP = "Overlap"
    PARAM = "Param"
    VALUE = "Value"


@dataclass(frozen=True)
class Suppression:
    """
    A single suppression block.

    Attributes:
        name: Identifies the suppression in reports; not used for matching
        tool: Tool part of the selector line (e.g. ``Memcheck``)
        kind: Kind part of the selector line (e.g. ``Leak``, ``Addr4``)
        parameters: Tool-specific lines between selector and calling context
        frames: Calling context, innermost frame first
    """

    name: str
    tool: str
    kind: str
    parameters: tuple[str, ...] = ()
    frames: tuple[FramePattern, ...] = ()

    def __post_init__(self) -> None:
        if not self.name:
            raise ValueError("Suppression name must not be empty")
        if not self.frames:
            raise ValueError(f"Suppression '{self.name}' has no frames")
        # Accept any sequence, store tuples
        object.__setattr__(self, "parameters", tuple(self.parameters))
        object.__setattr__(self, "frames", tuple(self.frames))

    @property
    def selector(self) -> str:
        """The ``tool:kind`` selector line."""
        return f"{self.tool}:{self.kind}"

    @property
    def memcheck_kind(self) -> MemcheckKind | None:
        """Memcheck kind of this suppression, or None for other tools and unknown kinds."""
        if self.tool != MEMCHECK_TOOL:
            return None

        sized = _SIZED_KIND.match(self.kind)
        if sized:
            return MemcheckKind(sized.group(1))

        try:
            kind = MemcheckKind(self.kind)
        except ValueError:
            return None
        # Bare "Addr"/"Value" without a size is not a Memcheck kind
        if kind in (MemcheckKind.ADDR, MemcheckKind.VALUE):
            return None
        return kind

    @property
    def access_size(self) -> int | None:
        """Size N of a Memcheck ``AddrN``/``ValueN`` suppression."""
        if self.tool != MEMCHECK_TOOL:
            return None
        sized = _SIZED_KIND.match(self.kind)
        return int(sized.group(2)) if sized else None

    def matches(self, trace: Sequence[StackFrame]) -> bool:
        """Check whether this suppression's calling context covers ``trace``."""
        from vgsuppress.suppression.matcher import matches_stack

        return matches_stack(self.frames, trace)

    def render(self) -> str:
        """Render the block in Valgrind text form (no trailing newline)."""
        body = [self.name, self.selector, *self.parameters, *(str(frame) for frame in self.frames)]
        lines = ["{", *(f"   {line}" for line in body), "}"]
        return "\n".join(lines)

    def to_json(self) -> dict[str, Any]:
        """Serialize to a JSON-compatible dict."""
        return {
            "name": self.name,
            "tool": self.tool,
            "kind": self.kind,
            "parameters": list(self.parameters),
            "frames": [str(frame) for frame in self.frames],
        }

    def __str__(self) -> str:
        return self.render()


@dataclass(frozen=True)
class SuppressionSet:
    """Ordered, immutable collection of suppressions (file order is preserved)."""

    suppressions: tuple[Suppression, ...] = ()

    def __post_init__(self) -> None:
        object.__setattr__(self, "suppressions", tuple(self.suppressions))

    def __len__(self) -> int:
        return len(self.suppressions)

    def __iter__(self) -> Iterator[Suppression]:
        return iter(self.suppressions)

    def __getitem__(self, index: int) -> Suppression:
        return self.suppressions[index]

    def __add__(self, other: SuppressionSet) -> SuppressionSet:
        if not isinstance(other, SuppressionSet):
            return NotImplemented
        return self.merge(other)

    def merge(self, other: SuppressionSet) -> SuppressionSet:
        """
        Return a new set holding these suppressions followed by ``other``'s.

        Used when several suppression files are loaded for one run.
        """
        return SuppressionSet(self.suppressions + other.suppressions)

    def by_name(self, name: str) -> list[Suppression]:
        """All suppressions called ``name`` (a multi-tool block yields several)."""
        return [s for s in self.suppressions if s.name == name]

    def matching(self, trace: Sequence[StackFrame]) -> list[Suppression]:
        """Suppressions whose calling context covers ``trace``, in file order."""
        from vgsuppress.suppression.matcher import SuppressionMatcher

        return SuppressionMatcher(self.suppressions).matching(trace)

    def render(self) -> str:
        """Render every block, each followed by a newline."""
        return "".join(f"{s.render()}\n" for s in self.suppressions)

    def to_json(self) -> list[dict[str, Any]]:
        return [s.to_json() for s in self.suppressions]
