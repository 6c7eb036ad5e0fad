"""
Suppression matcher for deciding whether a stack trace is suppressed.

Main entry points:
- matches_stack: does one calling context cover a trace?
- SuppressionMatcher: which records of a set cover a trace?

A calling context covers a trace when it aligns with a prefix of the
innermost-first trace: fun:/obj: lines consume exactly one frame each,
``...`` consumes any number of frames, and frames past the end of the
context are ignored.
"""

from collections.abc import Iterable, Sequence

from vgsuppress.shared.infrastructure.logging import get_logger
from vgsuppress.suppression.glob import glob_matches
from vgsuppress.suppression.models import (
    FrameEllipsis,
    FramePattern,
    FunctionGlob,
    ObjectGlob,
    StackFrame,
    Suppression,
)

logger = get_logger(__name__)


def frame_matches(pattern: FramePattern, frame: StackFrame) -> bool:
    """
    Check whether a single frame satisfies an anchored pattern.

    The field the pattern looks at must be present; ``...`` matches any frame.
    """
    if isinstance(pattern, FrameEllipsis):
        return True
    if isinstance(pattern, FunctionGlob):
        value = frame.function_name
    elif isinstance(pattern, ObjectGlob):
        value = frame.object_path
    else:
        raise TypeError(f"Unknown frame pattern: {pattern!r}")
    return value is not None and glob_matches(pattern.pattern, value)


def matches_stack(patterns: Sequence[FramePattern], trace: Sequence[StackFrame]) -> bool:
    """
    Check whether ``patterns`` covers a prefix of ``trace``.

    Boolean reachability over (pattern index, trace index): row i holds the
    trace positions reachable after consuming the first i patterns. Runs in
    O(len(patterns) * len(trace)).

    Args:
        patterns: Calling context of a suppression, innermost first
        trace: Resolved frames, innermost first

    Returns:
        True if some alignment consumes every pattern, False otherwise
    """
    anchored = sum(1 for p in patterns if not isinstance(p, FrameEllipsis))
    if len(trace) < anchored:
        return False

    # reachable[t]: trace[:t] can be consumed by the patterns seen so far
    reachable = [False] * (len(trace) + 1)
    reachable[0] = True

    for pattern in patterns:
        following = [False] * (len(trace) + 1)
        if isinstance(pattern, FrameEllipsis):
            seen = False
            for t in range(len(trace) + 1):
                seen = seen or reachable[t]
                following[t] = seen
        else:
            for t in range(len(trace)):
                if reachable[t] and frame_matches(pattern, trace[t]):
                    following[t + 1] = True
        reachable = following
        if not any(reachable):
            return False

    return any(reachable)


class SuppressionMatcher:
    """
    Matches a set of suppressions against stack traces.

    The matcher does not choose between several matching records; callers
    that want first-match-wins use first_match(), which honours file order.
    """

    def __init__(self, suppressions: Iterable[Suppression] = ()):
        """
        Initialize suppression matcher.

        Args:
            suppressions: Records to match against, in file order
        """
        self.suppressions: tuple[Suppression, ...] = tuple(suppressions)

    def _candidates(self, tool: str | None, kind: str | None) -> Iterable[Suppression]:
        for suppression in self.suppressions:
            if tool is not None and suppression.tool != tool:
                continue
            if kind is not None and suppression.kind != kind:
                continue
            yield suppression

    def matching(
        self,
        trace: Sequence[StackFrame],
        tool: str | None = None,
        kind: str | None = None,
    ) -> list[Suppression]:
        """
        Get every suppression covering ``trace``.

        Args:
            trace: Resolved frames, innermost first
            tool: Only consider suppressions for this tool
            kind: Only consider suppressions of this kind

        Returns:
            Matching suppressions in file order
        """
        matched = [s for s in self._candidates(tool, kind) if matches_stack(s.frames, trace)]
        for suppression in matched:
            logger.debug("suppression_matched", name=suppression.name, selector=suppression.selector)
        return matched

    def first_match(
        self,
        trace: Sequence[StackFrame],
        tool: str | None = None,
        kind: str | None = None,
    ) -> Suppression | None:
        """Get the first suppression (in file order) covering ``trace``, if any."""
        for suppression in self._candidates(tool, kind):
            if matches_stack(suppression.frames, trace):
                logger.debug("suppression_matched", name=suppression.name, selector=suppression.selector)
                return suppression
        return None

    def is_suppressed(
        self,
        trace: Sequence[StackFrame],
        tool: str | None = None,
        kind: str | None = None,
    ) -> bool:
        """Check if any suppression covers ``trace``."""
        return self.first_match(trace, tool=tool, kind=kind) is not None
