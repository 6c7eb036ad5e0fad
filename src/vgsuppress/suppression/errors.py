"""
Parse errors raised while reading suppression-file text.

Every error carries the 1-based line number and, where one exists, the
offending line as stripped text. Parsing is all-or-nothing, so the first
error raised aborts the whole file.
"""

from vgsuppress.shared.domain.exceptions import VgSuppressError


class ParseError(VgSuppressError):
    """Base class for suppression-file syntax errors."""

    description = "invalid suppression file"

    def __init__(self, line: int, text: str | None = None):
        self.line = line
        self.text = text
        message = f"line {line}: {self.description}"
        if text is not None:
            message = f"{message}: {text!r}"
        super().__init__(message, context={"line": line, "text": text})


class MissingSelector(ParseError):
    """The line after the suppression name has no ``tool:kind`` separator."""

    description = "no suppression type was found (expected '<tool>:<kind>')"


class ParameterAfterFrame(ParseError):
    """A parameter line appeared after the calling context had started."""

    description = "extra information must precede the calling context"


class EmptyFrameList(ParseError):
    """A suppression was closed without any frame lines."""

    description = "suppression has no calling context"


class UnrecognizedFrameLine(ParseError):
    """A frame-shaped line whose prefix is not fun:, obj: or ..."""

    description = "invalid calling context line"


class UnterminatedBlock(ParseError):
    """End of input was reached inside a suppression; ``line`` is the opening brace."""

    description = "unexpectedly encountered EOF while parsing a suppression"


class UnexpectedClose(ParseError):
    """A closing brace with no open suppression."""

    description = "closing brace without a matching opening brace"


class UnexpectedLine(ParseError):
    """Text outside of a suppression that is not an opening brace on its own line."""

    description = "expecting an opening brace on its own line"


class InvalidName(ParseError):
    """A suppression name containing a closing brace."""

    description = "the suppression name cannot contain a closing brace '}'"
