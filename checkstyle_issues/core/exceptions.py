"""Errors raised while reading Checkstyle reports."""
from typing import Optional


class ReportError(Exception):
    """Base class for every failure surfaced by the report pipeline."""


class ParsingError(ReportError):
    """The report could not be turned into issues."""

    def __init__(self, message: str, source_name: Optional[str] = None):
        self.source_name = source_name
        if source_name:
            message = f"{source_name}: {message}"
        super().__init__(message)


class MalformedInputError(ParsingError):
    """The input is not well-formed XML."""


class NotThisFormatError(MalformedInputError):
    """Well-formed XML whose root element is not a Checkstyle report."""


class ReportReadError(ParsingError):
    """Reading the underlying stream failed.

    The underlying ``OSError`` is chained as ``__cause__``.
    """


class ParsingCanceledError(ReportError):
    """The caller canceled the parse before it completed."""

    def __init__(self, source_name: Optional[str] = None):
        self.source_name = source_name
        super().__init__(f"Parsing of {source_name or 'report'} canceled")


class IncompleteIssueError(AssertionError):
    """An issue was built before all of its required fields were set."""

    def __init__(self, missing):
        self.missing = list(missing)
        super().__init__(f"Issue is missing required field(s): {', '.join(self.missing)}")
