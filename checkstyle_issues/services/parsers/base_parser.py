"""Base parser for static analysis reports."""
import io
import threading
from pathlib import Path
from typing import IO, Optional, Union

from ...core.exceptions import ParsingCanceledError, ReportReadError
from ...models.issues import Issues


def check_canceled(cancel_event: Optional[threading.Event], source_name: Optional[str] = None):
    """Raise ParsingCanceledError if the caller has requested cancellation."""
    if cancel_event is not None and cancel_event.is_set():
        raise ParsingCanceledError(source_name)


class BaseParser:
    """Base class for static analysis report parsers."""

    def __init__(self, tool_name: str):
        self.tool_name = tool_name

    def parse(
        self,
        stream: IO,
        cancel_event: Optional[threading.Event] = None,
        source_name: Optional[str] = None
    ) -> Issues:
        """
        Parse a report into issues.

        Args:
            stream: Binary or text stream with the report content
            cancel_event: Set by the caller to abort the parse
            source_name: Name used in log records and error messages

        Returns:
            Issues found in the report

        Raises:
            ParsingError: The report is unreadable or not in this parser's format
            ParsingCanceledError: cancel_event was set while parsing
        """
        raise NotImplementedError("Subclasses must implement parse()")

    def parse_file(
        self,
        path: Union[str, Path],
        cancel_event: Optional[threading.Event] = None
    ) -> Issues:
        """Parse a report file, letting the XML declaration choose the encoding."""
        source_name = str(path)
        try:
            f = open(path, "rb")
        except OSError as e:
            raise ReportReadError(f"Cannot open report: {e}", source_name) from e
        with f:
            return self.parse(f, cancel_event=cancel_event, source_name=source_name)

    def parse_string(
        self,
        content: str,
        cancel_event: Optional[threading.Event] = None,
        source_name: str = "<string>"
    ) -> Issues:
        return self.parse(io.StringIO(content), cancel_event=cancel_event, source_name=source_name)
