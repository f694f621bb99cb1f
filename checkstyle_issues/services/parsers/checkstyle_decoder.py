"""Streaming decoder for Checkstyle XML reports.

Builds a small typed tree (report -> file -> violation) in a single
``iterparse`` pass. Only the paths ``checkstyle``, ``checkstyle/file`` and
``checkstyle/file/error`` are recognized; everything else is skipped.
"""
import re
import threading
from dataclasses import dataclass, field
from typing import IO, List, Optional

from defusedxml import DefusedXmlException
from defusedxml.ElementTree import ParseError, iterparse

from ...core.exceptions import MalformedInputError, NotThisFormatError, ReportReadError
from ...core.logging import get_logger
from .base_parser import check_canceled

logger = get_logger(__name__)

ROOT_TAG = "checkstyle"
FILE_PATH = (ROOT_TAG, "file")
ERROR_PATH = (ROOT_TAG, "file", "error")

# ASCII digits only: int() would also take "1_000" and non-ASCII digits
INTEGER_PATTERN = re.compile(r"[+-]?[0-9]+")


@dataclass
class RawViolation:
    """An ``<error>`` element."""
    line: int = 0
    column: int = 0
    severity: str = ""
    message: str = ""
    source: str = ""


@dataclass
class RawFile:
    """A ``<file>`` element and its violations."""
    name: str = ""
    violations: List[RawViolation] = field(default_factory=list)


@dataclass
class RawDocument:
    """The ``<checkstyle>`` root."""
    version: str = ""
    files: List[RawFile] = field(default_factory=list)

    @property
    def violation_count(self) -> int:
        return sum(len(f.violations) for f in self.files)


def _local_name(tag: str) -> str:
    # "{namespace}name" -> "name"
    return tag.rpartition("}")[2]


def _to_int(value: Optional[str]) -> int:
    """Non-negative integer attribute, 0 when missing or unparsable."""
    if value is None:
        return 0
    value = value.strip()
    if not INTEGER_PATTERN.fullmatch(value):
        return 0
    return max(int(value), 0)


class CheckStyleDecoder:
    """Decodes a Checkstyle report stream into a :class:`RawDocument`."""

    def decode(
        self,
        stream: IO,
        cancel_event: Optional[threading.Event] = None,
        source_name: Optional[str] = None
    ) -> RawDocument:
        """
        Read the whole report.

        Args:
            stream: Binary or text stream
            cancel_event: Polled at every element start
            source_name: Used in error messages

        Returns:
            The decoded tree

        Raises:
            MalformedInputError: The stream is not well-formed XML
            NotThisFormatError: The root element is not <checkstyle>
            ReportReadError: Reading the stream failed
            ParsingCanceledError: cancel_event was set
        """
        document: Optional[RawDocument] = None
        current_file: Optional[RawFile] = None
        root = None
        path: List[str] = []

        try:
            for event, elem in iterparse(stream, events=("start", "end")):
                if event == "start":
                    check_canceled(cancel_event, source_name)
                    path.append(_local_name(elem.tag))
                    current = tuple(path)
                    if len(current) == 1:
                        if current[0] != ROOT_TAG:
                            raise NotThisFormatError(
                                f"Root element is <{current[0]}>, expected <{ROOT_TAG}>",
                                source_name
                            )
                        root = elem
                        document = RawDocument(version=elem.get("version", ""))
                    elif current == FILE_PATH:
                        current_file = RawFile(name=elem.get("name", ""))
                        document.files.append(current_file)
                    elif current == ERROR_PATH:
                        current_file.violations.append(RawViolation(
                            line=_to_int(elem.get("line")),
                            column=_to_int(elem.get("column")),
                            severity=elem.get("severity", ""),
                            message=elem.get("message", ""),
                            source=elem.get("source", ""),
                        ))
                else:
                    if tuple(path) == FILE_PATH:
                        current_file = None
                        # Attributes were captured on start; drop the subtree
                        root.clear()
                    path.pop()
        except ParseError as e:
            raise MalformedInputError(f"Not well-formed XML: {e}", source_name) from e
        except DefusedXmlException as e:
            raise MalformedInputError(f"Forbidden XML construct: {e!r}", source_name) from e
        except UnicodeDecodeError as e:
            raise MalformedInputError(f"Undecodable content: {e}", source_name) from e
        except OSError as e:
            raise ReportReadError(f"Cannot read report: {e}", source_name) from e

        logger.debug(
            f"Decoded {len(document.files)} file(s) from {source_name or 'stream'}",
            event="report_decoded",
            version=document.version,
            file_count=len(document.files),
            violation_count=document.violation_count
        )
        return document
