"""Parser for Checkstyle XML reports."""
import logging
import threading
import time
from typing import IO, Optional

from ...core.config import settings
from ...core.exceptions import ParsingCanceledError, ParsingError
from ...core.logging import get_logger, report_ctx
from ...models.issues import IssueBuilder, Issues
from ..package_detectors import PackageDetectors
from .base_parser import BaseParser
from .checkstyle_decoder import CheckStyleDecoder, RawDocument, RawFile
from .classifiers import classify_severity, split_source

logger = logging.getLogger(__name__)
structured_logger = get_logger(__name__)


class CheckStyleConverter:
    """Converts a decoded report into issues.

    The package detector is any object with a
    ``detect_package_name(file_name) -> str`` method. It is called exactly once
    for every file that is not excluded.
    """

    def __init__(self, package_detector, excluded_suffix: Optional[str] = None):
        self.package_detector = package_detector
        self.excluded_suffix = excluded_suffix if excluded_suffix is not None else settings.EXCLUDED_FILE_SUFFIX

    def is_valid_file(self, file: RawFile) -> bool:
        """Files of generated javadoc package descriptions are never reported."""
        return not (self.excluded_suffix and file.name.endswith(self.excluded_suffix))

    def convert(self, document: RawDocument) -> Issues:
        collected = []

        for file in document.files:
            if not self.is_valid_file(file):
                logger.debug(f"Skipping excluded file {file.name}")
                continue

            package_name = self.package_detector.detect_package_name(file.name)
            for violation in file.violations:
                priority = classify_severity(violation.severity)
                if priority is None:
                    continue

                type_, category = split_source(violation.source)
                issue = (
                    IssueBuilder()
                    .set_file_name(file.name)
                    .set_package_name(package_name)
                    .set_line_start(violation.line)
                    .set_column_start(violation.column)
                    .set_priority(priority)
                    .set_type(type_)
                    .set_category(category)
                    .set_message(violation.message)
                    .build()
                )
                collected.append(issue)

        return Issues(collected)


class CheckStyleParser(BaseParser):
    """Parser for Checkstyle XML output."""

    def __init__(self, package_detector=None, excluded_suffix: Optional[str] = None):
        super().__init__("checkstyle")
        if package_detector is None:
            package_detector = PackageDetectors()
        self.decoder = CheckStyleDecoder()
        self.converter = CheckStyleConverter(package_detector, excluded_suffix)

    def parse(
        self,
        stream: IO,
        cancel_event: Optional[threading.Event] = None,
        source_name: Optional[str] = None
    ) -> Issues:
        """
        Parse Checkstyle XML output.

        Checkstyle XML format:
        <checkstyle version="10.12.0">
            <file name="src/main/java/Foo.java">
                <error line="12" column="4" severity="error"
                       message="Name 'Bar' must match pattern '^[a-z][a-zA-Z0-9]*$'."
                       source="com.puppycrawl.tools.checkstyle.checks.naming.MethodNameCheck"/>
            </file>
        </checkstyle>

        The whole document is decoded before any issue is created, so a
        failure never yields a partial result.
        """
        name = source_name or str(getattr(stream, "name", "") or "<stream>")
        token = report_ctx.set(name)
        start = time.perf_counter()
        try:
            try:
                document = self.decoder.decode(stream, cancel_event=cancel_event, source_name=name)
            except ParsingCanceledError:
                logger.info(f"Parsing of {name} canceled")
                raise
            except ParsingError as e:
                structured_logger.log_report_failed(name, e)
                raise

            issues = self.converter.convert(document)

            included = [f for f in document.files if self.converter.is_valid_file(f)]
            structured_logger.log_report_parsed(
                source_name=name,
                file_count=len(document.files),
                excluded_files=len(document.files) - len(included),
                issue_count=len(issues),
                skipped_violations=sum(len(f.violations) for f in included) - len(issues),
                duration_ms=(time.perf_counter() - start) * 1000
            )
            return issues
        finally:
            report_ctx.reset(token)
