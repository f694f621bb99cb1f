"""Package and namespace detection for reported source files."""
import logging
import re
from itertools import islice
from pathlib import Path
from typing import Iterable, List, Optional

from ..core.config import settings

logger = logging.getLogger(__name__)


class PackageDetector:
    """Detects the package declared in a source file of one language."""

    # File suffixes (lower case) this detector handles
    SUFFIXES: tuple = ()
    PATTERN: Optional[re.Pattern] = None

    def accepts(self, file_name: str) -> bool:
        return Path(file_name).suffix.lower() in self.SUFFIXES

    def detect_from_lines(self, lines: Iterable[str]) -> Optional[str]:
        """
        Scan source lines for a package declaration.

        Args:
            lines: Source lines, in file order

        Returns:
            The declared package or None if no declaration was found
        """
        for line in lines:
            match = self.PATTERN.match(line)
            if match:
                return match.group(1)
        return None

    def detect_from_content(self, content: str) -> Optional[str]:
        return self.detect_from_lines(content.splitlines())


class JavaPackageDetector(PackageDetector):
    """Java ``package a.b.c;`` declarations."""
    SUFFIXES = (".java",)
    PATTERN = re.compile(r"^\s*package\s+([A-Za-z_]\w*(?:\.[A-Za-z_]\w*)*)\s*;")


class KotlinPackageDetector(PackageDetector):
    """Kotlin ``package a.b.c`` declarations, semicolon optional."""
    SUFFIXES = (".kt", ".kts")
    PATTERN = re.compile(r"^\s*package\s+([A-Za-z_]\w*(?:\.[A-Za-z_]\w*)*)\s*;?\s*$")


class CSharpNamespaceDetector(PackageDetector):
    """C# block-scoped and file-scoped namespaces."""
    SUFFIXES = (".cs",)
    PATTERN = re.compile(r"^\s*namespace\s+([A-Za-z_]\w*(?:\.[A-Za-z_]\w*)*)\s*[;{]?\s*$")


class PackageDetectors:
    """Chooses a detector by file extension and reads the source file.

    Never raises: unreadable files and unsupported extensions yield the
    undefined package name.
    """

    def __init__(
        self,
        detectors: Optional[List[PackageDetector]] = None,
        undefined: Optional[str] = None,
        max_lines: Optional[int] = None
    ):
        if detectors is None:
            detectors = [JavaPackageDetector(), KotlinPackageDetector(), CSharpNamespaceDetector()]
        self.detectors = detectors
        self.undefined = undefined if undefined is not None else settings.UNDEFINED_PACKAGE_NAME
        self.max_lines = max_lines or settings.PACKAGE_DETECTION_MAX_LINES

    def detect_package_name(self, file_name: str) -> str:
        """
        Detect the package of a reported file.

        Args:
            file_name: Path of the source file as reported by the tool

        Returns:
            The declared package or the undefined package name
        """
        for detector in self.detectors:
            if not detector.accepts(file_name):
                continue
            try:
                with open(file_name, "r", encoding="utf-8", errors="replace") as f:
                    package = detector.detect_from_lines(islice(f, self.max_lines))
            except OSError as e:
                logger.debug(f"Cannot read {file_name} for package detection: {e}")
                return self.undefined
            return package or self.undefined
        return self.undefined

    def get_supported_suffixes(self) -> List[str]:
        return sorted({suffix for d in self.detectors for suffix in d.SUFFIXES})


class NullPackageDetector:
    """Returns the undefined package name without touching the file system."""

    def __init__(self, undefined: Optional[str] = None):
        self.undefined = undefined if undefined is not None else settings.UNDEFINED_PACKAGE_NAME

    def detect_package_name(self, file_name: str) -> str:
        return self.undefined

