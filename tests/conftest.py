"""Pytest configuration and fixtures."""
import pytest


SAMPLE_REPORT = """<?xml version="1.0" encoding="UTF-8"?>
<checkstyle version="10.12.0">
  <file name="src/main/java/com/example/Foo.java">
    <error line="12" column="4" severity="error"
           message="Name 'Bar' must match pattern '^[a-z][a-zA-Z0-9]*$'."
           source="com.puppycrawl.tools.checkstyle.checks.naming.MethodNameCheck"/>
    <error line="30" severity="warning" message="Line is longer than 100 characters."
           source="com.puppycrawl.tools.checkstyle.checks.sizes.LineLengthCheck"/>
  </file>
  <file name="src/main/java/com/example/package.html">
    <error line="1" severity="error" message="Missing javadoc." source="checks.javadoc.JavadocPackage"/>
  </file>
  <file name="src/main/java/com/example/Baz.java">
    <error line="7" column="1" severity="info" message="Unused import." source="checks.imports.UnusedImports"/>
    <error line="8" column="1" severity="ignore" message="Suppressed." source="checks.imports.UnusedImports"/>
  </file>
</checkstyle>
"""


class RecordingPackageDetector:
    """Package detector stub that records every call."""

    def __init__(self, package_name: str = "com.example"):
        self.package_name = package_name
        self.calls = []

    def detect_package_name(self, file_name: str) -> str:
        self.calls.append(file_name)
        return self.package_name


@pytest.fixture
def sample_report() -> str:
    return SAMPLE_REPORT


@pytest.fixture
def package_detector() -> RecordingPackageDetector:
    return RecordingPackageDetector()


@pytest.fixture
def parser(package_detector):
    from checkstyle_issues.services.parsers import CheckStyleParser
    return CheckStyleParser(package_detector=package_detector)
