"""Tests for severity classification and check identifier splitting."""
import pytest

from checkstyle_issues.models.schemas import Priority
from checkstyle_issues.services.parsers.classifiers import classify_severity, split_source


class TestClassifySeverity:
    """Test severity to priority mapping."""

    @pytest.mark.parametrize("severity", ["error", "ERROR", "Error", "eRrOr"])
    def test_error_is_high(self, severity):
        """Test error severities in any case."""
        assert classify_severity(severity) == Priority.HIGH

    def test_warning_is_normal(self):
        """Test warning severities."""
        assert classify_severity("warning") == Priority.NORMAL
        assert classify_severity("WARNING") == Priority.NORMAL

    def test_info_is_low(self):
        """Test info severities."""
        assert classify_severity("info") == Priority.LOW
        assert classify_severity("Info") == Priority.LOW

    @pytest.mark.parametrize("severity", ["fatal", "ignore", "", None, " error", "errors"])
    def test_unknown_severity_is_absent(self, severity):
        """Unrecognized severities are dropped, not errors."""
        assert classify_severity(severity) is None


class TestSplitSource:
    """Test type and category derivation."""

    def test_checkstyle_check(self):
        """Test a typical Checkstyle source."""
        assert split_source("checks.naming.MethodName") == ("MethodName", "Naming")

    def test_fully_qualified_check(self):
        """Test a fully qualified check class."""
        source = "com.puppycrawl.tools.checkstyle.checks.sizes.LineLengthCheck"
        assert split_source(source) == ("LineLengthCheck", "Sizes")

    def test_three_segments(self):
        """Test a three segment source."""
        assert split_source("a.b.C") == ("C", "B")

    def test_two_segments(self):
        """Test a two segment source."""
        assert split_source("x.Y") == ("Y", "X")

    def test_no_dot(self):
        """Test a source without dots."""
        assert split_source("C") == ("C", "")

    def test_empty(self):
        """Test empty and missing sources."""
        assert split_source("") == ("", "")
        assert split_source(None) == ("", "")

    def test_category_keeps_rest_of_case(self):
        """Test that only the first category character is uppercased."""
        assert split_source("checks.whiteSpace.NoWhitespaceAfter") == ("NoWhitespaceAfter", "WhiteSpace")

    def test_trailing_dot(self):
        """Test a source ending in a dot."""
        assert split_source("checks.naming.") == ("", "Naming")
