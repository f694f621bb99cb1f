"""checkstyle-issues - Checkstyle XML reports as typed issues."""
from .core.exceptions import (
    MalformedInputError,
    NotThisFormatError,
    ParsingCanceledError,
    ParsingError,
    ReportError,
    ReportReadError,
)
from .models.issues import IssueBuilder, Issues
from .models.schemas import Issue, Priority
from .services import CheckStyleParser, NullPackageDetector, PackageDetectors

__version__ = "1.0.0"

__all__ = [
    'CheckStyleParser', 'PackageDetectors', 'NullPackageDetector',
    'Issue', 'IssueBuilder', 'Issues', 'Priority',
    'ReportError', 'ParsingError', 'MalformedInputError', 'NotThisFormatError',
    'ReportReadError', 'ParsingCanceledError',
]
