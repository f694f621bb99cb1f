"""Static analysis report parsers."""
from .base_parser import BaseParser
from .checkstyle_decoder import CheckStyleDecoder, RawDocument, RawFile, RawViolation
from .checkstyle_parser import CheckStyleConverter, CheckStyleParser
from .classifiers import classify_severity, split_source

__all__ = [
    "BaseParser",
    "CheckStyleDecoder",
    "CheckStyleConverter",
    "CheckStyleParser",
    "RawDocument",
    "RawFile",
    "RawViolation",
    "classify_severity",
    "split_source"
]
