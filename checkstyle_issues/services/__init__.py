"""Report parsing services."""
from .package_detectors import PackageDetectors, NullPackageDetector
from .parsers import CheckStyleParser

__all__ = [
    'PackageDetectors', 'NullPackageDetector',
    'CheckStyleParser',
]
