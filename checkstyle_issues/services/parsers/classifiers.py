"""Mapping of raw Checkstyle attributes onto issue fields."""
from typing import Optional, Tuple

from ...models.schemas import Priority

SEVERITY_PRIORITIES = {
    "error": Priority.HIGH,
    "warning": Priority.NORMAL,
    "info": Priority.LOW,
}


def classify_severity(severity: Optional[str]) -> Optional[Priority]:
    """
    Map a Checkstyle severity to a priority.

    Matching is exact but case-insensitive. Anything else (including "ignore",
    empty and missing severities) returns None and the violation is dropped.
    """
    if not severity:
        return None
    return SEVERITY_PRIORITIES.get(severity.lower())


def _last_segment(name: str) -> str:
    return name.rpartition(".")[2]


def split_source(source: Optional[str]) -> Tuple[str, str]:
    """
    Derive ``(type, category)`` from a dotted check identifier.

    ``"com.puppycrawl.tools.checkstyle.checks.naming.MethodNameCheck"`` gives
    ``("MethodNameCheck", "Naming")``. Without a dot the whole identifier is
    the type and the category is empty.
    """
    if not source:
        return "", ""
    type_ = _last_segment(source)
    category = _last_segment(source.rpartition(".")[0])
    return type_, category[:1].upper() + category[1:]
