"""Issue construction and the ordered issue collection."""
from collections import Counter
from typing import Any, Callable, Dict, Iterable, Iterator, List, Optional, Union, overload

from ..core.exceptions import IncompleteIssueError
from .schemas import Issue, Priority


class IssueBuilder:
    """Fluent accumulator for the fields of the next :class:`Issue`.

    ``file_name`` and ``priority`` must be set before :meth:`build`; the
    remaining fields fall back to the model defaults.
    """

    REQUIRED_FIELDS = ("file_name", "priority")

    def __init__(self):
        self._fields: Dict[str, Any] = {}

    def set_file_name(self, file_name: str) -> "IssueBuilder":
        self._fields["file_name"] = file_name
        return self

    def set_package_name(self, package_name: str) -> "IssueBuilder":
        self._fields["package_name"] = package_name
        return self

    def set_line_start(self, line_start: int) -> "IssueBuilder":
        self._fields["line_start"] = line_start
        return self

    def set_column_start(self, column_start: int) -> "IssueBuilder":
        self._fields["column_start"] = column_start
        return self

    def set_priority(self, priority: Priority) -> "IssueBuilder":
        self._fields["priority"] = priority
        return self

    def set_category(self, category: str) -> "IssueBuilder":
        self._fields["category"] = category
        return self

    def set_type(self, type_: str) -> "IssueBuilder":
        self._fields["type"] = type_
        return self

    def set_message(self, message: str) -> "IssueBuilder":
        self._fields["message"] = message
        return self

    def build(self) -> Issue:
        """Create the immutable issue from the fields set so far."""
        missing = [name for name in self.REQUIRED_FIELDS if self._fields.get(name) is None]
        if missing:
            raise IncompleteIssueError(missing)
        return Issue(**self._fields)


class Issues:
    """Immutable, insertion-ordered collection of issues."""

    def __init__(self, issues: Iterable[Issue] = ()):
        self._issues = tuple(issues)

    def __len__(self) -> int:
        return len(self._issues)

    def __iter__(self) -> Iterator[Issue]:
        return iter(self._issues)

    @overload
    def __getitem__(self, index: int) -> Issue: ...

    @overload
    def __getitem__(self, index: slice) -> "Issues": ...

    def __getitem__(self, index: Union[int, slice]) -> Union[Issue, "Issues"]:
        if isinstance(index, slice):
            return Issues(self._issues[index])
        return self._issues[index]

    def __add__(self, other: "Issues") -> "Issues":
        if not isinstance(other, Issues):
            return NotImplemented
        return Issues(self._issues + other._issues)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Issues):
            return NotImplemented
        return self._issues == other._issues

    def __repr__(self) -> str:
        return f"Issues(size={len(self)}, high={self.high}, normal={self.normal}, low={self.low})"

    @property
    def size(self) -> int:
        return len(self._issues)

    def is_empty(self) -> bool:
        return not self._issues

    def size_of(self, priority: Priority) -> int:
        """Number of issues with the given priority."""
        return sum(1 for issue in self._issues if issue.priority == priority)

    @property
    def high(self) -> int:
        return self.size_of(Priority.HIGH)

    @property
    def normal(self) -> int:
        return self.size_of(Priority.NORMAL)

    @property
    def low(self) -> int:
        return self.size_of(Priority.LOW)

    def _distinct(self, field: str) -> List[str]:
        return sorted({getattr(issue, field) for issue in self._issues})

    @property
    def files(self) -> List[str]:
        return self._distinct("file_name")

    @property
    def packages(self) -> List[str]:
        return self._distinct("package_name")

    @property
    def categories(self) -> List[str]:
        return self._distinct("category")

    @property
    def types(self) -> List[str]:
        return self._distinct("type")

    def count_by(self, field: str) -> Counter:
        """Count issues grouped by the value of ``field``."""
        if field not in Issue.model_fields:
            raise ValueError(f"Unknown issue field: {field}")
        return Counter(getattr(issue, field) for issue in self._issues)

    def filter(self, predicate: Callable[[Issue], bool]) -> "Issues":
        return Issues(issue for issue in self._issues if predicate(issue))

    def at_least(self, priority: Priority) -> "Issues":
        """Issues whose priority is ``priority`` or more severe."""
        return self.filter(lambda issue: issue.priority.is_at_least(priority))

    def to_dicts(self) -> List[Dict[str, Any]]:
        return [issue.model_dump(mode="json") for issue in self._issues]

    def summary(self, top: Optional[int] = None) -> Dict[str, Any]:
        """Totals per priority, category and file."""
        by_category = self.count_by("category").most_common(top)
        by_file = self.count_by("file_name").most_common(top)
        return {
            "total": self.size,
            "priorities": {p.value: self.size_of(p) for p in Priority},
            "categories": dict(by_category),
            "files": dict(by_file),
        }
