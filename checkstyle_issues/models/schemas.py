"""Data models for checkstyle-issues."""
from enum import Enum

from pydantic import BaseModel, ConfigDict, Field

from ..core.config import settings


class Priority(str, Enum):
    """Normalized severity of an issue, most severe first."""
    HIGH = "HIGH"
    NORMAL = "NORMAL"
    LOW = "LOW"

    @property
    def rank(self) -> int:
        """0 for HIGH, 2 for LOW."""
        return list(Priority).index(self)

    def is_at_least(self, other: "Priority") -> bool:
        return self.rank <= other.rank

    @classmethod
    def from_name(cls, name: str) -> "Priority":
        """Look up a priority by case-insensitive name."""
        try:
            return cls[name.strip().upper()]
        except KeyError:
            raise ValueError(f"Unknown priority: {name!r}") from None


class Issue(BaseModel):
    """A single normalized Checkstyle violation."""
    model_config = ConfigDict(frozen=True)

    file_name: str
    package_name: str = Field(default_factory=lambda: settings.UNDEFINED_PACKAGE_NAME)
    line_start: int = 0
    column_start: int = 0
    priority: Priority
    category: str = ""
    type: str = ""
    message: str = ""
