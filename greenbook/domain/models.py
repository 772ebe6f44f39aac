"""Domain data models — pure Python dataclasses."""

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Optional, Tuple


@dataclass(frozen=True)
class Fav:
    """A saved reference to one chat message plus the owner's tags."""

    id: str
    user_id: str
    guild_id: str
    channel_id: str
    message_id: str
    author_id: str
    tags: Tuple[str, ...] = field(default_factory=tuple)

    def has_any_tag(self, tags) -> bool:
        """True if this fav carries at least one of ``tags``."""
        wanted = set(tags)
        return any(tag in wanted for tag in self.tags)


class ResultStatus(Enum):
    OK = "ok"
    NOT_FOUND = "not_found"
    NO_RESULTS = "no_results"


@dataclass(frozen=True)
class CommandResult:
    """Tagged result handed from FavCommands to the adapter for rendering."""

    status: ResultStatus
    value: Any = None
    error: Optional[str] = None

    @classmethod
    def ok(cls, value: Any = None) -> "CommandResult":
        return cls(ResultStatus.OK, value=value)

    @classmethod
    def not_found(cls, error: str = "Fav not found") -> "CommandResult":
        return cls(ResultStatus.NOT_FOUND, error=error)

    @classmethod
    def no_results(cls, error: str = "No favs found") -> "CommandResult":
        return cls(ResultStatus.NO_RESULTS, error=error)

    @property
    def is_ok(self) -> bool:
        return self.status is ResultStatus.OK
