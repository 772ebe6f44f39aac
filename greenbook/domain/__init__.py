"""Domain layer — pure Python, no framework dependencies."""

from greenbook.domain.models import CommandResult, Fav, ResultStatus
from greenbook.domain.tags import count_tags, parse_tags
from greenbook.domain.commands import FavCommands

__all__ = [
    "CommandResult",
    "Fav",
    "FavCommands",
    "ResultStatus",
    "count_tags",
    "parse_tags",
]
