"""Save chat messages as tagged favs and re-post them later."""

from greenbook.config import AppConfig, __version__
from greenbook.domain import CommandResult, Fav, FavCommands, ResultStatus, count_tags, parse_tags
from greenbook.ports import FavQuery, FavReference, FavStoragePort
from greenbook.adapters.storage import MemoryFavStore

__all__ = [
    "__version__",
    "AppConfig",
    "CommandResult",
    "Fav",
    "FavCommands",
    "FavQuery",
    "FavReference",
    "FavStoragePort",
    "MemoryFavStore",
    "ResultStatus",
    "count_tags",
    "parse_tags",
]
