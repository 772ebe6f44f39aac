"""Port interfaces (Hexagonal Architecture)."""

from greenbook.ports.inbound import FavQuery, FavReference
from greenbook.ports.outbound import FavStoragePort

__all__ = [
    "FavQuery",
    "FavReference",
    "FavStoragePort",
]
