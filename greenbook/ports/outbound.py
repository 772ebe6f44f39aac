"""Outbound ports — interfaces for storage adapters."""

from typing import Iterable, List, Optional, Protocol, runtime_checkable

from greenbook.domain.models import Fav


@runtime_checkable
class FavStoragePort(Protocol):
    """Interface for fav storage.

    Implementations must be safe under concurrent calls and must treat a
    missing fav id as a no-op in ``remove_fav`` and ``write_tags``.
    """

    def save_new_fav(
        self,
        user_id: str,
        guild_id: str,
        channel_id: str,
        message_id: str,
        author_id: str,
    ) -> str: ...

    def get_favs(
        self,
        user_id: str,
        guild_id: Optional[str],
        tags: Iterable[str],
    ) -> List[Fav]: ...

    def remove_fav(self, fav_id: str) -> None: ...

    def write_tags(self, fav_id: str, tags: Iterable[str]) -> None: ...

    def get_fav(self, fav_id: str) -> Optional[Fav]: ...
