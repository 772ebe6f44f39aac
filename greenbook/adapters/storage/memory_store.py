"""In-memory fav storage adapter — implements FavStoragePort.

Favs live for the lifetime of the process. Every read and write goes
through one lock per store instance, and stored favs are frozen values,
so callers never see a half-applied change.
"""

import dataclasses
import itertools
import sys
import threading
from typing import Dict, Iterable, Iterator, List, Optional

from greenbook.domain.models import Fav


def _log(msg: str):
    print(msg, file=sys.stderr)


class MemoryFavStore:
    """Process-local fav storage implementing FavStoragePort protocol."""

    def __init__(self, id_counter: Optional[Iterator[int]] = None):
        # Ids are never reused, even after the fav is removed
        self._ids = id_counter if id_counter is not None else itertools.count(1)
        self._favs: Dict[str, Fav] = {}
        self._lock = threading.Lock()

    def save_new_fav(
        self,
        user_id: str,
        guild_id: str,
        channel_id: str,
        message_id: str,
        author_id: str,
    ) -> str:
        """Create an untagged fav and return its new id."""
        _log(f"Creating fav for User[{user_id}] Guild[{guild_id}] "
             f"Channel[{channel_id}] Message[{message_id}]")
        with self._lock:
            fav = Fav(
                id=str(next(self._ids)),
                user_id=user_id,
                guild_id=guild_id,
                channel_id=channel_id,
                message_id=message_id,
                author_id=author_id,
            )
            self._favs[fav.id] = fav
        return fav.id

    def get_favs(
        self,
        user_id: str,
        guild_id: Optional[str],
        tags: Iterable[str],
    ) -> List[Fav]:
        """Return the user's favs, optionally limited to one guild and to
        favs carrying at least one of ``tags``."""
        wanted = list(tags)
        _log(f"Getting favs for User[{user_id}] Guild[{guild_id}] Tags{wanted}")
        with self._lock:
            snapshot = list(self._favs.values())
        return [
            fav for fav in snapshot
            if fav.user_id == user_id
            and (guild_id is None or fav.guild_id == guild_id)
            and (not wanted or fav.has_any_tag(wanted))
        ]

    def remove_fav(self, fav_id: str) -> None:
        _log(f"Removing Fav[{fav_id}]")
        with self._lock:
            self._favs.pop(fav_id, None)

    def write_tags(self, fav_id: str, tags: Iterable[str]) -> None:
        """Replace the whole tag set of a fav. Missing ids are ignored."""
        new_tags = tuple(tags)
        with self._lock:
            fav = self._favs.get(fav_id)
            if fav is None:
                _log(f"Fav[{fav_id}] not found")
                return
            self._favs[fav_id] = dataclasses.replace(fav, tags=new_tags)
        _log(f"Setting tags of Fav[{fav_id}] to {list(new_tags)}")

    def get_fav(self, fav_id: str) -> Optional[Fav]:
        _log(f"Fetching Fav[{fav_id}]")
        with self._lock:
            return self._favs.get(fav_id)

    def __len__(self) -> int:
        with self._lock:
            return len(self._favs)
