"""Fav commands: turn decoded user intents into storage calls.

Pure domain logic, no framework dependencies. FavCommands keeps no state of
its own besides the storage port and the random source; every method
returns a CommandResult for the adapter to render.
"""

import random
from typing import TYPE_CHECKING, AbstractSet, Iterable, Optional

from greenbook.domain.models import CommandResult
from greenbook.domain.tags import count_tags, parse_tags
from greenbook.ports.inbound import FavQuery, FavReference

if TYPE_CHECKING:
    from greenbook.ports.outbound import FavStoragePort


class FavCommands:
    """Command orchestrator between the chat adapters and fav storage."""

    def __init__(self, storage: "FavStoragePort", rng: Optional[random.Random] = None):
        self._storage = storage
        self._rng = rng or random.Random()

    def create_fav(self, ref: FavReference) -> CommandResult:
        """Save a new untagged fav. The value is the new fav id."""
        fav_id = self._storage.save_new_fav(
            user_id=ref.user_id,
            guild_id=ref.guild_id,
            channel_id=ref.channel_id,
            message_id=ref.message_id,
            author_id=ref.author_id,
        )
        return CommandResult.ok(fav_id)

    def post_random_fav(
        self,
        query: FavQuery,
        visible_guild_ids: AbstractSet[str],
    ) -> CommandResult:
        """Pick one fav at random among those matching ``query``.

        Favs from guilds missing in ``visible_guild_ids`` are skipped even
        without a guild filter, since their source messages can no longer
        be reached.
        """
        favs = self._storage.get_favs(
            query.user_id, query.guild_id, parse_tags(query.tag_filter),
        )
        candidates = [fav for fav in favs if fav.guild_id in visible_guild_ids]
        if not candidates:
            return CommandResult.no_results()
        return CommandResult.ok(self._rng.choice(candidates))

    def list_tag_counts(self, query: FavQuery) -> CommandResult:
        """Count tag usage over the favs matching ``query``.

        The counts include every tag of the matching favs, not only the
        tags in the filter.
        """
        favs = self._storage.get_favs(
            query.user_id, query.guild_id, parse_tags(query.tag_filter),
        )
        if not favs:
            return CommandResult.no_results()
        return CommandResult.ok(count_tags(favs))

    def get_fav(self, fav_id: str) -> CommandResult:
        fav = self._storage.get_fav(fav_id)
        if fav is None:
            return CommandResult.not_found()
        return CommandResult.ok(fav)

    def owned_fav(self, fav_id: str, user_id: str) -> CommandResult:
        """Like get_fav, but a fav owned by someone else counts as missing."""
        fav = self._storage.get_fav(fav_id)
        if fav is None or fav.user_id != user_id:
            return CommandResult.not_found()
        return CommandResult.ok(fav)

    def remove_fav(self, fav_id: str) -> CommandResult:
        self._storage.remove_fav(fav_id)
        return CommandResult.ok()

    def set_tags(self, fav_id: str, tags: Iterable[str]) -> CommandResult:
        self._storage.write_tags(fav_id, list(tags))
        return CommandResult.ok()
