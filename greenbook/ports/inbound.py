"""Inbound port — platform-agnostic intents decoded by the adapters."""

from dataclasses import dataclass
from typing import Optional


@dataclass
class FavReference:
    """The message a user asked to fav. All ids are opaque strings."""

    user_id: str
    guild_id: str
    channel_id: str
    message_id: str
    author_id: str


@dataclass
class FavQuery:
    """Which of a user's favs to look at.

    ``guild_id`` of ``None`` covers every guild the user has favs in.
    ``tag_filter`` is the raw space-separated tag string the user typed.
    """

    user_id: str
    guild_id: Optional[str] = None
    tag_filter: str = ""
