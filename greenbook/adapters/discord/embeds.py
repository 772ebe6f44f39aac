"""Embed rendering for fav replies."""

from typing import Dict, Optional

import discord

from greenbook.domain.models import Fav

FAV_COLOR = discord.Color.from_rgb(80, 150, 25)
HELP_COLOR = discord.Color.from_rgb(25, 80, 150)
ERROR_COLOR = discord.Color.from_rgb(190, 40, 40)

# Discord embed limits
_MAX_FIELDS = 25
_MAX_FIELD_NAME = 256
_MAX_FIELD_VALUE = 1024
_MAX_DESCRIPTION = 4096

NO_TAGS_TEXT = "No tags on the matching favs"

HELP_TEXT = """
**GreenBookBot** allows you to fav messages and re-post them later by referencing tags set on fav creation.

**Creating a fav**
React with {fav} on any posted message and then set the tags for the fav by replying to the bot's message.

**Posting a fav**
Use the `/fav` command to post a random fav from your whole list.
If you also add a (space-separated) list of tags, the posted fav will be selected (randomly) only from favs that have any of the provided tags.

**Removing a fav**
React with {remove} on the posted fav message from the bot.

**Listing favs**
Use the `/list` command to get a list of all your used tags of all favs.
As with `/fav`, provide a (space-separated) list of tags to limit the list to only those tags.

**Editing tags on a fav**
React with {tag} on the posted fav to re-set all tags for this fav.
"""


def _truncate(text: str, limit: int) -> str:
    if len(text) <= limit:
        return text
    return text[: limit - 1] + "\N{HORIZONTAL ELLIPSIS}"


def _is_image(attachment: discord.Attachment) -> bool:
    content_type = attachment.content_type or ""
    return content_type.startswith("image/")


def fav_embed(fav: Fav, message: discord.Message) -> discord.Embed:
    """Render the source message of a fav. The footer carries the fav id."""
    author = message.author
    embed = discord.Embed(
        color=FAV_COLOR,
        description=message.content,
        timestamp=message.created_at,
    )
    embed.set_author(name=author.name, url=message.jump_url, icon_url=author.display_avatar.url)
    embed.set_footer(text=fav.id)

    image_url: Optional[str] = None
    for attachment in message.attachments:
        if _is_image(attachment):
            image_url = attachment.proxy_url
            embed.set_image(url=image_url)
            break

    extra = []
    for attachment in message.attachments:
        if attachment.proxy_url == image_url:
            continue
        prefix = f"{attachment.description}: " if attachment.description else ""
        extra.append(f"{prefix}{attachment.proxy_url}")
    if extra:
        embed.description = _truncate(
            "\n".join([message.content or ""] + extra).strip(), _MAX_DESCRIPTION,
        )

    if fav.tags:
        embed.add_field(name="Tags", value=_truncate(" ".join(fav.tags), _MAX_FIELD_VALUE), inline=False)
    return embed


def tag_count_embed(counts: Dict[str, int]) -> discord.Embed:
    embed = discord.Embed(color=FAV_COLOR)
    if not counts:
        embed.description = NO_TAGS_TEXT
        return embed
    for tag, count in list(counts.items())[:_MAX_FIELDS]:
        embed.add_field(name=_truncate(tag, _MAX_FIELD_NAME), value=str(count), inline=False)
    if len(counts) > _MAX_FIELDS:
        embed.set_footer(text=f"... and {len(counts) - _MAX_FIELDS} more tags")
    return embed


def help_embed(fav: str, remove: str, tag: str) -> discord.Embed:
    return discord.Embed(
        color=HELP_COLOR,
        description=HELP_TEXT.format(fav=fav, remove=remove, tag=tag),
    )


def error_embed(text: str) -> discord.Embed:
    return discord.Embed(color=ERROR_COLOR, description=text)


def fav_id_from_message(message: discord.Message) -> Optional[str]:
    """Read the fav id back from a posted fav embed."""
    for embed in message.embeds:
        text = embed.footer.text if embed.footer else None
        if text and text.strip().isdigit():
            return text.strip()
    return None
