"""Discord adapter — bridges discord.Client events to FavCommands.

Slash commands (/fav, /list, /help) and reactions on messages are decoded
into FavReference/FavQuery intents here; the CommandResult coming back is
rendered as an embed. No fav state lives in this module apart from the
pending tag prompts.
"""

import sys
from typing import Awaitable, Callable, Optional, Set

import discord
from discord import app_commands

from greenbook.adapters.discord.embeds import (
    error_embed,
    fav_embed,
    fav_id_from_message,
    help_embed,
    tag_count_embed,
)
from greenbook.adapters.discord.prompts import TagPromptRegistry
from greenbook.config import AppConfig
from greenbook.domain.commands import FavCommands
from greenbook.domain.tags import parse_tags
from greenbook.ports.inbound import FavQuery, FavReference


def _log(msg: str):
    print(msg, file=sys.stderr)


def _emoji_key(emoji: str) -> str:
    # Clients send some emoji with and some without the variation selector
    return emoji.replace("\N{VARIATION SELECTOR-16}", "")


def _opt_id(value: Optional[int]) -> Optional[str]:
    return str(value) if value is not None else None


class GreenBookBot(discord.Client):
    """Discord client that saves, posts and lists favs."""

    def __init__(self, commands: FavCommands, config: Optional[AppConfig] = None, **discord_kwargs):
        intents = discord.Intents.default()
        intents.message_content = True
        super().__init__(intents=intents, **discord_kwargs)

        self.config = config or AppConfig()
        self._commands = commands
        self._prompts = TagPromptRegistry(self.config.max_tag_prompts)
        self._commands_synced = False
        self.tree = app_commands.CommandTree(self)
        self._register_commands()

    def _register_commands(self):
        @self.tree.command(name="fav", description="Post a random fav, filtered by the given tags or from all favs")
        @app_commands.describe(tag="Limit the favs to only include favs with at least one of these (space-separated) tags")
        async def fav_command(interaction: discord.Interaction, tag: Optional[str] = None):
            await self.run_command(interaction, self.handle_fav, tag)

        @self.tree.command(name="list", description="List amount of favs per tag")
        @app_commands.describe(tag="Limit the listed counts to favs with at least one of these (space-separated) tags")
        async def list_command(interaction: discord.Interaction, tag: Optional[str] = None):
            await self.run_command(interaction, self.handle_list, tag)

        @self.tree.command(name="help", description="Display usage help")
        async def help_command(interaction: discord.Interaction):
            await self.run_command(interaction, self.handle_help)

    # -- Lifecycle --

    async def on_ready(self):
        _log(f"[GreenBookBot] logged in as {self.user}")
        if not self._commands_synced:
            await self.sync_commands()
            self._commands_synced = True

    async def sync_commands(self):
        if self.config.deploy_commands_global:
            _log("[GreenBookBot] initializing commands globally")
            await self.tree.sync()
            return
        for guild in self.guilds:
            _log(f"[GreenBookBot] initializing commands on [{guild}]")
            self.tree.copy_global_to(guild=guild)
            await self.tree.sync(guild=guild)

    def visible_guild_ids(self) -> Set[str]:
        return {str(guild.id) for guild in self.guilds}

    # -- Slash commands --

    async def run_command(
        self,
        interaction: discord.Interaction,
        handler: Callable[..., Awaitable[None]],
        *args,
    ):
        """Run a command handler, answering unexpected failures with an error embed."""
        try:
            await handler(interaction, *args)
        except Exception as e:
            _log(f"[GreenBookBot] /{interaction.command.name if interaction.command else '?'} failed: {e!r}")
            await self._reply_error(interaction, f"GreenBookBot did a whoopsie:\n{e or 'Unknown error'}")

    async def handle_fav(self, interaction: discord.Interaction, tag: Optional[str] = None):
        query = FavQuery(
            user_id=str(interaction.user.id),
            guild_id=_opt_id(interaction.guild_id),
            tag_filter=tag or "",
        )
        result = self._commands.post_random_fav(query, self.visible_guild_ids())
        if not result.is_ok:
            await self._reply_error(interaction, result.error)
            return

        fav = result.value
        guild = self.get_guild(int(fav.guild_id))
        channel = guild.get_channel_or_thread(int(fav.channel_id)) if guild else None
        if channel is None:
            await self._reply_error(interaction, f"Channel [{fav.channel_id}] not found on [{guild or fav.guild_id}]")
            return

        try:
            message = await channel.fetch_message(int(fav.message_id))
        except discord.NotFound:
            await self._reply_error(interaction, f"Message [{fav.message_id}] of Fav [{fav.id}] not found")
            return

        await interaction.response.send_message(embed=fav_embed(fav, message))

    async def handle_list(self, interaction: discord.Interaction, tag: Optional[str] = None):
        query = FavQuery(
            user_id=str(interaction.user.id),
            guild_id=_opt_id(interaction.guild_id),
            tag_filter=tag or "",
        )
        result = self._commands.list_tag_counts(query)
        if not result.is_ok:
            await self._reply_error(interaction, result.error)
            return
        await interaction.response.send_message(embed=tag_count_embed(result.value), ephemeral=True)

    async def handle_help(self, interaction: discord.Interaction):
        emoji = self.config.emoji
        await interaction.response.send_message(
            embed=help_embed(emoji.fav, emoji.remove, emoji.tag),
            ephemeral=True,
        )

    async def _reply_error(self, interaction: discord.Interaction, text: str):
        embed = error_embed(text)
        if interaction.response.is_done():
            await interaction.followup.send(embed=embed, ephemeral=True)
        else:
            await interaction.response.send_message(embed=embed, ephemeral=True)

    # -- Reactions --

    async def on_raw_reaction_add(self, payload: discord.RawReactionActionEvent):
        if not self.user or payload.user_id == self.user.id:
            return
        # Favs always belong to a guild
        if payload.guild_id is None:
            return

        emoji = _emoji_key(str(payload.emoji))
        handlers = {
            _emoji_key(self.config.emoji.fav): self.handle_fav_reaction,
            _emoji_key(self.config.emoji.remove): self.handle_remove_reaction,
            _emoji_key(self.config.emoji.tag): self.handle_tag_reaction,
        }
        handler = handlers.get(emoji)
        if handler is None:
            return

        try:
            await handler(payload)
        except Exception as e:
            _log(f"[GreenBookBot] reaction {emoji} on Message[{payload.message_id}] failed: {e!r}")

    async def handle_fav_reaction(self, payload: discord.RawReactionActionEvent):
        message = await self._fetch_message(payload.channel_id, payload.message_id)
        result = self._commands.create_fav(FavReference(
            user_id=str(payload.user_id),
            guild_id=str(payload.guild_id),
            channel_id=str(payload.channel_id),
            message_id=str(payload.message_id),
            author_id=str(message.author.id),
        ))
        fav_id = result.value
        await self._prompt_for_tags(
            payload.user_id,
            fav_id,
            f"Fav [{fav_id}] saved. Reply to this message with its tags (space-separated).",
        )

    async def handle_remove_reaction(self, payload: discord.RawReactionActionEvent):
        message, fav = await self._own_posted_fav(payload)
        if fav is None:
            return
        self._commands.remove_fav(fav.id)
        await message.delete()

    async def handle_tag_reaction(self, payload: discord.RawReactionActionEvent):
        _, fav = await self._own_posted_fav(payload)
        if fav is None:
            return
        current = " ".join(fav.tags) or "(none)"
        await self._prompt_for_tags(
            payload.user_id,
            fav.id,
            f"Reply to this message with the new tags for Fav [{fav.id}]. Current tags: {current}",
        )

    async def _own_posted_fav(self, payload: discord.RawReactionActionEvent):
        """Resolve the fav behind a bot-posted embed, if the reacting user owns it."""
        message = await self._fetch_message(payload.channel_id, payload.message_id)
        if message.author.id != self.user.id:
            return message, None
        fav_id = fav_id_from_message(message)
        if fav_id is None:
            return message, None
        result = self._commands.owned_fav(fav_id, str(payload.user_id))
        return message, result.value if result.is_ok else None

    async def _fetch_message(self, channel_id: int, message_id: int) -> discord.Message:
        channel = self.get_channel(channel_id) or await self.fetch_channel(channel_id)
        return await channel.fetch_message(message_id)

    async def _prompt_for_tags(self, user_id: int, fav_id: str, text: str):
        user = self.get_user(user_id) or await self.fetch_user(user_id)
        prompt = await user.send(text)
        self._prompts.add(prompt.id, fav_id)

    # -- Tag replies --

    async def on_message(self, message: discord.Message):
        if message.author.bot:
            return
        reference = message.reference
        if reference is None or reference.message_id is None:
            return
        fav_id = self._prompts.peek(reference.message_id)
        if fav_id is None:
            return

        try:
            await self.handle_tag_reply(message, reference.message_id, fav_id)
        except Exception as e:
            _log(f"[GreenBookBot] tag reply to Message[{reference.message_id}] failed: {e!r}")

    async def handle_tag_reply(self, message: discord.Message, prompt_id: int, fav_id: str):
        # A prompt for a removed fav can never be answered
        if not self._commands.get_fav(fav_id).is_ok:
            self._prompts.pop(prompt_id)
            return
        if not self._commands.owned_fav(fav_id, str(message.author.id)).is_ok:
            return

        self._prompts.pop(prompt_id)
        self._commands.set_tags(fav_id, parse_tags(message.content))
        await message.add_reaction("\N{WHITE HEAVY CHECK MARK}")
