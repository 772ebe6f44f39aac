"""Launcher for the GreenBook Discord bot."""

import asyncio
import sys
from typing import Optional

from greenbook.adapters.discord.bot import GreenBookBot
from greenbook.adapters.storage.memory_store import MemoryFavStore
from greenbook.config import AppConfig
from greenbook.domain.commands import FavCommands


def _log(msg: str):
    print(msg, file=sys.stderr)


def build_bot(config: AppConfig) -> GreenBookBot:
    """Wire storage, commands and the Discord client together."""
    store = MemoryFavStore()
    commands = FavCommands(store)
    return GreenBookBot(commands, config)


async def launch_bot(config: Optional[AppConfig] = None):
    """Start the bot and run until it disconnects."""
    config = config or AppConfig.from_env()
    if not config.discord_token:
        _log("No bot configured. Set the DISCORD_TOKEN environment variable.")
        return

    bot = build_bot(config)
    _log("Launching GreenBookBot...")
    async with bot:
        await bot.start(config.discord_token)


def main():
    asyncio.run(launch_bot())


if __name__ == "__main__":
    main()
