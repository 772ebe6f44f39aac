"""Discord adapter layer."""

from greenbook.adapters.discord.bot import GreenBookBot
from greenbook.adapters.discord.prompts import TagPromptRegistry

__all__ = [
    "GreenBookBot",
    "TagPromptRegistry",
]
