"""Configuration and shared state."""

__version__ = "0.1.0"

import os
from dataclasses import dataclass, field

from dotenv import load_dotenv

load_dotenv()

_TRUTHY = ("1", "true", "yes", "on")


def _env_flag(name: str, default: str = "false") -> bool:
    return os.getenv(name, default).strip().lower() in _TRUTHY


DISCORD_TOKEN = os.getenv("DISCORD_TOKEN", "")
DEPLOY_COMMANDS_GLOBAL = _env_flag("DEPLOY_COMMANDS_GLOBAL")

FAV_EMOJI = os.getenv("GREENBOOK_FAV_EMOJI", "\N{GREEN BOOK}")
REMOVE_EMOJI = os.getenv("GREENBOOK_REMOVE_EMOJI", "\N{WASTEBASKET}\N{VARIATION SELECTOR-16}")
TAG_EMOJI = os.getenv("GREENBOOK_TAG_EMOJI", "\N{LABEL}\N{VARIATION SELECTOR-16}")

MAX_TAG_PROMPTS = int(os.getenv("GREENBOOK_MAX_TAG_PROMPTS", "200"))


@dataclass
class EmojiConfig:
    fav: str = "\N{GREEN BOOK}"
    remove: str = "\N{WASTEBASKET}\N{VARIATION SELECTOR-16}"
    tag: str = "\N{LABEL}\N{VARIATION SELECTOR-16}"


@dataclass
class AppConfig:
    """Typed configuration for the bot process."""

    discord_token: str = ""
    deploy_commands_global: bool = False
    max_tag_prompts: int = 200
    emoji: EmojiConfig = field(default_factory=EmojiConfig)

    @classmethod
    def from_env(cls) -> "AppConfig":
        """Create AppConfig from environment variables."""
        return cls(
            discord_token=DISCORD_TOKEN,
            deploy_commands_global=DEPLOY_COMMANDS_GLOBAL,
            max_tag_prompts=MAX_TAG_PROMPTS,
            emoji=EmojiConfig(
                fav=FAV_EMOJI,
                remove=REMOVE_EMOJI,
                tag=TAG_EMOJI,
            ),
        )
