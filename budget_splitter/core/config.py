"""Configuration management for the bot credentials and storage path.

Loads configuration from environment variables or .env file.
"""

import os
from dataclasses import dataclass, field
from pathlib import Path
from typing import Optional

from dotenv import load_dotenv

from .exceptions import ConfigurationError

PROJECT_ROOT = Path(__file__).parent.parent.parent
DEFAULT_CACHE_FILE = PROJECT_ROOT / "data" / "cache.json"


@dataclass
class BotConfig:
    """Runtime configuration for the Telegram bot."""

    # Bot API token from @BotFather
    telegram_bot_token: str

    # Chat that receives /feedback relays
    admin_telegram_id: int

    # Where per-user categories are persisted
    cache_file: Path = field(default_factory=lambda: DEFAULT_CACHE_FILE)

    @classmethod
    def from_env(cls) -> "BotConfig":
        """Load configuration from environment variables.

        Raises:
            ConfigurationError: if a required variable is missing or invalid
        """
        token = os.getenv("TELEGRAM_BOT_TOKEN", "").strip()
        if not token:
            raise ConfigurationError("TELEGRAM_BOT_TOKEN", "env var required")

        admin_id_str = os.getenv("ADMIN_TELEGRAM_ID", "").strip()
        if not admin_id_str:
            raise ConfigurationError("ADMIN_TELEGRAM_ID", "env var required")
        try:
            admin_id = int(admin_id_str)
        except ValueError:
            raise ConfigurationError(
                "ADMIN_TELEGRAM_ID", f"not an integer: {admin_id_str!r}"
            ) from None

        cache_file = os.getenv("BUDGET_CACHE_FILE")

        return cls(
            telegram_bot_token=token,
            admin_telegram_id=admin_id,
            cache_file=Path(cache_file) if cache_file else DEFAULT_CACHE_FILE,
        )

    @classmethod
    def load(cls, env_file: Optional[Path] = None) -> "BotConfig":
        """
        Load configuration from .env file and environment variables.

        Args:
            env_file: Optional path to .env file. If not provided,
                      looks for .env in the project root.

        Returns:
            BotConfig instance with loaded values
        """
        if env_file:
            load_dotenv(env_file)
        else:
            env_path = PROJECT_ROOT / ".env"
            if env_path.exists():
                load_dotenv(env_path)

        return cls.from_env()

