"""Configuration management for the ledger bot."""
import os
from dataclasses import dataclass


def _env_flag(name: str, default: bool) -> bool:
    value = os.getenv(name)
    if value is None:
        return default
    return value.strip().lower() in ('1', 'true', 'yes', 'on')


@dataclass
class Settings:
    """Configuration settings for the ledger bot.

    This class centralizes all configuration values, replacing hardcoded
    values throughout the codebase.
    """

    # Discord Configuration (required)
    discord_token: str
    command_prefix: str = '$'

    # Store Configuration
    db_path: str = ':memory:'
    seed_demo_data: bool = True
    fixture_seed: int = 42

    # Business Rules
    default_institution_id: str = 'ins_56'  # Chase
    demo_user_email: str | None = 'demo@banking.com'

    # Front End Configuration
    page_size: int = 10
    confirm_timeout: float = 600.0

    # Logging Configuration
    log_file: str = 'bankbot.log'

    @classmethod
    def load(cls) -> 'Settings':
        """Load settings from environment variables.

        Returns:
            Settings: A Settings instance with values from environment variables.

        Raises:
            ValueError: If required environment variables are not set.
        """
        discord_token = os.getenv('DISCORD_TOKEN')

        if not discord_token:
            raise ValueError("DISCORD_TOKEN environment variable is required")

        return cls(
            discord_token=discord_token,
            command_prefix=os.getenv('BANK_COMMAND_PREFIX', cls.command_prefix),
            db_path=os.getenv('BANK_DB_PATH', cls.db_path),
            seed_demo_data=_env_flag('BANK_SEED_DEMO_DATA', cls.seed_demo_data),
            log_file=os.getenv('BANK_LOG_FILE', cls.log_file),
        )
