from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Bot settings loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_prefix="SIMPLEBOT_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
    )

    # Name shown in the help text ("@simplebot help")
    bot_name: str = "simplebot"

    # Direct channel of the operator who receives diagnostics when a message fails
    # Empty string = no escape hatch, failures are only logged
    admin_channel: str = ""

    # Channels where the bot answers without being mentioned
    observed_channel_ids: list[str] = []

    # Result lists longer than this are cut off with "..."
    max_listed_results: int = 10

    # Logging
    log_level: str = "INFO"

    @property
    def admin_enabled(self) -> bool:
        """Check if an admin channel is configured to receive diagnostics."""
        return bool(self.admin_channel)


settings = Settings()
