from pydantic_settings import BaseSettings, SettingsConfigDict


class MissingConfigurationError(RuntimeError):
    """Raised at startup when a required environment variable is absent."""

    def __init__(self, missing: list[str]) -> None:
        self.missing = missing
        super().__init__(f"Missing {' or '.join(missing)} in environment variables.")


class Settings(BaseSettings):
    model_config = SettingsConfigDict(env_file=".env", env_file_encoding="utf-8")

    # Telegram Bot (required)
    bot_token: str = ""
    channel_id: str = ""  # e.g. "-1001234567890"

    # Comma-separated Telegram user IDs allowed to publish; blank = everyone
    admin_user_ids: str = ""

    # Signals
    default_lot: float = 0.10  # in lots
    fixed_price: float = 3375.97  # replace with a realtime feed if needed

    # Web (liveness probe)
    web_host: str = "0.0.0.0"
    port: int = 3000

    log_level: str = "INFO"

    def require_transport(self) -> None:
        """Fail fast when the bot cannot talk to Telegram."""
        missing = []
        if not self.bot_token:
            missing.append("BOT_TOKEN")
        if not self.channel_id:
            missing.append("CHANNEL_ID")
        if missing:
            raise MissingConfigurationError(missing)

    def admin_ids(self) -> set[int]:
        return {
            int(part)
            for part in self.admin_user_ids.split(",")
            if part.strip().lstrip("-").isdigit()
        }


settings = Settings()
