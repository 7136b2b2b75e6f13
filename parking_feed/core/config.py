from typing import Literal, Tuple

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    # Environment mode: dev or prod
    ENV: Literal["dev", "prod"] = "dev"

    # Feed endpoint (ThingSpeak channel feed JSON)
    FEED_URL: str = ""

    # HTTP timeouts
    HTTP_CONNECT_TIMEOUT_SECONDS: float = 15.0
    HTTP_READ_TIMEOUT_SECONDS: float = 10.0

    # Display records built from field1..field3
    SPOT_LABELS: Tuple[str, str, str] = ("Loc de parcare 1", "Loc de parcare 2", "Loc de parcare 3")
    SPOT_TIMESTAMP: int = 1554205570
    SPOT_URL: str = "https://play.google.com/store/apps/developer?id=Enachescu+Robert"

    # Logging
    LOG_LEVEL: str = "INFO"
    LOG_DIR: str = "logs"
    SLACK_WEBHOOK_URL: str | None = None

    # Docs Configuration
    DOCS_ENABLED: bool | None = None  # Override docs setting (None = auto based on ENV)

    model_config = SettingsConfigDict(
        env_file=".env",
        extra="ignore",  # ignore unrelated keys in local .env
    )

    @property
    def is_production(self) -> bool:
        """Check if running in production mode."""
        return self.ENV == "prod"

    @property
    def is_development(self) -> bool:
        """Check if running in development mode."""
        return self.ENV == "dev"

    @property
    def debug_enabled(self) -> bool:
        """Debug mode is only enabled in development."""
        return self.is_development

    @property
    def effective_log_level(self) -> str:
        """Return appropriate log level based on environment."""
        if self.is_production:
            # In production, minimum INFO level (ignore DEBUG)
            return self.LOG_LEVEL if self.LOG_LEVEL.upper() != "DEBUG" else "INFO"
        return self.LOG_LEVEL

    @property
    def docs_enabled(self) -> bool:
        """Swagger/ReDoc docs enabled based on environment or override."""
        if self.DOCS_ENABLED is not None:
            return self.DOCS_ENABLED
        return self.is_development

    @property
    def feed_configured(self) -> bool:
        return bool(self.FEED_URL.strip())


settings = Settings()
