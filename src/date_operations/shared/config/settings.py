"""Application settings using Pydantic."""

from functools import lru_cache
from pathlib import Path

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

from date_operations.domain.value_objects.custom_date import CustomDate


class LoggingSettings(BaseSettings):
    """Logging settings."""
    model_config = SettingsConfigDict(env_prefix="LOG_")

    level: str = "WARNING"
    format: str = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
    console_enabled: bool = True
    console_colored: bool = True
    file_enabled: bool = False
    file_path: str = "./logs/date_operations.log"


class DemoSettings(BaseSettings):
    """Settings for the demonstration run."""
    model_config = SettingsConfigDict(env_prefix="DEMO_")

    day: int = 7
    month: int = 12
    year: int = 2022
    offset_days: int = 5


class Settings(BaseSettings):
    """Main application settings."""
    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        env_nested_delimiter="__",
        extra="ignore"
    )

    # Application info
    app_name: str = "DateOperations"
    app_version: str = "1.0.0"
    debug: bool = False

    # Paths
    logs_path: Path = Path("./logs")

    # Sub-settings
    logging: LoggingSettings = Field(default_factory=LoggingSettings)
    demo: DemoSettings = Field(default_factory=DemoSettings)

    def ensure_directories(self) -> None:
        """Ensure the log directory exists when file logging is on."""
        if self.logging.file_enabled:
            self.logs_path.mkdir(parents=True, exist_ok=True)
            Path(self.logging.file_path).parent.mkdir(parents=True, exist_ok=True)

    def demo_date(self) -> CustomDate:
        """Build the configured demonstration date.

        Raises:
            InvalidDate: If the configured triple is not a real date
        """
        return CustomDate(self.demo.day, self.demo.month, self.demo.year)


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()
