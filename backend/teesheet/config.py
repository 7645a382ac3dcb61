# backend/teesheet/config.py

from decimal import Decimal
from pathlib import Path
from pydantic_settings import BaseSettings, SettingsConfigDict

BASE_DIR = Path(__file__).resolve().parents[2]  # repo root


class Settings(BaseSettings):
    database_url: str = "sqlite:///./teesheet.db"
    redis_url: str = "redis://localhost:6379/0"

    # Tee sheet
    course_name: str = "Packanack Golf Course"
    first_tee_time: str = "07:00"
    last_tee_time: str = "19:00"  # exclusive
    tee_interval_minutes: int = 15
    max_players: int = 4
    default_price: Decimal = Decimal("85.00")

    # Maintenance
    reset_enabled: bool = True
    reset_check_interval_seconds: int = 3600

    log_level: str = "INFO"

    model_config = SettingsConfigDict(
        env_file=BASE_DIR / ".env",
        extra="ignore",
    )

    @property
    def resolved_database_url(self) -> str:
        url = self.database_url
        if url.startswith("sqlite:///./"):
            # Relative SQLite paths are anchored at the repo root
            relative_path = url.replace("sqlite:///./", "")
            absolute_path = BASE_DIR / relative_path
            return f"sqlite:///{absolute_path}"
        return url


settings = Settings()
