"""Application settings and configuration."""

from pathlib import Path
from dataclasses import dataclass, field
from typing import Optional
import os
from dotenv import load_dotenv

# Load environment variables from .env file
load_dotenv()

# Project root directory
PROJECT_ROOT = Path(__file__).parent.parent

DEFAULT_SPREADSHEET_ID = "1bY6msAWHxQU_3IC5f5SfCk4brtrlVvYM-Pkj9J6s6gU"


def _optional_path(env_var: str) -> Optional[Path]:
    """Read a path from the environment; relative paths are under the project root."""
    value = os.getenv(env_var)
    if not value:
        return None
    path = Path(value)
    return path if path.is_absolute() else PROJECT_ROOT / path


@dataclass
class SheetsConfig:
    """Google Sheets source settings."""

    spreadsheet_id: str = field(
        default_factory=lambda: os.getenv("SHEETS_SPREADSHEET_ID", DEFAULT_SPREADSHEET_ID)
    )
    range_name: str = field(default_factory=lambda: os.getenv("SHEETS_RANGE", "DATA"))
    api_key: Optional[str] = field(default_factory=lambda: os.getenv("GOOGLE_API_KEY"))
    base_url: str = "https://sheets.googleapis.com/v4/spreadsheets"
    timeout: int = field(
        default_factory=lambda: int(os.getenv("SHEETS_TIMEOUT_SECONDS", "30"))
    )

    @property
    def is_configured(self) -> bool:
        """True when both an API key and a spreadsheet id are available."""
        return bool(self.api_key and self.spreadsheet_id)


@dataclass
class AppConfig:
    """Application configuration settings."""

    name: str = field(default_factory=lambda: os.getenv("APP_NAME", "Route Sheet Viewer"))
    version: str = field(default_factory=lambda: os.getenv("APP_VERSION", "1.0.0"))
    log_level: str = field(default_factory=lambda: os.getenv("LOG_LEVEL", "INFO"))
    cache_ttl: int = field(
        default_factory=lambda: int(os.getenv("CACHE_TTL_SECONDS", "300"))
    )
    log_file: Optional[Path] = field(default_factory=lambda: _optional_path("LOG_FILE"))


@dataclass
class Config:
    """Main configuration container."""

    sheets: SheetsConfig = field(default_factory=SheetsConfig)
    app: AppConfig = field(default_factory=AppConfig)


# Global config instance
config = Config()
