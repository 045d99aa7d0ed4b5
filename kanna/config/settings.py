from pathlib import Path

from pydantic import Field, model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    # Filesystem
    PROJECT_DIR: Path = Field(Path.home() / "Documents" / "Kanna")
    SPEECH_DIR: Path | None = Field(None)
    LOG_FILE: Path | None = Field(None)

    # Database
    DATABASE_URL: str | None = Field(None)

    # Youdao open API
    YOUDAO_BASE_URL: str = Field("http://fanyi.youdao.com/openapi.do")
    YOUDAO_KEYFROM: str = Field("YouDaoCV")
    YOUDAO_KEY: str = Field("")

    # Pronunciation
    AUDIO_ENABLED: bool = Field(True)
    AUDIO_PLAYER: str | None = Field(None)

    # App
    WORD_LIST_ORDER: str = Field("recent")
    LOG_LEVEL: str = Field("INFO")
    DEBUG: bool = Field(False)

    model_config = SettingsConfigDict(
        env_file=".env",
        extra="ignore",
        env_file_encoding="utf-8"
    )

    @model_validator(mode="after")
    def _derive_paths(self) -> "Settings":
        """Fill paths that default to locations inside PROJECT_DIR."""
        if self.SPEECH_DIR is None:
            self.SPEECH_DIR = self.PROJECT_DIR / "speech"
        if self.LOG_FILE is None:
            self.LOG_FILE = self.PROJECT_DIR / "kanna.log"
        if self.DATABASE_URL is None:
            self.DATABASE_URL = f"sqlite+aiosqlite:///{self.PROJECT_DIR / 'kanna.db'}"
        if self.WORD_LIST_ORDER not in ("recent", "frequent"):
            raise ValueError("WORD_LIST_ORDER must be 'recent' or 'frequent'")
        return self

    def ensure_directories(self) -> None:
        """Create the project and speech cache directories if missing."""
        self.PROJECT_DIR.mkdir(parents=True, exist_ok=True)
        self.SPEECH_DIR.mkdir(parents=True, exist_ok=True)
        self.LOG_FILE.parent.mkdir(parents=True, exist_ok=True)


def get_settings(**overrides) -> Settings:
    """Load settings from the environment, applying explicit overrides."""
    return Settings(**overrides)
