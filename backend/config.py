import os
from pydantic_settings import BaseSettings
from pydantic import Field
import platformdirs

APP_NAME = "SongCatalog"
APP_AUTHOR = "SongCatalogDev"

class Settings(BaseSettings):
    # App Info
    APP_NAME: str = APP_NAME
    APP_AUTHOR: str = APP_AUTHOR
    ENV: str = "prod"

    # Paths
    # Defaults to platformdirs; the DB_PATH environment variable takes precedence
    USER_DATA_DIR: str = Field(default_factory=lambda: platformdirs.user_data_dir(APP_NAME, APP_AUTHOR))
    DB_PATH: str | None = None

    # Network
    HOST: str = "127.0.0.1"
    PORT: int = 8080

    # Pagination
    DEFAULT_PAGE_LIMIT: int = 10
    MAX_PAGE_LIMIT: int = 100

    # Logging
    LOG_DIR: str | None = None
    LOG_LEVEL: str = "INFO"

    class Config:
        env_file = ".env"
        extra = "ignore"

    def model_post_init(self, __context):
        if not self.DB_PATH:
            self.DB_PATH = os.path.join(self.USER_DATA_DIR, "songs.duckdb")

        if not self.LOG_DIR:
            self.LOG_DIR = os.path.join(self.USER_DATA_DIR, "logs")

    def setup_environment(self):
        """Export paths that must be visible before the logger is imported."""
        if self.LOG_DIR:
            os.environ["SONGS_LOG_DIR"] = self.LOG_DIR

settings = Settings()
