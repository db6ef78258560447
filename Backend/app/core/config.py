import os
from pydantic_settings import BaseSettings, SettingsConfigDict

# Resolve the .env file relative to this file so scripts and the API agree on it.
_config_dir = os.path.dirname(os.path.abspath(__file__))
_backend_dir = os.path.dirname(os.path.dirname(_config_dir))
_project_root = os.path.dirname(_backend_dir)
_dotenv_path = os.path.join(_project_root, '.env')



class Settings(BaseSettings):
    DATABASE_URL: str = "sqlite:///./dtunes.sqlite3"
    SQL_ECHO: bool = False

    LOG_LEVEL: str = "INFO"
    API_PREFIX: str = "/api"

    model_config = SettingsConfigDict(
        env_file=_dotenv_path,
        env_file_encoding='utf-8',
        extra='ignore'
    )

settings = Settings()
