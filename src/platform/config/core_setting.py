import json
from pathlib import Path
from typing import Annotated, List, Optional

from pydantic import SecretStr, field_validator
from pydantic_settings import BaseSettings, NoDecode, SettingsConfigDict


_PROJECT_ROOT = Path(__file__).resolve().parents[3]
_ENV_PATH = _PROJECT_ROOT / '.env'
_ENV_FILE = _ENV_PATH if _ENV_PATH.exists() else (_PROJECT_ROOT / '.env.example')


class Settings(BaseSettings):
    model_config = SettingsConfigDict(
        env_file=str(_ENV_FILE),
        env_ignore_empty=True,
        extra='ignore',
    )

    PROJECT_NAME: str = 'Restaurant Reservation System'
    VERSION: str = '0.1.0'
    DEBUG: bool = True  # Set to False in production

    # CORS: comma-separated list or JSON array
    BACKEND_CORS_ORIGINS: Annotated[List[str], NoDecode] = ['*']

    @field_validator('BACKEND_CORS_ORIGINS', mode='before')
    @classmethod
    def assemble_cors_origins(cls, v: str | List[str]) -> List[str]:
        if isinstance(v, str) and v.startswith('['):
            return json.loads(v)
        if isinstance(v, str):
            return [i.strip() for i in v.split(',') if i.strip()]
        if isinstance(v, list):
            return v
        return []

    # Database
    POSTGRES_SERVER: str = 'localhost'
    POSTGRES_USER: str = 'postgres'
    POSTGRES_PASSWORD: SecretStr = SecretStr('postgres')
    POSTGRES_DB: str = 'restaurant_db'
    POSTGRES_PORT: int = 5432

    # Full SQLAlchemy URL, overrides the POSTGRES_* settings (e.g. sqlite+aiosqlite for tests)
    DATABASE_URL: Optional[str] = None

    @property
    def DATABASE_URL_ASYNC(self) -> str:
        if self.DATABASE_URL:
            return self.DATABASE_URL
        password = self.POSTGRES_PASSWORD.get_secret_value()
        return f'postgresql+asyncpg://{self.POSTGRES_USER}:{password}@{self.POSTGRES_SERVER}:{self.POSTGRES_PORT}/{self.POSTGRES_DB}'

    @property
    def IS_SQLITE(self) -> bool:
        return self.DATABASE_URL_ASYNC.startswith('sqlite')

    # Connection pool (ignored for SQLite)
    DB_POOL_SIZE: int = 10
    DB_POOL_MAX_OVERFLOW: int = 5
    DB_POOL_TIMEOUT: int = 30  # seconds
    DB_POOL_RECYCLE: int = 3600  # seconds
    DB_POOL_PRE_PING: bool = True
    DB_ECHO: bool = False

    # Startup behaviour
    AUTO_CREATE_TABLES: bool = True
    VERIFY_SCHEMA_ON_STARTUP: bool = True

    # Run availability check and write in one SERIALIZABLE transaction
    STRICT_BOOKING_MODE: bool = False


settings = Settings()  # type: ignore
