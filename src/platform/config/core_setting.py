from enum import StrEnum
from pathlib import Path
from typing import Annotated, List, Optional

import orjson
from pydantic import field_validator
from pydantic_settings import BaseSettings, NoDecode, SettingsConfigDict


_PROJECT_ROOT = Path(__file__).resolve().parents[3]
_ENV_PATH = _PROJECT_ROOT / '.env'
_ENV_FILE = _ENV_PATH if _ENV_PATH.exists() else (_PROJECT_ROOT / '.env.example')


class DataAccessMode(StrEnum):
    IN_MEMORY = 'in_memory'
    SQL = 'sql'


class PaymentMode(StrEnum):
    SIMULATED = 'simulated'
    EXTERNAL = 'external'


class Settings(BaseSettings):
    model_config = SettingsConfigDict(
        env_file=str(_ENV_FILE),
        env_ignore_empty=True,
        extra='ignore',
    )

    PROJECT_NAME: str = 'Event Booking System'
    VERSION: str = '0.1.0'
    DEBUG: bool = False

    # CORS: comma list or JSON array, NoDecode hands the raw string to the validator
    BACKEND_CORS_ORIGINS: Annotated[List[str], NoDecode] = []

    @field_validator('BACKEND_CORS_ORIGINS', mode='before')
    @classmethod
    def assemble_cors_origins(cls, v: str | List[str]) -> List[str]:
        if isinstance(v, str) and v.lstrip().startswith('['):
            return [str(i) for i in orjson.loads(v)]
        elif isinstance(v, str):
            return [i.strip() for i in v.split(',') if i.strip()]
        elif isinstance(v, list):
            return v
        return []

    # Data access
    DATA_ACCESS_MODE: DataAccessMode = DataAccessMode.IN_MEMORY
    SEED_DEMO_DATA: bool = True  # Only applies to in_memory mode

    # SQL database (used when DATA_ACCESS_MODE=sql)
    DATABASE_URL_ASYNC: str = 'sqlite+aiosqlite:///./booking_system.db'
    DB_ECHO: bool = False
    DB_POOL_SIZE: int = 10
    DB_POOL_MAX_OVERFLOW: int = 5
    DB_POOL_TIMEOUT: int = 30
    DB_POOL_RECYCLE: int = 3600
    DB_POOL_PRE_PING: bool = True

    # Payment gateway
    PAYMENT_MODE: PaymentMode = PaymentMode.SIMULATED
    PAYMENT_API_BASE_URL: Optional[str] = None
    PAYMENT_API_TIMEOUT_SECONDS: float = 30.0


settings = Settings()  # type: ignore
