from functools import lru_cache

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    model_config = SettingsConfigDict(env_file=".env", extra="ignore")

    database_url: str | None = None  # e.g. sqlite+aiosqlite:///./coursepay.db
    use_in_memory: bool = True

    midtrans_server_key: str | None = None
    midtrans_is_production: bool = False
    midtrans_timeout_seconds: float = 10.0

    jwt_secret: str | None = None
    jwt_algorithm: str = "HS256"

    certificate_verify_base_url: str = "http://localhost:3000/certificates/verify"
    qr_service_url: str = "https://api.qrserver.com/v1/create-qr-code/"


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    return Settings()
