from pydantic_settings import BaseSettings, SettingsConfigDict
from pydantic import Field


class Settings(BaseSettings):
    model_config = SettingsConfigDict(env_file=".env", env_file_encoding="utf-8", extra="ignore")

    ENV: str = Field(default="dev")  # dev|prod|test
    LOG_LEVEL: str = Field(default="INFO")

    # Security
    JWT_SECRET: str = Field(default="change-me")
    JWT_ALG: str = Field(default="HS256")
    JWT_EXPIRES_MIN: int = Field(default=60 * 12)
    # Admin writes are open unless this is switched on
    AUTH_REQUIRED: bool = Field(default=False)

    # DB
    DATABASE_URL: str = Field(default="postgresql+psycopg://app:app@db:5432/resource_hub")

    # HTTP
    API_PREFIX: str = Field(default="/api")

    # CORS
    CORS_ORIGINS: str = Field(default="http://localhost:5173,http://localhost:3000,http://localhost")

    # Business defaults
    DEFAULT_READ_TIME: int = Field(default=5)

    # Seed (dev)
    SEED_DEMO: bool = Field(default=True)
    DEMO_ADMIN_LOGIN: str = Field(default="admin")
    DEMO_ADMIN_PASSWORD: str = Field(default="admin123")


settings = Settings()
