from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    PROJECT_NAME: str = "SoloBiz"
    API_VERSION: str = "1.0.0"

    DATABASE_URL: str = "sqlite:///./solobiz.db"

    LOG_LEVEL: str = "INFO"
    LOG_FILE: str | None = None

    # Comma separated, "*" allows every origin
    CORS_ORIGINS: str = "*"

    # Assistant stays disabled while the key is empty
    GEMINI_API_KEY: str = ""
    GEMINI_MODEL: str = "gemini-2.5-flash"

    RECENT_SERVICES_LIMIT: int = 10
    RECENT_CLIENTS_LIMIT: int = 5
    REVENUE_MONTHS: int = 6

    @property
    def cors_origins(self) -> list[str]:
        return [origin.strip() for origin in self.CORS_ORIGINS.split(",") if origin.strip()]


settings = Settings()
