from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    # Database
    DATABASE_URL: str

    # Session cookie (signed with itsdangerous)
    SESSION_SECRET: str = "vintique-dev-secret"
    SESSION_COOKIE: str = "vintique_session"

    # OpenAI
    OPENAI_API_KEY: str | None = None
    OPENAI_MODEL: str = "gpt-4o-mini"
    OPENAI_MAX_TOKENS: int = 100
    OPENAI_TEMPERATURE: float = 0.5
    OPENAI_TIMEOUT: float = 15.0

    # Chatbot
    HISTORY_LIMIT: int = 10
    VOUCHER_LIMIT: int = 5

    # Logging
    LOG_LEVEL: str = "INFO"

    CORS_ORIGINS: list[str] = [
        "http://localhost:3000",
        "http://127.0.0.1:3000",
    ]

    # Pydantic v2 config
    model_config = SettingsConfigDict(
        env_file=".env",
        extra="ignore"
    )


settings = Settings()
