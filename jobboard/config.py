from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    # Required from environment (.env / deployment secrets)
    database_url: str
    secret_key: str
    algorithm: str = "HS256"
    app_env: str = "development"  # development, staging, production

    # CORS origins as comma-separated values
    # Example: "https://app.example.com,https://admin.example.com"
    cors_allow_origins: str = "http://localhost:5173"

    log_level: str = "INFO"  # DEBUG, INFO, WARNING, ERROR

    # Job listing pagination
    jobs_default_limit: int = 50
    user_jobs_default_limit: int = 20

    # Dashboard
    recent_activity_limit: int = 10

    # External sync
    sync_placeholder_company: str = "Stepstone Partner Company"

    class Config:
        env_file = ".env"
        env_file_encoding = "utf-8"


settings = Settings()
