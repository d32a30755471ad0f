from pydantic_settings import BaseSettings, SettingsConfigDict

_SHEET_BASE_URL = (
    "https://docs.google.com/spreadsheets/d/e/"
    "2PACX-1vRstUJbWWZxp2yzQqoLZ9gFxL0hl289HwTd9jrRLxju7vyLp56-eTXn3Ja_DMW1MQ/pub"
)


class Settings(BaseSettings):
    """Application configuration loaded from environment variables."""

    model_config = SettingsConfigDict(env_file=".env", extra="ignore")

    app_env: str = "dev"
    log_level: str = "INFO"

    db_host: str = "host.docker.internal"
    db_port: int = 5432
    db_database: str = "salesboard"
    db_username: str = "salesboard"
    db_password: str = "secret"
    db_pool_extra_connections: int = 2
    db_connect_timeout_seconds: float = 10.0

    source_a_url: str = f"{_SHEET_BASE_URL}?gid=1537840544&single=true&output=csv"
    source_b_url: str = f"{_SHEET_BASE_URL}?gid=1032190707&single=true&output=csv"
    fetch_timeout_seconds: int = 30

    refresh_interval_seconds: int = 300
    refresh_max_workers: int = 2
    shutdown_timeout_seconds: float = 30.0

    dashboard_host: str = "0.0.0.0"
    dashboard_port: int = 8000
