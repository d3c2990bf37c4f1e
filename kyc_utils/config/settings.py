from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Library configuration loaded from ``KYC_*`` environment variables."""

    model_config = SettingsConfigDict(env_file=".env", env_prefix="KYC_", extra="ignore")

    app_env: str = "dev"
    log_level: str = "INFO"
