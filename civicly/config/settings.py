from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application configuration loaded from environment variables."""

    model_config = SettingsConfigDict(env_file=".env", extra="ignore")

    app_env: str = "dev"
    log_level: str = "INFO"

    host: str = "0.0.0.0"
    port: int = 5000
    cors_allow_origins: list[str] = ["*"]

    max_image_bytes: int = 10 * 1024 * 1024

    pinning_provider: str = "pinata"
    pinata_api_key: str = ""
    pinata_secret_api_key: str = ""
    pinata_base_url: str = "https://api.pinata.cloud"
    pinata_cid_version: int = 1
    pinning_timeout_seconds: int = 30
    pinning_max_attempts: int = 2
    pinning_retry_backoff_seconds: float = 0.5

    classification_provider: str = "gemini"

    gemini_api_key: str = ""
    gemini_model_name: str = "gemini-2.5-flash"
    gemini_base_url: str = "https://generativelanguage.googleapis.com/v1"
    gemini_timeout_seconds: int = 30

    openai_api_key: str = ""
    openai_model_name: str = "gpt-4o-mini"
    openai_base_url: str | None = None
    openai_timeout_seconds: int = 30

    ledger_rpc_url: str = ""
    ledger_contract_address: str = ""
    ledger_timeout_seconds: int = 10
