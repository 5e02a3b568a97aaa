from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings loaded from environment."""

    model_config = SettingsConfigDict(env_file=".env")

    app_name: str = "PaperDream"
    debug: bool = False

    database_url: str = "postgresql+asyncpg://localhost:5432/paperdream"

    anthropic_api_key: str = ""
    anthropic_base_url: str | None = None
    ai_model: str = "claude-sonnet-4-20250514"
    ai_max_tokens: int = 1024

    upload_dir: str = "uploads"
    max_upload_bytes: int = 10 * 1024 * 1024


settings = Settings()


# =============================================================================
# CARD DEFAULTS
# =============================================================================

# Physical card size in millimetres (standard poker size)
DEFAULT_CARD_WIDTH_MM = 63.0
DEFAULT_CARD_HEIGHT_MM = 88.0
