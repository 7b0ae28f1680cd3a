from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    model_config = SettingsConfigDict(
        env_prefix="SCIM_", env_file=".env", env_file_encoding="utf-8", case_sensitive=False, extra="ignore"
    )

    # Logging
    debug: bool = Field(False, description="Debug mode")
    log_level: str = Field("INFO", description="Logging level")

    # Discovery documents
    base_url: str = Field("https://example.com/v2", description="Base URL used in synthesized meta locations")
    documentation_uri: str = Field("https://example.com/scim/docs", description="Service provider documentation")

    # Pagination
    default_page_size: int = Field(100, description="Default page size")
    max_page_size: int = Field(1000, description="Maximum page size")

    @field_validator("log_level")
    def validate_log_level(cls, v: str) -> str:
        allowed = ["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]
        v = v.upper()
        if v not in allowed:
            raise ValueError(f"Log level must be one of {allowed}")
        return v

    @field_validator("base_url")
    def strip_trailing_slash(cls, v: str) -> str:
        return v.rstrip("/")


# Create a singleton instance
settings = Settings()
