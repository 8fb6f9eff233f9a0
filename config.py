"""Configuration management for textpub."""

from typing import Optional
from pydantic_settings import BaseSettings
from pydantic import Field, field_validator


STORAGE_BACKENDS = ("auto", "memory", "file", "redis")


class Config(BaseSettings):
    """Application configuration."""

    # Server settings
    host: str = Field(
        default="0.0.0.0",
        description="Host to bind to"
    )

    port: int = Field(
        default=3000,
        description="Port to listen on"
    )

    # Page URL settings
    base_url: str = Field(
        default="http://localhost:3000",
        description="Fallback base URL when the request carries no usable host"
    )

    path_prefix: str = Field(
        default="/p",
        description="Path prefix for published pages (e.g., '/p' for /p/abc123)"
    )

    page_id_length: int = Field(
        default=10,
        ge=4,
        le=64,
        description="Length of generated page identifiers"
    )

    # Storage settings
    storage_backend: str = Field(
        default="auto",
        description="auto, memory, file or redis. 'auto' picks redis when KV_URL and KV_TOKEN are set"
    )

    data_dir: str = Field(
        default="data",
        description="Directory holding one JSON file per page (file backend)"
    )

    kv_url: Optional[str] = Field(
        default=None,
        description="Remote key-value store URL; must use the Redis protocol (redis://, rediss:// or unix://), not an https:// REST endpoint"
    )

    kv_token: Optional[str] = Field(
        default=None,
        description="Access token for the remote key-value store"
    )

    # Content settings
    sanitize_html: bool = Field(
        default=True,
        description="Strip markup outside the allow-list before storing"
    )

    locale: str = Field(
        default="cs",
        description="Locale for page labels and timestamps (cs, en)"
    )

    display_timezone: str = Field(
        default="Europe/Prague",
        description="Timezone used to display creation timestamps"
    )

    qr_box_size: int = Field(
        default=10,
        ge=1,
        description="Pixels per QR module"
    )

    qr_border: int = Field(
        default=4,
        ge=0,
        description="QR quiet zone width in modules"
    )

    # Logging settings
    log_level: str = Field(
        default="INFO",
        description="Logging level (DEBUG, INFO, WARNING, ERROR, CRITICAL)"
    )

    log_file: Optional[str] = Field(
        default=None,
        description="Log file path (logs to stdout if not specified)"
    )

    log_json: bool = Field(
        default=False,
        description="Use JSON format for logs"
    )

    model_config = {
        "env_file": ".env",
        "env_file_encoding": "utf-8",
        "case_sensitive": False,
        "extra": "ignore",  # Ignore extra environment variables
    }

    @field_validator("storage_backend")
    @classmethod
    def validate_storage_backend(cls, v: str) -> str:
        """Normalize and check the storage backend name."""
        v = v.strip().lower()
        if v not in STORAGE_BACKENDS:
            raise ValueError(f"storage_backend must be one of {', '.join(STORAGE_BACKENDS)}")
        return v

    @property
    def remote_store_configured(self) -> bool:
        """True when both the remote store endpoint and token are present."""
        return bool(self.kv_url) and bool(self.kv_token)

    def resolved_storage_backend(self) -> str:
        """Storage backend after resolving 'auto'."""
        if self.storage_backend != "auto":
            return self.storage_backend
        return "redis" if self.remote_store_configured else "memory"

    def safe_dump(self) -> dict:
        """Config as a dict with the store token masked, for logging."""
        data = self.model_dump()
        if data.get("kv_token"):
            data["kv_token"] = "***"
        return data


def load_config() -> Config:
    """Load configuration from environment."""
    return Config()
