"""Application settings using pydantic-settings."""

from __future__ import annotations

from typing import Literal

from pydantic import Field, SecretStr, model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from cv_assistant_core.constants import MAX_DOCUMENT_SIZE_MB, MIN_PDF_TEXT_CHARS


class Settings(BaseSettings):
    """Central configuration for cv-assistant."""

    model_config = SettingsConfigDict(env_prefix="CVA_", env_file=".env", extra="ignore")

    # --- Logging ---
    log_level: str = Field(
        default="INFO",
        description="Root log level (DEBUG, INFO, WARNING, ERROR, CRITICAL)",
    )
    log_format: Literal["console", "json"] = Field(
        default="console",
        description="Log renderer: 'console' for humans, 'json' for collectors",
    )

    # --- Documents ---
    max_document_size_mb: float = Field(
        default=MAX_DOCUMENT_SIZE_MB,
        gt=0,
        description="Documents above this size are loaded with a warning",
    )
    min_pdf_text_chars: int = Field(
        default=MIN_PDF_TEXT_CHARS,
        ge=0,
        description="Minimum extracted characters before a PDF counts as scanned",
    )

    # --- Email ---
    smtp_host: str = Field(
        default="smtp.gmail.com",
        description="SMTP server hostname",
    )
    smtp_port: int = Field(
        default=587,
        ge=1,
        le=65535,
        description="SMTP server port",
    )
    smtp_user: str = Field(
        default="",
        description="SMTP username, also used as the From address",
    )
    smtp_password: SecretStr | None = Field(
        default=None,
        description="SMTP password",
    )
    smtp_start_tls: bool = Field(
        default=True,
        description="Upgrade the SMTP connection with STARTTLS",
    )

    @property
    def smtp_configured(self) -> bool:
        """True when both SMTP user and password are set."""
        return bool(self.smtp_user and self.smtp_password and self.smtp_password.get_secret_value())

    @model_validator(mode="after")
    def validate_log_level(self) -> Settings:
        """Normalize log level and reject unknown names."""
        level = self.log_level.upper()
        if level not in {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}:
            msg = f"log_level must be a standard level name, got {self.log_level!r}"
            raise ValueError(msg)
        self.log_level = level
        return self
