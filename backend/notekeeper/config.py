"""
NoteKeeper Backend — Application Configuration
================================================

What:  Centralized configuration management using Pydantic Settings.
How:   Pydantic Settings reads from environment variables (or .env file),
       validates types/ranges, and provides a module-level `settings` object.
Who:   The app factory, the token helpers and the CLI entry point.

Tests build their own `Settings(...)` and hand it to `create_app()` instead
of patching the module-level instance.
"""

from typing import List

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings

DEFAULT_JWT_SECRET = "your-secret-key"


class Settings(BaseSettings):
    """
    Application settings loaded from environment variables.

    All settings have development defaults. Production deployments MUST
    override JWT_SECRET; startup logs a warning when it is left as is.
    """

    # ── Tokens ────────────────────────────────────────────────────────────
    # Symmetric secret used to sign and verify every bearer token
    jwt_secret: str = Field(
        default=DEFAULT_JWT_SECRET,
        description="HMAC secret for signing access tokens",
    )
    jwt_algorithm: str = Field(default="HS256")

    # Tokens are never revoked; they simply stop verifying after this long
    token_ttl_hours: int = Field(default=24, ge=1, le=720)

    # ── Notes ─────────────────────────────────────────────────────────────
    # Pre-populate the store with the two welcome notes
    seed_notes: bool = Field(default=True)

    # ── CORS ──────────────────────────────────────────────────────────────
    # Comma-separated origins; "*" allows any (the SPA is served elsewhere)
    cors_origins: str = Field(default="*")

    @property
    def cors_origins_list(self) -> List[str]:
        """Splits comma-separated CORS origins into a list."""
        return [origin.strip() for origin in self.cors_origins.split(",") if origin.strip()]

    # ── Server ────────────────────────────────────────────────────────────
    host: str = Field(default="0.0.0.0")
    port: int = Field(default=5000, ge=1, le=65535)

    # Valid: DEBUG, INFO, WARNING, ERROR, CRITICAL
    log_level: str = Field(default="INFO")

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        """Ensures log level is a valid Python logging level name."""
        valid_levels = {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}
        upper = v.upper()
        if upper not in valid_levels:
            raise ValueError(f"Invalid log_level '{v}'. Must be one of: {valid_levels}")
        return upper

    model_config = {
        "env_file": ".env",
        "env_file_encoding": "utf-8",
        "case_sensitive": False,
    }

    def validate_required_for_production(self) -> None:
        """
        Checks settings that are tolerable in development but not in production.

        Raises ValueError listing every problem found. The lifespan hook logs
        the error and keeps serving, so local demos still start.
        """
        errors = []
        if not self.jwt_secret or self.jwt_secret == DEFAULT_JWT_SECRET:
            errors.append(
                "JWT_SECRET is not set. Tokens are signed with the public default secret."
            )
        if errors:
            raise ValueError(
                "Configuration validation failed:\n" + "\n".join(f"  - {e}" for e in errors)
            )


settings = Settings()
