"""
Propper Configuration — pydantic-settings based.

All settings are read from environment variables or .env file.
Nothing is required; defaults run the proxy locally on port 3333 with the
packaged rules dictionary.
"""

from pathlib import Path

from pydantic import Field
from pydantic_settings import BaseSettings

VERSION = "1.0.0"
DEFAULT_RULES_PATH = Path(__file__).parent / "rules.json"


class Settings(BaseSettings):
    """Application-wide settings sourced from environment variables."""

    # ── Rules ──
    rules_path: str = Field(
        default=str(DEFAULT_RULES_PATH),
        description="Path to the rules dictionary JSON loaded at startup",
    )

    # ── Scoring ──
    pass_score_threshold: int = Field(
        default=80,
        ge=0,
        le=100,
        description="Minimum score for a PASS verdict in rendered reports",
    )

    # ── Server ──
    port: int = Field(default=3333, description="Server port")
    host: str = Field(default="0.0.0.0", description="Server bind host")
    cors_origins: list[str] = Field(
        default=["*"], description="Allowed CORS origins"
    )

    # ── Audit ──
    audit_log_path: str = Field(
        default="audit.jsonl", description="Path to JSON-lines audit log file"
    )

    # ── Figma / CLI ──
    figma_token: str | None = Field(
        default=None, description="Figma personal access token"
    )
    figma_api_url: str = Field(
        default="https://api.figma.com/v1", description="Figma REST API base URL"
    )
    propper_proxy_url: str = Field(
        default="http://localhost:3333",
        description="Audit proxy used by the CLI unless --local is given",
    )
    http_timeout: float = Field(
        default=30.0, description="Timeout in seconds for Figma and proxy requests"
    )

    model_config = {
        "env_file": ".env",
        "env_file_encoding": "utf-8",
        "case_sensitive": False,
        "extra": "ignore",
    }


# Singleton instance — imported by other modules
settings = Settings()
