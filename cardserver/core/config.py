"""
cardserver/core/config.py

Centralised configuration loaded from environment variables.
Use a .env file locally; the hosting platform injects PORT at runtime.
"""

from pydantic import field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from cardserver.core.constants import DEFAULT_PORT


class Settings(BaseSettings):
    # ── Application ────────────────────────────────────────────────────────────
    app_name: str = "Greeting Card Static Server"
    app_version: str = "1.0.0"
    debug: bool = False

    # ── Listener ───────────────────────────────────────────────────────────────
    host: str = "0.0.0.0"
    port: int = DEFAULT_PORT

    # ── Files ──────────────────────────────────────────────────────────────────
    static_root: str = "./site"    # resolved to an absolute path at startup

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
    )

    @field_validator("port", mode="before")
    @classmethod
    def port_falls_back_when_invalid(cls, v: object) -> int:
        """An unparsable or out-of-range PORT never stops the server from starting."""
        try:
            port = int(str(v).strip())
        except (TypeError, ValueError):
            return DEFAULT_PORT
        if not 0 < port < 65536:
            return DEFAULT_PORT
        return port


# Single shared instance — import this everywhere.
settings = Settings()
