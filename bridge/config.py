"""Application settings loaded from environment variables."""

from __future__ import annotations

from pydantic import Field
from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    """All configuration is driven by environment variables."""

    # External executables
    bridge_git_executable: str = "git"
    bridge_open_executable: str = "open"
    bridge_terminal_app: str = "Terminal"

    # API key
    bridge_api_key: str = ""

    # HTTP server
    bridge_host: str = "127.0.0.1"
    bridge_port: int = 8765
    bridge_cors_origins: list[str] = Field(
        default_factory=lambda: ["tauri://localhost", "http://localhost:1420"],
    )

    # Logging
    bridge_log_level: str = "INFO"
    bridge_log_json: bool = False


# Singleton – import this from anywhere
settings = Settings()
