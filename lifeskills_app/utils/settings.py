"""Runtime settings, overridable through ``LIFESKILLS_*`` environment variables."""

from __future__ import annotations

from pathlib import Path

from pydantic_settings import BaseSettings, SettingsConfigDict

from lifeskills_app.constants.network_constants import (
    DEFAULT_SHEET_SERVER_HOST,
    DEFAULT_SHEET_SERVER_PORT,
)

_DEFAULT_DATA_DIR = Path.home() / ".lifeskills_evaluation"


class Settings(BaseSettings):
    model_config = SettingsConfigDict(env_prefix="LIFESKILLS_", case_sensitive=False)

    # Google Apps Script web app URL; empty disables remote sync.
    sheet_url: str = ""
    # None keeps the transport default (no timeout).
    request_timeout_seconds: float | None = None

    cache_path: Path = _DEFAULT_DATA_DIR / "lifeSkillsEvaluations.json"
    export_dir: Path = Path.cwd()

    use_local_sheet_server: bool = False
    local_sheet_server_host: str = DEFAULT_SHEET_SERVER_HOST
    local_sheet_server_port: int = DEFAULT_SHEET_SERVER_PORT

    @property
    def local_sheet_server_url(self) -> str:
        return f"http://{self.local_sheet_server_host}:{self.local_sheet_server_port}/"


def load_settings() -> Settings:
    return Settings()
