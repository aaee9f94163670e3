from __future__ import annotations

import os
from dataclasses import dataclass

from .transport import DEFAULT_TIMEOUT, DEFAULT_USER_AGENT


@dataclass(frozen=True)
class Config:
    provider: str = "yandex"

    yandex_api_key: str | None = None
    google_api_key: str | None = None

    gcp_project_id: str | None = None
    gcp_location: str = "global"
    gcp_credentials_path: str | None = None

    translate_shell_engine: str = "google"
    translate_shell_bin: str = "trans"

    timeout_seconds: float = DEFAULT_TIMEOUT
    user_agent: str = DEFAULT_USER_AGENT


def load_config() -> Config:
    def _load_timeout() -> float:
        raw = os.getenv("TRANSLATOR_TIMEOUT")
        if not raw:
            return DEFAULT_TIMEOUT
        try:
            value = float(raw)
        except ValueError as exc:
            raise RuntimeError("TRANSLATOR_TIMEOUT must be a number of seconds") from exc
        if value <= 0:
            raise RuntimeError("TRANSLATOR_TIMEOUT must be positive")
        return value

    def opt(name: str) -> str | None:
        value = os.getenv(name)
        return value.strip() if value and value.strip() else None

    cfg = Config(
        provider=os.getenv("TRANSLATOR_PROVIDER", "yandex").strip().lower(),
        yandex_api_key=opt("YANDEX_API_KEY"),
        google_api_key=opt("GOOGLE_API_KEY"),
        gcp_project_id=opt("GCP_PROJECT_ID"),
        gcp_location=os.getenv("GCP_LOCATION", "global"),
        gcp_credentials_path=opt("GCP_CREDENTIALS_PATH") or opt("GCP_CREDENTIALS_JSON"),
        translate_shell_engine=os.getenv("TRANSLATE_SHELL_ENGINE", "google"),
        translate_shell_bin=os.getenv("TRANSLATE_SHELL_BIN", "trans"),
        timeout_seconds=_load_timeout(),
        user_agent=os.getenv("TRANSLATOR_USER_AGENT", DEFAULT_USER_AGENT),
    )
    return cfg
