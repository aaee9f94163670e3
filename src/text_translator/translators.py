from __future__ import annotations

import requests

from .config import Config
from .engines.base import Api


PROVIDERS = ("yandex", "google_v2", "google_v3", "translate_shell")


def _require(value: str | None, env_name: str, provider: str) -> str:
    if not value:
        raise RuntimeError(f"{env_name} is required for provider {provider!r}")
    return value


def build_translator(
    cfg: Config,
    provider: str | None = None,
    session: requests.Session | None = None,
) -> Api:
    """Build the adapter named by ``provider`` (default ``cfg.provider``)."""
    provider = (provider or cfg.provider).strip().lower()
    if provider == "yandex":
        from .engines.yandex import Yandex

        return Yandex(
            key=_require(cfg.yandex_api_key, "YANDEX_API_KEY", provider),
            session=session,
            timeout=cfg.timeout_seconds,
            user_agent=cfg.user_agent,
        )
    if provider == "google_v2":
        from .engines.google_v2 import GoogleV2

        return GoogleV2(
            key=_require(cfg.google_api_key, "GOOGLE_API_KEY", provider),
            session=session,
            timeout=cfg.timeout_seconds,
            user_agent=cfg.user_agent,
        )
    if provider == "google_v3":
        from .engines.google_v3 import GoogleTranslateV3

        return GoogleTranslateV3(
            project_id=_require(cfg.gcp_project_id, "GCP_PROJECT_ID", provider),
            location=cfg.gcp_location,
            credentials_path=cfg.gcp_credentials_path,
            timeout=cfg.timeout_seconds,
        )
    if provider == "translate_shell":
        from .engines.translate_shell import TranslateShell

        return TranslateShell(
            engine=cfg.translate_shell_engine,
            binary=cfg.translate_shell_bin,
            timeout=cfg.timeout_seconds,
        )
    raise ValueError(f"Unknown translation provider: {provider!r} (expected one of {', '.join(PROVIDERS)})")
