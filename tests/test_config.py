import pytest

from text_translator.config import load_config


_ENV = (
    "TRANSLATOR_PROVIDER",
    "YANDEX_API_KEY",
    "GOOGLE_API_KEY",
    "GCP_PROJECT_ID",
    "GCP_LOCATION",
    "GCP_CREDENTIALS_PATH",
    "GCP_CREDENTIALS_JSON",
    "TRANSLATE_SHELL_ENGINE",
    "TRANSLATE_SHELL_BIN",
    "TRANSLATOR_TIMEOUT",
    "TRANSLATOR_USER_AGENT",
)


@pytest.fixture(autouse=True)
def _clean_env(monkeypatch):
    for name in _ENV:
        monkeypatch.delenv(name, raising=False)


def test_load_config_defaults():
    cfg = load_config()
    assert cfg.provider == "yandex"
    assert cfg.yandex_api_key is None
    assert cfg.gcp_location == "global"
    assert cfg.translate_shell_bin == "trans"
    assert cfg.timeout_seconds == 30.0


def test_load_config_reads_values(monkeypatch):
    monkeypatch.setenv("TRANSLATOR_PROVIDER", "Google_V2")
    monkeypatch.setenv("GOOGLE_API_KEY", "gkey")
    monkeypatch.setenv("GCP_PROJECT_ID", "demo")
    monkeypatch.setenv("GCP_CREDENTIALS_JSON", "/secrets/sa.json")
    monkeypatch.setenv("TRANSLATOR_TIMEOUT", "2.5")

    cfg = load_config()
    assert cfg.provider == "google_v2"
    assert cfg.google_api_key == "gkey"
    assert cfg.gcp_project_id == "demo"
    assert cfg.gcp_credentials_path == "/secrets/sa.json"
    assert cfg.timeout_seconds == 2.5


def test_blank_key_is_treated_as_missing(monkeypatch):
    monkeypatch.setenv("YANDEX_API_KEY", "   ")
    assert load_config().yandex_api_key is None


@pytest.mark.parametrize("raw", ["soon", "0", "-1"])
def test_load_config_rejects_bad_timeout(monkeypatch, raw):
    monkeypatch.setenv("TRANSLATOR_TIMEOUT", raw)
    with pytest.raises(RuntimeError):
        load_config()
