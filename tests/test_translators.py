import pytest

from text_translator.config import Config
from text_translator.engines.google_v2 import GoogleV2
from text_translator.engines.google_v3 import GoogleTranslateV3
from text_translator.engines.translate_shell import TranslateShell
from text_translator.engines.yandex import Yandex
from text_translator.translators import build_translator


def _cfg(**overrides) -> Config:
    values = dict(
        yandex_api_key="ykey",
        google_api_key="gkey",
        gcp_project_id="demo",
        gcp_location="europe-west1",
        translate_shell_engine="apertium",
        timeout_seconds=4.0,
        user_agent="probe/1.0",
    )
    values.update(overrides)
    return Config(**values)


def test_build_uses_configured_provider():
    session = object()
    translator = build_translator(_cfg(provider="yandex"), session=session)

    assert isinstance(translator, Yandex)
    assert translator.key == "ykey"
    assert translator.session is session
    assert translator.timeout == 4.0
    assert translator.user_agent == "probe/1.0"


def test_build_provider_override():
    assert isinstance(build_translator(_cfg(), "google_v2"), GoogleV2)

    v3 = build_translator(_cfg(), "GOOGLE_V3")
    assert isinstance(v3, GoogleTranslateV3)
    assert v3.parent == "projects/demo/locations/europe-west1"

    shell = build_translator(_cfg(), "translate_shell")
    assert isinstance(shell, TranslateShell)
    assert shell.engine == "apertium"


@pytest.mark.parametrize(
    "provider, missing",
    [
        ("yandex", {"yandex_api_key": None}),
        ("google_v2", {"google_api_key": None}),
        ("google_v3", {"gcp_project_id": None}),
    ],
)
def test_build_requires_credentials(provider, missing):
    with pytest.raises(RuntimeError):
        build_translator(_cfg(**missing), provider)


def test_build_unknown_provider():
    with pytest.raises(ValueError):
        build_translator(_cfg(), "bing")
