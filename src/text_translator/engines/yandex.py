from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Any

import requests

from ..errors import DecodeError, ProviderError, ProviderErrorKind
from ..languages import InputLanguage, Language, LanguageCodes, as_input_language
from ..transport import (
    DEFAULT_TIMEOUT,
    DEFAULT_USER_AGENT,
    decode_json,
    error_payload,
    send,
)


log = logging.getLogger("text_translator.yandex")

BASE_URL = "https://translate.yandex.net/api/v1.5/tr.json/"

LANGUAGE_CODES = LanguageCodes(
    "yandex",
    {
        Language.ENGLISH: "en",
        Language.FRENCH: "fr",
        Language.SPANISH: "es",
        Language.ITALIAN: "it",
        Language.JAPANESE: "ja",
        Language.ESPERANTO: "eo",
        Language.DUTCH: "nl",
        Language.PORTUGUESE: "pt",
        Language.GERMAN: "de",
        Language.RUSSIAN: "ru",
        Language.CHINESE_SIMPLIFIED: "zh",
        Language.KOREAN: "ko",
        Language.POLISH: "pl",
        Language.UKRAINIAN: "uk",
        Language.SERBIAN: "sr",
        Language.ARABIC: "ar",
        Language.TURKISH: "tr",
        Language.SWEDISH: "sv",
    },
    unknown=frozenset({""}),
)

ERROR_KINDS = {
    401: ProviderErrorKind.INVALID_API_KEY,
    402: ProviderErrorKind.BLOCKED_API_KEY,
    404: ProviderErrorKind.DAILY_LIMIT_EXCEEDED,
    413: ProviderErrorKind.MAX_TEXT_SIZE_EXCEEDED,
    422: ProviderErrorKind.COULD_NOT_TRANSLATE,
    501: ProviderErrorKind.DIRECTION_NOT_SUPPORTED,
}


@dataclass(frozen=True)
class Yandex:
    """Yandex.Translate API v1.5 (key passed as the ``key`` query parameter).

    Without ``session`` every call uses its own connection; an injected session
    is reused and must not be shared between threads.
    """

    key: str = field(repr=False)
    session: requests.Session | None = field(default=None, repr=False, compare=False)
    base_url: str = BASE_URL
    timeout: float = DEFAULT_TIMEOUT
    user_agent: str = DEFAULT_USER_AGENT

    name: str = "yandex"

    def __post_init__(self) -> None:
        if not self.key:
            raise ValueError("Yandex API key is required")

    def translate(
        self,
        text: str,
        source_language: InputLanguage | Language,
        target_language: Language,
    ) -> str:
        source = as_input_language(source_language)
        target_code = LANGUAGE_CODES.to_code(target_language)
        source_code = LANGUAGE_CODES.source_code(source)
        # a bare target code lets Yandex detect the source language
        lang = f"{source_code}-{target_code}" if source_code else target_code

        data = self._request("translate", text, {"lang": lang})
        texts = data.get("text")
        if not isinstance(texts, list) or not texts or not all(isinstance(t, str) for t in texts):
            raise DecodeError(self.name, "'text' must be a non-empty list of strings")
        return "\n".join(texts)

    def detect(self, text: str) -> Language | None:
        data = self._request("detect", text, {})
        lang = data.get("lang")
        if not isinstance(lang, str):
            raise DecodeError(self.name, "'lang' must be a string")
        return LANGUAGE_CODES.from_code(lang)

    def _request(self, endpoint: str, text: str, params: dict[str, Any]) -> dict[str, Any]:
        log.debug(
            "yandex %s lang=%s chars=%s", endpoint, params.get("lang", "-"), len(text)
        )
        resp = send(
            self.session,
            f"{self.base_url}{endpoint}",
            provider=self.name,
            params={"key": self.key, **params},
            data={"text": text},
            headers={"User-Agent": self.user_agent},
            timeout=self.timeout,
            secrets=(self.key,),
        )
        if resp.status_code != 200:
            raise self._error(resp.status_code, error_payload(resp))
        data = decode_json(resp, self.name)
        if data.get("code", 200) != 200:
            raise self._error(resp.status_code, data)
        return data

    def _error(self, status_code: int, payload: dict[str, Any]) -> ProviderError:
        code = payload.get("code", status_code)
        message = str(payload.get("message") or f"HTTP {status_code}")
        try:
            kind = ERROR_KINDS.get(int(code), ProviderErrorKind.UNKNOWN)
        except (TypeError, ValueError):
            kind = ProviderErrorKind.UNKNOWN
        return ProviderError(
            self.name, message, status_code=status_code, code=code, kind=kind
        )
