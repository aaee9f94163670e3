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


log = logging.getLogger("text_translator.google_v2")

BASE_URL = "https://translation.googleapis.com/language/translate/v2"

LANGUAGE_CODES = LanguageCodes(
    "google_v2",
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
        Language.CHINESE_SIMPLIFIED: "zh-CN",
        Language.CHINESE_TRADITIONAL: "zh-TW",
        Language.KOREAN: "ko",
        Language.POLISH: "pl",
        Language.UKRAINIAN: "uk",
        Language.SERBIAN: "sr",
        Language.ARABIC: "ar",
        Language.TURKISH: "tr",
        Language.SWEDISH: "sv",
    },
    unknown=frozenset({"und"}),
)

REASON_KINDS = {
    "keyInvalid": ProviderErrorKind.INVALID_API_KEY,
    "keyExpired": ProviderErrorKind.INVALID_API_KEY,
    "API_KEY_INVALID": ProviderErrorKind.INVALID_API_KEY,
    "accessNotConfigured": ProviderErrorKind.BLOCKED_API_KEY,
    "forbidden": ProviderErrorKind.BLOCKED_API_KEY,
    "dailyLimitExceeded": ProviderErrorKind.DAILY_LIMIT_EXCEEDED,
    "rateLimitExceeded": ProviderErrorKind.RATE_LIMITED,
    "userRateLimitExceeded": ProviderErrorKind.RATE_LIMITED,
}

STATUS_KINDS = {
    401: ProviderErrorKind.INVALID_API_KEY,
    403: ProviderErrorKind.BLOCKED_API_KEY,
    413: ProviderErrorKind.MAX_TEXT_SIZE_EXCEEDED,
    429: ProviderErrorKind.RATE_LIMITED,
}


@dataclass(frozen=True)
class GoogleV2:
    """Cloud Translation Basic (v2) over REST, key sent in ``X-Goog-Api-Key``.

    Without ``session`` every call uses its own connection; an injected session
    is reused and must not be shared between threads.
    """

    key: str = field(repr=False)
    session: requests.Session | None = field(default=None, repr=False, compare=False)
    base_url: str = BASE_URL
    timeout: float = DEFAULT_TIMEOUT
    user_agent: str = DEFAULT_USER_AGENT

    name: str = "google_v2"

    def __post_init__(self) -> None:
        if not self.key:
            raise ValueError("Google API key is required")

    def translate(
        self,
        text: str,
        source_language: InputLanguage | Language,
        target_language: Language,
    ) -> str:
        source = as_input_language(source_language)
        body: dict[str, Any] = {
            "q": text,
            "target": LANGUAGE_CODES.to_code(target_language),
            "format": "text",
        }
        source_code = LANGUAGE_CODES.source_code(source)
        if source_code:
            body["source"] = source_code

        data = self._request(self.base_url, body)
        try:
            translations = data["data"]["translations"]
            texts = [t["translatedText"] for t in translations]
        except (KeyError, TypeError) as exc:
            raise DecodeError(self.name, f"missing translations: {exc}") from exc
        if not texts or not all(isinstance(t, str) for t in texts):
            raise DecodeError(self.name, "'translatedText' must be a non-empty list of strings")
        return "\n".join(texts)

    def detect(self, text: str) -> Language | None:
        data = self._request(f"{self.base_url}/detect", {"q": text})
        try:
            language = data["data"]["detections"][0][0]["language"]
        except (KeyError, IndexError, TypeError) as exc:
            raise DecodeError(self.name, f"missing detections: {exc}") from exc
        if not isinstance(language, str):
            raise DecodeError(self.name, "'language' must be a string")
        return LANGUAGE_CODES.from_code(language)

    def _request(self, url: str, body: dict[str, Any]) -> dict[str, Any]:
        log.debug(
            "google_v2 %s source=%s target=%s chars=%s",
            url.rsplit("/", 1)[-1],
            body.get("source", "auto"),
            body.get("target", "-"),
            len(body["q"]),
        )
        resp = send(
            self.session,
            url,
            provider=self.name,
            json=body,
            headers={"X-Goog-Api-Key": self.key, "User-Agent": self.user_agent},
            timeout=self.timeout,
            secrets=(self.key,),
        )
        if resp.status_code != 200:
            raise self._error(resp.status_code, error_payload(resp))
        data = decode_json(resp, self.name)
        if "error" in data:
            raise self._error(resp.status_code, data)
        return data

    def _error(self, status_code: int, payload: dict[str, Any]) -> ProviderError:
        error = payload.get("error")
        if not isinstance(error, dict):
            error = {}
        reasons: list[str] = []
        for key in ("errors", "details"):
            items = error.get(key)
            if not isinstance(items, list):
                continue
            reasons.extend(
                str(item["reason"])
                for item in items
                if isinstance(item, dict) and item.get("reason")
            )
        kind = next((REASON_KINDS[r] for r in reasons if r in REASON_KINDS), None)
        if kind is None:
            kind = STATUS_KINDS.get(status_code, ProviderErrorKind.UNKNOWN)
        return ProviderError(
            self.name,
            str(error.get("message") or f"HTTP {status_code}"),
            status_code=status_code,
            code=error.get("status") or (reasons[0] if reasons else None),
            kind=kind,
        )
