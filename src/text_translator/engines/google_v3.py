from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any

from google.api_core import exceptions as gcp_exceptions
from google.auth import exceptions as auth_exceptions
from google.cloud import translate

from ..errors import (
    DecodeError,
    ProviderError,
    ProviderErrorKind,
    TransportError,
)
from ..languages import InputLanguage, Language, LanguageCodes, as_input_language
from ..transport import DEFAULT_TIMEOUT


log = logging.getLogger("text_translator.google_v3")

LANGUAGE_CODES = LanguageCodes(
    "google_v3",
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

STATUS_KINDS = {
    401: ProviderErrorKind.INVALID_API_KEY,
    403: ProviderErrorKind.BLOCKED_API_KEY,
    429: ProviderErrorKind.RATE_LIMITED,
}


@dataclass(frozen=True)
class GoogleTranslateV3:
    project_id: str
    location: str = "global"
    credentials_path: str | None = None
    timeout: float = DEFAULT_TIMEOUT

    name: str = "google_v3"

    def __post_init__(self) -> None:
        if not self.project_id:
            raise ValueError("GCP project_id is required for Google Translate v3")

    @property
    def parent(self) -> str:
        return f"projects/{self.project_id}/locations/{self.location}"

    def _client(self) -> translate.TranslationServiceClient:
        if self.credentials_path:
            return translate.TranslationServiceClient.from_service_account_file(
                self.credentials_path
            )
        return translate.TranslationServiceClient()

    def translate(
        self,
        text: str,
        source_language: InputLanguage | Language,
        target_language: Language,
    ) -> str:
        source = as_input_language(source_language)
        request: dict[str, Any] = {
            "parent": self.parent,
            "contents": [text],
            "mime_type": "text/plain",
            "target_language_code": LANGUAGE_CODES.to_code(target_language),
        }
        source_code = LANGUAGE_CODES.source_code(source)
        if source_code:
            request["source_language_code"] = source_code

        log.debug(
            "google_v3 translate parent=%s source=%s target=%s chars=%s",
            self.parent,
            source_code or "auto",
            request["target_language_code"],
            len(text),
        )
        response = self._call("translate_text", request)

        translations = list(getattr(response, "translations", None) or [])
        if not translations:
            raise DecodeError(self.name, "response has no translations")
        texts = [getattr(t, "translated_text", None) for t in translations]
        if not all(isinstance(t, str) for t in texts):
            raise DecodeError(self.name, "'translated_text' must be a string")
        return "\n".join(texts)

    def detect(self, text: str) -> Language | None:
        log.debug("google_v3 detect parent=%s chars=%s", self.parent, len(text))
        response = self._call(
            "detect_language",
            {"parent": self.parent, "content": text, "mime_type": "text/plain"},
        )
        languages = list(getattr(response, "languages", None) or [])
        if not languages:
            raise DecodeError(self.name, "response has no detected languages")
        code = getattr(languages[0], "language_code", None)
        if not isinstance(code, str):
            raise DecodeError(self.name, "'language_code' must be a string")
        return LANGUAGE_CODES.from_code(code)

    def _call(self, method: str, request: dict[str, Any]) -> Any:
        try:
            client = self._client()
        except (OSError, ValueError, auth_exceptions.GoogleAuthError) as exc:
            raise ProviderError(
                self.name,
                f"could not load credentials: {exc}",
                kind=ProviderErrorKind.INVALID_API_KEY,
            ) from exc
        try:
            return getattr(client, method)(request=request, timeout=self.timeout)
        except (
            gcp_exceptions.ServiceUnavailable,
            gcp_exceptions.DeadlineExceeded,
            gcp_exceptions.RetryError,
        ) as exc:
            raise TransportError(self.name, str(exc)) from exc
        except gcp_exceptions.GoogleAPICallError as exc:
            status_code = int(exc.code) if exc.code is not None else None
            raise ProviderError(
                self.name,
                exc.message or str(exc),
                status_code=status_code,
                code=getattr(exc, "reason", None) or exc.grpc_status_code,
                kind=STATUS_KINDS.get(status_code, ProviderErrorKind.UNKNOWN),
            ) from exc
