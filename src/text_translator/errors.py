from __future__ import annotations

from enum import Enum
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from .languages import Language


class ProviderErrorKind(Enum):
    INVALID_API_KEY = "invalid_api_key"
    BLOCKED_API_KEY = "blocked_api_key"
    DAILY_LIMIT_EXCEEDED = "daily_limit_exceeded"
    MAX_TEXT_SIZE_EXCEEDED = "max_text_size_exceeded"
    COULD_NOT_TRANSLATE = "could_not_translate"
    DIRECTION_NOT_SUPPORTED = "direction_not_supported"
    RATE_LIMITED = "rate_limited"
    UNKNOWN = "unknown"


class TranslatorError(RuntimeError):
    pass


class TransportError(TranslatorError):
    def __init__(self, provider: str, message: str):
        super().__init__(f"{provider}: transport failure: {message}")
        self.provider = provider


class ProviderError(TranslatorError):
    def __init__(
        self,
        provider: str,
        message: str,
        status_code: int | None = None,
        code: int | str | None = None,
        kind: ProviderErrorKind = ProviderErrorKind.UNKNOWN,
    ):
        detail = f"{provider}: provider error"
        if status_code is not None:
            detail += f" (HTTP {status_code})"
        super().__init__(f"{detail}: {message}")
        self.provider = provider
        self.message = message
        self.status_code = status_code
        self.code = code
        self.kind = kind


class DecodeError(TranslatorError):
    def __init__(self, provider: str, message: str):
        super().__init__(f"{provider}: could not decode response: {message}")
        self.provider = provider


class UnsupportedLanguageError(TranslatorError):
    def __init__(self, provider: str, language: Language):
        super().__init__(f"{provider}: unsupported language: {language.name}")
        self.provider = provider
        self.language = language
