from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Mapping

from .errors import DecodeError, UnsupportedLanguageError


class Language(Enum):
    ENGLISH = "english"
    FRENCH = "french"
    SPANISH = "spanish"
    ITALIAN = "italian"
    JAPANESE = "japanese"
    ESPERANTO = "esperanto"
    DUTCH = "dutch"
    PORTUGUESE = "portuguese"
    GERMAN = "german"
    RUSSIAN = "russian"
    CHINESE_SIMPLIFIED = "chinese_simplified"
    CHINESE_TRADITIONAL = "chinese_traditional"
    KOREAN = "korean"
    POLISH = "polish"
    UKRAINIAN = "ukrainian"
    SERBIAN = "serbian"
    ARABIC = "arabic"
    TURKISH = "turkish"
    SWEDISH = "swedish"


@dataclass(frozen=True)
class InputLanguage:
    """Source side of a translation: a fixed language, or automatic detection when
    ``language`` is None."""

    language: Language | None = None

    @classmethod
    def defined(cls, language: Language) -> InputLanguage:
        return cls(language)

    @property
    def is_automatic(self) -> bool:
        return self.language is None


AUTOMATIC = InputLanguage()


def as_input_language(value: InputLanguage | Language) -> InputLanguage:
    if isinstance(value, InputLanguage):
        return value
    if isinstance(value, Language):
        return InputLanguage(value)
    raise TypeError(f"expected InputLanguage or Language, got {type(value).__name__}")


@dataclass(frozen=True)
class LanguageCodes:
    """Static two-way table between ``Language`` and one provider's codes.

    Lookups by code are case-insensitive. Codes listed in ``unknown`` are the
    provider's explicit "could not detect" answers.
    """

    provider: str
    codes: Mapping[Language, str]
    unknown: frozenset[str] = frozenset()

    _by_code: dict[str, Language] = field(init=False, repr=False, compare=False)

    def __post_init__(self) -> None:
        by_code: dict[str, Language] = {}
        for language, code in self.codes.items():
            key = code.lower()
            if key in by_code:
                raise ValueError(
                    f"{self.provider}: code {code!r} mapped to both "
                    f"{by_code[key].name} and {language.name}"
                )
            if key in self.unknown:
                raise ValueError(f"{self.provider}: code {code!r} is reserved for unknown")
            by_code[key] = language
        object.__setattr__(self, "_by_code", by_code)

    @property
    def languages(self) -> tuple[Language, ...]:
        return tuple(self.codes)

    def supports(self, language: Language) -> bool:
        return language in self.codes

    def to_code(self, language: Language) -> str:
        code = self.codes.get(language)
        if code is None:
            raise UnsupportedLanguageError(self.provider, language)
        return code

    def source_code(self, source: InputLanguage) -> str | None:
        if source.language is None:
            return None
        return self.to_code(source.language)

    def from_code(self, code: str) -> Language | None:
        key = code.strip().lower()
        if key in self.unknown:
            return None
        language = self._by_code.get(key)
        if language is None:
            raise DecodeError(self.provider, f"unrecognized language code {code!r}")
        return language
