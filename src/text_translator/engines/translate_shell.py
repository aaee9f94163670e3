from __future__ import annotations

import logging
import subprocess
from dataclasses import dataclass

from ..errors import DecodeError, ProviderError, TransportError
from ..languages import InputLanguage, Language, LanguageCodes, as_input_language
from ..transport import DEFAULT_TIMEOUT


log = logging.getLogger("text_translator.translate_shell")

ENGINES = ("google", "yandex", "bing", "spell", "aspell", "hunspell", "apertium")

LANGUAGE_CODES = LanguageCodes(
    "translate_shell",
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
)


@dataclass(frozen=True)
class TranslateShell:
    """Runs the translate-shell ``trans`` program. Translation only."""

    engine: str = "google"
    binary: str = "trans"
    timeout: float = DEFAULT_TIMEOUT

    name: str = "translate_shell"

    def __post_init__(self) -> None:
        if self.engine not in ENGINES:
            raise ValueError(
                f"unknown translate-shell engine {self.engine!r}; expected one of {', '.join(ENGINES)}"
            )

    def command(
        self,
        text: str,
        source_language: InputLanguage | Language,
        target_language: Language,
    ) -> list[str]:
        source = as_input_language(source_language)
        args = [
            self.binary,
            "-brief",
            "-e",
            self.engine,
            "-t",
            LANGUAGE_CODES.to_code(target_language),
        ]
        source_code = LANGUAGE_CODES.source_code(source)
        if source_code:
            args.extend(["-s", source_code])
        args.extend(["--", text])
        return args

    def translate(
        self,
        text: str,
        source_language: InputLanguage | Language,
        target_language: Language,
    ) -> str:
        args = self.command(text, source_language, target_language)
        log.debug("translate_shell engine=%s args=%s", self.engine, args[1:-1])
        try:
            result = subprocess.run(args, capture_output=True, timeout=self.timeout)
        except (OSError, subprocess.TimeoutExpired) as exc:
            raise TransportError(self.name, f"could not run {self.binary}: {exc}") from exc

        if result.returncode != 0:
            stderr = result.stderr.decode("utf-8", errors="replace").strip()
            raise ProviderError(
                self.name,
                stderr or f"{self.binary} exited with status {result.returncode}",
                code=result.returncode,
            )
        try:
            output = result.stdout.decode("utf-8")
        except UnicodeDecodeError as exc:
            raise DecodeError(self.name, f"output is not valid UTF-8: {exc}") from exc
        return output.rstrip("\n")
