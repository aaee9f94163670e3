from __future__ import annotations

from typing import Protocol, runtime_checkable

from ..languages import InputLanguage, Language


@runtime_checkable
class Api(Protocol):
    name: str

    def translate(
        self,
        text: str,
        source_language: InputLanguage | Language,
        target_language: Language,
    ) -> str:
        ...


@runtime_checkable
class ApiDetect(Protocol):
    name: str

    def detect(self, text: str) -> Language | None:
        ...
