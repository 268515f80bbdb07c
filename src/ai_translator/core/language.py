"""Language catalog - static source/target language tables."""

from dataclasses import dataclass
from types import MappingProxyType
from typing import Mapping, Tuple


AUTO_DETECT_CODE = "auto"
AUTO_DETECT_NAME = "Auto-Detect"

DEFAULT_SOURCE_CODE = AUTO_DETECT_CODE
DEFAULT_TARGET_CODE = "es"
FALLBACK_TARGET_NAME = "English"


@dataclass(frozen=True)
class Language:
    """A selectable language: short code plus the display name used in prompts."""

    code: str
    name: str

    @property
    def is_auto_detect(self) -> bool:
        return self.code == AUTO_DETECT_CODE


TARGET_LANGUAGES: Tuple[Language, ...] = (
    Language("en", "English"),
    Language("es", "Spanish"),
    Language("fr", "French"),
    Language("de", "German"),
    Language("it", "Italian"),
    Language("pt", "Portuguese"),
    Language("nl", "Dutch"),
    Language("ru", "Russian"),
    Language("pl", "Polish"),
    Language("tr", "Turkish"),
    Language("ar", "Arabic"),
    Language("hi", "Hindi"),
    Language("bn", "Bengali"),
    Language("ta", "Tamil"),
    Language("te", "Telugu"),
    Language("ja", "Japanese"),
    Language("ko", "Korean"),
    Language("zh", "Chinese (Simplified)"),
    Language("vi", "Vietnamese"),
    Language("id", "Indonesian"),
    Language("sv", "Swedish"),
    Language("uk", "Ukrainian"),
)

SOURCE_LANGUAGES: Tuple[Language, ...] = (
    Language(AUTO_DETECT_CODE, AUTO_DETECT_NAME),
) + TARGET_LANGUAGES


def _index(languages: Tuple[Language, ...]) -> Mapping[str, Language]:
    table = {}
    for language in languages:
        if language.code in table:
            raise ValueError(f"Duplicate language code: {language.code}")
        table[language.code] = language
    return MappingProxyType(table)


SOURCE_LANGUAGES_BY_CODE: Mapping[str, Language] = _index(SOURCE_LANGUAGES)
TARGET_LANGUAGES_BY_CODE: Mapping[str, Language] = _index(TARGET_LANGUAGES)


def source_language_name(code: str) -> str:
    """
    Resolve a source language code to its display name.

    Unknown codes resolve to the auto-detect sentinel so the model is asked
    to infer the language rather than being told something wrong.
    """
    language = SOURCE_LANGUAGES_BY_CODE.get(code)
    return language.name if language else AUTO_DETECT_NAME


def target_language_name(code: str) -> str:
    """Resolve a target language code to its display name (English if unknown)."""
    language = TARGET_LANGUAGES_BY_CODE.get(code)
    return language.name if language else FALLBACK_TARGET_NAME


def is_auto_detect(code: str) -> bool:
    """True for the auto-detect source code."""
    return code == AUTO_DETECT_CODE
