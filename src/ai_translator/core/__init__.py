"""Domain layer - Pure entities shared by the UI and the translation services."""

from .language import (
    AUTO_DETECT_CODE,
    AUTO_DETECT_NAME,
    DEFAULT_SOURCE_CODE,
    DEFAULT_TARGET_CODE,
    SOURCE_LANGUAGES,
    SOURCE_LANGUAGES_BY_CODE,
    TARGET_LANGUAGES,
    TARGET_LANGUAGES_BY_CODE,
    Language,
    is_auto_detect,
    source_language_name,
    target_language_name,
)

__all__ = [
    "AUTO_DETECT_CODE",
    "AUTO_DETECT_NAME",
    "DEFAULT_SOURCE_CODE",
    "DEFAULT_TARGET_CODE",
    "SOURCE_LANGUAGES",
    "SOURCE_LANGUAGES_BY_CODE",
    "TARGET_LANGUAGES",
    "TARGET_LANGUAGES_BY_CODE",
    "Language",
    "is_auto_detect",
    "source_language_name",
    "target_language_name",
]
