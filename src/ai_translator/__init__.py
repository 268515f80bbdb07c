"""
AI Language Translator - A desktop front end for Gemini-powered translation.

This package provides:
- A static catalog of source and target languages
- A translate operation backed by Google Gemini
- A PySide6 window for entering text and reading the result
"""

__version__ = "0.1.0"

from ai_translator.core import Language, SOURCE_LANGUAGES, TARGET_LANGUAGES

__all__ = [
    "Language",
    "SOURCE_LANGUAGES",
    "TARGET_LANGUAGES",
]
