"""Gemini Translation Service - Implements translation via Google Gemini API."""

import logging
from typing import Optional

import google.genai as genai
from google.genai import types

from ai_translator.services.settings_manager import DEFAULT_MODEL_NAME, DEFAULT_TEMPERATURE
from ai_translator.services.translation.translation_service import (
    TranslationRequest,
    TranslationResult,
    TranslationService,
)


logger = logging.getLogger(__name__)


class GeminiTranslationService(TranslationService):
    """
    Translation service using Google Gemini API.

    The client is built once from the API key supplied at startup. A low
    temperature keeps translations literal and repeatable. Each call is
    independent: no retries, no conversation history.
    """

    TRANSLATION_PROMPT = """You are an expert multilingual translator.
Translate the following text {source_clause} to {target_language}.
Your response must ONLY contain the translated text, with no additional commentary, formatting, or explanations.

Text to translate:
---
{text}
---"""

    AUTO_DETECT_CLAUSE = "from its original language"
    UNKNOWN_ERROR = "An unknown error occurred during translation."
    EMPTY_RESPONSE = "Empty response from API"

    def __init__(
        self,
        api_key: str,
        model_name: str = DEFAULT_MODEL_NAME,
        temperature: float = DEFAULT_TEMPERATURE,
        client: Optional[genai.Client] = None,
    ):
        self.model_name = model_name
        self.temperature = temperature
        self._client = client if client is not None else genai.Client(api_key=api_key)

    def build_prompt(self, request: TranslationRequest) -> str:
        """Build the instruction sent to the model for one request."""
        if request.source_is_auto_detect:
            source_clause = self.AUTO_DETECT_CLAUSE
        else:
            source_clause = f"from {request.source_language_name}"

        return self.TRANSLATION_PROMPT.format(
            source_clause=source_clause,
            target_language=request.target_language_name,
            text=request.text,
        )

    def translate(self, request: TranslationRequest) -> TranslationResult:
        """
        Translate text using Gemini API.

        Args:
            request: Text plus source and target language display names.

        Returns:
            TranslationResult with translated text or error message. Never raises
            for API, network or response-shape failures.
        """
        prompt = self.build_prompt(request)
        logger.debug(
            "Translation request: model=%s source=%s target=%s chars=%d",
            self.model_name,
            request.source_language_name,
            request.target_language_name,
            len(request.text),
        )

        try:
            response = self._client.models.generate_content(
                model=self.model_name,
                contents=prompt,
                config=types.GenerateContentConfig(
                    temperature=self.temperature,
                ),
            )
            text = response.text
        except Exception as e:
            logger.exception("Gemini API call failed")
            return TranslationResult.failure(self._failure_message(e), model=self.model_name)

        if not text or not text.strip():
            logger.error("Gemini API returned an empty response")
            return TranslationResult.failure(
                f"Translation failed. {self.EMPTY_RESPONSE}", model=self.model_name
            )

        logger.debug("Translation succeeded: %d chars", len(text))
        return TranslationResult.success(text.strip(), model=self.model_name)

    def _failure_message(self, error: Exception) -> str:
        message = str(error).strip()
        if not message:
            return self.UNKNOWN_ERROR
        return f"Translation failed. {message}"
