"""
Gemini text-generation client.

One prompt in, one string out; every failure leaves here as an UpstreamError
subclass (or ConfigurationError when no key is set).
"""

import logging
from typing import Optional

from google import genai

from ..core.config import Settings, get_settings
from ..core.errors import (
    ConfigurationError,
    ContentBlockedError,
    EmptyResponseError,
    classify_upstream_error,
)

log = logging.getLogger(__name__)

SAFETY_FINISH_REASONS = {
    "SAFETY",
    "BLOCKLIST",
    "PROHIBITED_CONTENT",
    "SPII",
    "RECITATION",
    "IMAGE_SAFETY",
}


def _reason_name(reason) -> Optional[str]:
    if reason is None:
        return None
    return getattr(reason, "value", None) or str(reason)


class GeminiClient:
    def __init__(self, settings: Optional[Settings] = None, client=None):
        self.settings = settings or get_settings()
        if client is None:
            if not self.settings.api_key:
                log.error("❌ API_KEY is not set in the server environment")
                raise ConfigurationError()
            try:
                client = genai.Client(api_key=self.settings.api_key)
            except Exception as e:
                log.error(f"❌ Failed to initialise the Gemini SDK: {e}")
                raise ConfigurationError(f"AI SDKの初期化に失敗しました: {e}") from e
        self.client = client
        self.model = self.settings.gemini_model

    async def generate(self, prompt: str) -> str:
        log.info(f"🤖 Generating content with model {self.model}")
        try:
            response = await self.client.aio.models.generate_content(
                model=self.model,
                contents=prompt,
            )
        except Exception as e:
            log.error(f"❌ Gemini request failed: {e}")
            raise classify_upstream_error(e) from e

        text = response.text
        if text is None:
            raise self._missing_text_error(response)
        return text

    @staticmethod
    def _missing_text_error(response) -> Exception:
        feedback = getattr(response, "prompt_feedback", None)
        block_reason = _reason_name(getattr(feedback, "block_reason", None))
        if block_reason:
            log.warning(f"🚫 Prompt blocked: {block_reason}")
            return ContentBlockedError(block_reason)

        candidates = getattr(response, "candidates", None) or []
        finish_reason = _reason_name(candidates[0].finish_reason) if candidates else None
        if finish_reason in SAFETY_FINISH_REASONS:
            log.warning(f"🚫 Response blocked: {finish_reason}")
            return ContentBlockedError(finish_reason)

        log.error(f"❌ Gemini returned no text (finish reason: {finish_reason})")
        return EmptyResponseError(finish_reason)
