"""
Client for the Gemini generateContent REST endpoint.

One request per call: no retries and no streaming. Callers decide what to do
with failures.
"""
import logging
from dataclasses import dataclass
from typing import Optional

import httpx
from fastapi import Depends

from ..config import Settings, get_settings

log = logging.getLogger(__name__)

GEMINI_TIMEOUT = 60.0  # seconds


class GenerationError(Exception):
    """
    The text API refused the request, is not configured or sent a malformed reply.

    The message is safe to show to a user.
    """

    def __init__(self, message: str, status_code: Optional[int] = None):
        super().__init__(message)
        self.status_code = status_code


@dataclass(frozen=True)
class GenerationConfig:
    """Sampling parameters sent with every request."""

    temperature: float = 0.7
    top_k: int = 40
    top_p: float = 0.95
    max_output_tokens: int = 1024

    def to_dict(self) -> dict:
        return {
            "temperature": self.temperature,
            "topK": self.top_k,
            "topP": self.top_p,
            "maxOutputTokens": self.max_output_tokens,
        }


SUMMARY_CONFIG = GenerationConfig(temperature=0.7)
RECOMMENDATION_CONFIG = GenerationConfig(temperature=0.4)


class GenerativeTextClient:
    """Sends a prompt to Gemini and returns the first candidate's text."""

    def __init__(
        self,
        api_key: Optional[str],
        model: str = "gemini-1.5-flash",
        base_url: str = "https://generativelanguage.googleapis.com/v1beta",
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ):
        self.api_key = api_key
        self.model = model
        self.base_url = base_url.rstrip("/")
        self._transport = transport

    @classmethod
    def from_settings(cls, settings: Settings) -> "GenerativeTextClient":
        api_key = settings.gemini_api_key.get_secret_value() if settings.gemini_api_key else None
        return cls(api_key=api_key, model=settings.gemini_model, base_url=settings.gemini_base_url)

    async def generate(self, prompt: str, config: GenerationConfig = SUMMARY_CONFIG) -> str:
        """
        Generate text for a prompt.

        Returns:
            The candidate text, or "" when the reply carries no text part.

        Raises:
            GenerationError: If no API key is configured, the API answers non-2xx
                or the reply body is not a generateContent envelope.
            httpx.HTTPError: On transport failures (timeouts, connection errors).
        """
        if not self.api_key:
            log.error("GEMINI_API_KEY is not configured")
            raise GenerationError("The AI service is not configured")

        async with httpx.AsyncClient(
            timeout=httpx.Timeout(GEMINI_TIMEOUT), transport=self._transport
        ) as client:
            response = await client.post(
                f"{self.base_url}/models/{self.model}:generateContent",
                params={"key": self.api_key},
                json={
                    "contents": [{"parts": [{"text": prompt}]}],
                    "generationConfig": config.to_dict(),
                },
            )

        if not response.is_success:
            log.error("Gemini API error %s: %s", response.status_code, response.text[:500])
            raise GenerationError(
                f"The AI service returned an error (status {response.status_code})",
                status_code=response.status_code,
            )

        try:
            return _candidate_text(response.json())
        except (ValueError, TypeError) as e:
            log.error("Malformed Gemini reply: %s (%s)", response.text[:500], e)
            raise GenerationError("The AI service returned a malformed reply") from e


def _candidate_text(data) -> str:
    """
    Walk ``candidates[0].content.parts[0].text``.

    A reply without candidates or parts is well-formed and yields "".
    Raises TypeError when any level has the wrong shape.
    """
    if not isinstance(data, dict):
        raise TypeError("reply is not a JSON object")
    candidates = data.get("candidates") or []
    if not isinstance(candidates, list):
        raise TypeError("candidates is not a list")
    if not candidates:
        return ""

    candidate = candidates[0]
    if not isinstance(candidate, dict):
        raise TypeError("candidate is not an object")
    content = candidate.get("content") or {}
    if not isinstance(content, dict):
        raise TypeError("content is not an object")
    parts = content.get("parts") or []
    if not isinstance(parts, list):
        raise TypeError("parts is not a list")
    if not parts:
        return ""

    part = parts[0]
    if not isinstance(part, dict):
        raise TypeError("part is not an object")
    text = part.get("text") or ""
    if not isinstance(text, str):
        raise TypeError("text is not a string")
    return text


def get_text_client(settings: Settings = Depends(get_settings)) -> GenerativeTextClient:
    """FastAPI dependency building the text client from settings."""
    return GenerativeTextClient.from_settings(settings)
