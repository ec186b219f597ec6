"""LLM service: Gemini client and single-shot completion.

Each call sends one prompt and returns the model's text verbatim.  There is
no retry, streaming or parsing of the reply.
"""

from __future__ import annotations

import functools
import logging

import httpx
from google.genai import Client
from google.genai.errors import APIError

from csvinsight.config import get_settings
from csvinsight.exceptions import UpstreamError

logger = logging.getLogger(__name__)


@functools.lru_cache
def get_client() -> Client:
    """Return a cached Gemini client built from settings."""
    return Client(api_key=get_settings().gemini_api_key)


async def generate(prompt: str, model_id: str | None = None) -> str:
    """Send *prompt* to the model and return the reply text.

    Raises ``UpstreamError`` when the API call fails or the reply is empty.
    """
    effective_model = model_id or get_settings().model_id
    try:
        response = await get_client().aio.models.generate_content(
            model=effective_model,
            contents=prompt,
        )
    except APIError as exc:
        logger.error("Gemini request failed (%s): %s", exc.code, exc)
        raise UpstreamError(str(exc)) from exc
    except httpx.HTTPError as exc:
        logger.error("Gemini request failed: %s", exc)
        raise UpstreamError(str(exc)) from exc

    text = response.text
    if not text:
        logger.error("Gemini returned an empty response for model %s", effective_model)
        raise UpstreamError("The AI service returned an empty response")
    return text
