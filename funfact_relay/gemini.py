"""
Thin client for the Gemini generateContent endpoint.

One POST per call, no retries. The key travels in the `key` query parameter.
"""
from typing import Any, Dict

import httpx

from . import config
from .errors import UpstreamError
from .models import Content, GenerateContentRequest, GenerationConfig, Part


def build_prompt(theme: str) -> str:
    return config.PROMPT_TEMPLATE.format(theme=theme)


def build_payload(theme: str) -> Dict[str, Any]:
    request = GenerateContentRequest(
        contents=[Content(parts=[Part(text=build_prompt(theme))])],
        generation_config=GenerationConfig(
            temperature=config.TEMPERATURE,
            max_output_tokens=config.MAX_OUTPUT_TOKENS,
            top_p=config.TOP_P,
            top_k=config.TOP_K,
        ),
    )
    return request.model_dump(by_alias=True)


def extract_text(data: Any) -> str:
    """candidates[0].content.parts[0].text, or "" if any link is missing."""
    try:
        text = data["candidates"][0]["content"]["parts"][0]["text"]
    except (KeyError, IndexError, TypeError):
        return ""
    return text if isinstance(text, str) else ""


def _error_payload(response: httpx.Response) -> Any:
    try:
        return response.json()
    except ValueError:
        return response.text


async def generate_text(client: httpx.AsyncClient, theme: str, api_key: str) -> str:
    """Ask Gemini for one fact about `theme` and return the raw (untrimmed) text."""
    try:
        response = await client.post(
            config.GEMINI_ENDPOINT,
            params={"key": api_key},
            json=build_payload(theme),
            headers={"Content-Type": "application/json"},
        )
    except httpx.HTTPError as e:
        raise UpstreamError(f"Request to Gemini failed: {e!r}") from e

    if not response.is_success:
        raise UpstreamError(
            f"Gemini returned HTTP {response.status_code}",
            status_code=response.status_code,
            payload=_error_payload(response),
        )

    try:
        data = response.json()
    except ValueError as e:
        raise UpstreamError("Gemini returned a non-JSON body", payload=response.text) from e

    return extract_text(data)
