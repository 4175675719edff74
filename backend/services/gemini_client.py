"""Google Gemini API wrapper with error handling.

Used only by the mock interview; resume matching never calls out.
"""

import json
import logging

from google import genai
from google.genai import types

from config import settings

logger = logging.getLogger(__name__)

_client: genai.Client | None = None


def get_client() -> genai.Client | None:
    global _client
    if not settings.gemini_api_key:
        logger.warning("No GEMINI_API_KEY set - interview features disabled")
        return None
    if _client is None:
        _client = genai.Client(api_key=settings.gemini_api_key)
    return _client


def extract_json(text: str) -> dict | None:
    """Parse the first balanced ``{...}`` span in free text.

    Braces inside JSON strings are ignored when balancing. Returns None if
    there is no object or it does not parse.
    """
    start = text.find("{")
    if start < 0:
        return None

    depth = 0
    in_string = False
    escaped = False
    for i in range(start, len(text)):
        ch = text[i]
        if in_string:
            if escaped:
                escaped = False
            elif ch == "\\":
                escaped = True
            elif ch == '"':
                in_string = False
            continue
        if ch == '"':
            in_string = True
        elif ch == "{":
            depth += 1
        elif ch == "}":
            depth -= 1
            if depth == 0:
                try:
                    parsed = json.loads(text[start:i + 1])
                except json.JSONDecodeError as e:
                    logger.error("Failed to parse Gemini response as JSON: %s", e)
                    return None
                return parsed if isinstance(parsed, dict) else None
    return None


async def generate_text(prompt: str, temperature: float = 0.7) -> str | None:
    """Send a prompt to Gemini and return the raw reply text."""
    client = get_client()
    if client is None:
        return None

    try:
        response = client.models.generate_content(
            model=settings.gemini_model,
            contents=prompt,
            config=types.GenerateContentConfig(
                temperature=temperature,
                max_output_tokens=4096,
            ),
        )
        return (response.text or "").strip()
    except Exception as e:
        logger.error("Gemini API error: %s", e)
        return None


async def generate_json(prompt: str, temperature: float = 0.7) -> dict | None:
    """Send a prompt to Gemini and parse the JSON object in its reply."""
    text = await generate_text(prompt, temperature=temperature)
    if text is None:
        return None
    return extract_json(text)
