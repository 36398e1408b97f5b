"""OpenAI Completions API client: prompt building, one POST per turn, raw reply extraction."""

from __future__ import annotations

import json
import logging
from typing import Any

import openai
from openai import OpenAI

from ata.errors import NetworkError, ResponseParseError
from ata.sanitize import escape_quotes, sanitize_response
from ata.schemas import Config

API_BASE_URL = "https://api.openai.com/v1"

# Trailing blank lines nudge the model into answering rather than continuing the prompt
PROMPT_SUFFIX = "\n\n"

logger = logging.getLogger(__name__)


def get_client(config: Config) -> OpenAI:
    """Client for the fixed endpoint. Bearer auth comes from config.api_key; no retries."""
    return OpenAI(api_key=config.api_key, base_url=API_BASE_URL, max_retries=0)


def _strip_terminator(line: str) -> str:
    """Drop the line terminator the editor may leave attached (one \\n or \\r\\n)."""
    if line.endswith("\r\n"):
        return line[:-2]
    if line.endswith("\n"):
        return line[:-1]
    return line


def build_prompt(line: str) -> str:
    """Raw input line -> prompt sent to the model."""
    return escape_quotes(_strip_terminator(line)) + PROMPT_SUFFIX


def _parse_body(body: str) -> dict[str, Any]:
    try:
        data = json.loads(body)
    except json.JSONDecodeError as e:
        raise ResponseParseError(f"Reply is not valid JSON: {e}") from e
    if not isinstance(data, dict):
        raise ResponseParseError(f"Reply is not a JSON object: {body[:80]!r}")
    return data


def _extract_raw_text(data: dict[str, Any]) -> str:
    """
    Pick the error message if the reply carries one, else the first choice's text.
    Returned JSON-encoded (quoted, with escapes) as the sanitizer expects.
    """
    if data.get("error") is not None:
        error = data["error"]
        message = error.get("message") if isinstance(error, dict) else error
        logger.debug("API reported an error: %s", message)
        return json.dumps(message, ensure_ascii=False)

    choices = data.get("choices")
    if not isinstance(choices, list) or not choices or not isinstance(choices[0], dict):
        raise ResponseParseError("Reply has neither an error nor choices")
    if "text" not in choices[0]:
        raise ResponseParseError("First choice has no text")
    return json.dumps(choices[0]["text"], ensure_ascii=False)


def create_completion(client: OpenAI, config: Config, line: str) -> str:
    """
    Send one prompt to the Completions API and return the raw (JSON-encoded) reply text.
    API-side errors (bad key, quota, ...) are returned as text, not raised.
    Raises NetworkError on transport failure, ResponseParseError if the reply is not usable JSON.
    """
    prompt = build_prompt(line)
    logger.debug(
        "completion request: model=%s max_tokens=%s temperature=%s prompt_chars=%d",
        config.model, config.max_tokens, config.temperature, len(prompt),
    )
    try:
        response = client.completions.with_raw_response.create(
            model=config.model,
            prompt=prompt,
            max_tokens=config.max_tokens,
            temperature=config.temperature,
        )
        body = response.text
        logger.debug("completion reply: status=%s", response.status_code)
    except openai.APIStatusError as e:
        # 4xx/5xx: the body still carries {"error": {...}} for the user to read
        logger.debug("completion reply: status=%s", e.status_code)
        body = e.response.text
    except openai.APIConnectionError as e:
        # APITimeoutError is a subclass
        raise NetworkError(f"Request to {API_BASE_URL} failed: {e}") from e

    return _extract_raw_text(_parse_body(body))


def prompt_model(client: OpenAI, config: Config, line: str) -> str:
    """One full turn: request + sanitization. Returns the text to print."""
    return sanitize_response(create_completion(client, config, line))
