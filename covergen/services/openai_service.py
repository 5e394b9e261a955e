"""OpenAI chat completion wrapper."""
from __future__ import annotations

import logging
from typing import Optional, Tuple

from openai import APIStatusError, OpenAI

from covergen.errors import UpstreamError

logger = logging.getLogger(__name__)

DEFAULT_MODEL = "gpt-3.5-turbo"
DEFAULT_TEMPERATURE = 0.7
DEFAULT_TIMEOUT = 60.0


def client_ready(api_key: Optional[str]) -> Tuple[bool, str]:
    if not (api_key or "").strip():
        return False, "OPENAI_API_KEY is missing"
    return True, ""


def get_client(api_key: str, timeout: float = DEFAULT_TIMEOUT) -> OpenAI:
    # The SDK retries by default; each request gets exactly one upstream call
    return OpenAI(api_key=api_key.strip(), timeout=timeout, max_retries=0)


def upstream_message(e: Exception) -> str:
    """Provider error message without the SDK's status-code wrapping."""
    if isinstance(e, APIStatusError):
        body = e.body
        if isinstance(body, dict):
            err = body.get("error", body)
            message = err.get("message") if isinstance(err, dict) else None
            if message:
                return message
        if e.message:
            return e.message
    return str(e) or f"LLM request failed: {type(e).__name__}"


def generate_completion(
    prompt: str,
    api_key: str,
    model: Optional[str] = None,
    temperature: Optional[float] = None,
    timeout: float = DEFAULT_TIMEOUT,
) -> str:
    """
    Send one user message to the chat completion endpoint.

    Returns:
        The content of the first generated choice

    Raises:
        UpstreamError: If the call fails or the response holds no content
    """
    try:
        client = get_client(api_key, timeout=timeout)
        res = client.chat.completions.create(
            model=model or DEFAULT_MODEL,
            messages=[{"role": "user", "content": prompt}],
            temperature=DEFAULT_TEMPERATURE if temperature is None else temperature,
        )
    except Exception as e:
        logger.exception("OpenAI API error")
        raise UpstreamError(upstream_message(e)) from e

    choices = getattr(res, "choices", None) or []
    if not choices:
        raise UpstreamError()
    content = (choices[0].message.content or "").strip()
    if not content:
        raise UpstreamError()
    return content
