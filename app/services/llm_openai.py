import logging

import requests

from app.core.errors import CompletionError
from app.settings import Settings

logger = logging.getLogger(__name__)


def complete_chat(prompt: str, settings: Settings) -> str:
    """
    Pide una completion corta al modelo de chat de OpenAI y devuelve
    el contenido del primer choice.
    """
    if not settings.OPENAI_API_KEY:
        raise CompletionError("Missing OPENAI_API_KEY")

    payload = {
        "model": settings.OPENAI_MODEL,
        "messages": [
            {"role": "user", "content": prompt},
        ],
        "max_tokens": settings.OPENAI_MAX_TOKENS,
        "temperature": settings.OPENAI_TEMPERATURE,
    }

    try:
        r = requests.post(
            f"{settings.OPENAI_API_BASE.rstrip('/')}/chat/completions",
            headers={
                "Authorization": f"Bearer {settings.OPENAI_API_KEY}",
                "Content-Type": "application/json",
            },
            json=payload,
            timeout=settings.OPENAI_TIMEOUT_SECONDS,
        )
    except requests.RequestException as e:
        raise CompletionError(f"OpenAI request failed: {e}") from e

    if not r.ok:
        raise CompletionError(f"OpenAI HTTP {r.status_code}: {r.text}")

    try:
        data = r.json()
    except ValueError as e:
        raise CompletionError(f"OpenAI returned invalid JSON: {e}") from e

    if not isinstance(data, dict):
        raise CompletionError("OpenAI returned an unexpected body")

    choices = data.get("choices") or []
    if not choices:
        raise CompletionError("OpenAI returned no choices")

    first = choices[0]
    message = first.get("message") if isinstance(first, dict) else None
    if not isinstance(message, dict):
        raise CompletionError("OpenAI returned an unexpected body")

    content = message.get("content") or ""
    logger.info(
        "OpenAI completion received",
        extra={"model": settings.OPENAI_MODEL, "chars": len(content)},
    )
    return content
