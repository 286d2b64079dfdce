# app/services/gemini.py
import logging

import requests

from app.config import CONNECT_TIMEOUT, ERROR_BODY_LOG_LIMIT, Settings
from app.models import UpstreamPayload

logger = logging.getLogger(__name__)

# Shared client, created once at import
_session = requests.Session()


class GeminiError(Exception):
    """Upstream call failed: network error, non-2xx status or unreadable body."""

    def __init__(self, message: str, status_code: int | None = None):
        super().__init__(message)
        self.status_code = status_code


def get_http_session() -> requests.Session:
    return _session


def _first(items):
    if isinstance(items, list) and items:
        return items[0]
    return None


def extract_text(data) -> str:
    """
    Pull candidates[0].content.parts[0].text out of a decoded reply.
    Only that path is read; any missing or mistyped level on it yields ''.
    """
    candidate = _first(data.get("candidates")) if isinstance(data, dict) else None
    content = candidate.get("content") if isinstance(candidate, dict) else None
    part = _first(content.get("parts")) if isinstance(content, dict) else None
    text = part.get("text") if isinstance(part, dict) else None
    if not isinstance(text, str):
        if text is not None:
            logger.warning("Unexpected Gemini reply: text is %s", type(text).__name__)
        return ""
    return text


def generate(prompt: str, settings: Settings, session: requests.Session | None = None) -> str:
    """Send one prompt to Gemini generateContent and return the first candidate's text."""
    http = session or _session
    payload = UpstreamPayload.from_prompt(prompt)
    headers = {"Content-Type": "application/json"}

    try:
        r = http.post(
            settings.endpoint,
            params={"key": settings.api_key},
            data=payload.model_dump_json(),
            headers=headers,
            timeout=(min(CONNECT_TIMEOUT, settings.timeout), settings.timeout),
        )
    except requests.Timeout as e:
        raise GeminiError(f"Gemini request timed out after {settings.timeout}s") from e
    except requests.RequestException as e:
        # str(e) may carry the full URL, key included
        raise GeminiError(f"Gemini request failed: {type(e).__name__}") from e

    if not 200 <= r.status_code < 300:
        logger.error("Gemini API error %s: %s", r.status_code, r.text[:ERROR_BODY_LOG_LIMIT])
        raise GeminiError(f"Gemini API request failed with status {r.status_code}", r.status_code)

    try:
        data = r.json()
    except ValueError as e:
        raise GeminiError("Gemini API returned a non-JSON body", r.status_code) from e
    if data is None:
        raise GeminiError("Gemini API returned an empty JSON body", r.status_code)

    return extract_text(data)
