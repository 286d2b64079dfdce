import os

from pydantic import BaseModel

DEFAULT_MODEL = "gemini-2.0-flash"
DEFAULT_API_BASE = "https://generativelanguage.googleapis.com/v1beta"
DEFAULT_TIMEOUT = 30.0
# Cap on establishing the upstream connection; the read timeout is Settings.timeout
CONNECT_TIMEOUT = 10.0

# Upstream error bodies are logged, capped to this many characters
ERROR_BODY_LOG_LIMIT = 500

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
LOG_DATE_FORMAT = "%Y-%m-%d %H:%M:%S"


class Settings(BaseModel):
    api_key: str | None = None
    model: str = DEFAULT_MODEL
    api_base: str = DEFAULT_API_BASE
    timeout: float = DEFAULT_TIMEOUT

    @property
    def endpoint(self) -> str:
        return f"{self.api_base.rstrip('/')}/models/{self.model}:generateContent"


def _timeout_from_env() -> float:
    raw = os.getenv("GEMINI_TIMEOUT")
    if not raw:
        return DEFAULT_TIMEOUT
    try:
        value = float(raw)
    except ValueError:
        return DEFAULT_TIMEOUT
    return value if value > 0 else DEFAULT_TIMEOUT


def get_settings() -> Settings:
    """Read settings from the environment. Called per request, never cached."""
    return Settings(
        api_key=os.getenv("GEMINI_API_KEY") or None,
        model=os.getenv("GEMINI_MODEL") or DEFAULT_MODEL,
        api_base=os.getenv("GEMINI_API_BASE") or DEFAULT_API_BASE,
        timeout=_timeout_from_env(),
    )
