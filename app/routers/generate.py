# app/routers/generate.py
import json
import logging

import requests
from fastapi import APIRouter, Depends, Request
from fastapi.exception_handlers import http_exception_handler
from fastapi.responses import JSONResponse
from pydantic import ValidationError
from starlette.concurrency import run_in_threadpool
from starlette.exceptions import HTTPException as StarletteHTTPException

from app.config import Settings, get_settings
from app.models import ErrorResponse, GenerateRequest, GenerateResponse
from app.services import gemini

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api", tags=["generate"])

GENERATE_PATH = "/api/generate"
ALL_METHODS = ["GET", "HEAD", "POST", "PUT", "PATCH", "DELETE", "OPTIONS"]

MSG_METHOD = "Only POST requests are allowed"
MSG_NO_KEY = "API key not configured"
MSG_NO_PROMPT = "Prompt is required"
MSG_INTERNAL = "An internal server error occurred."


def _error(status_code: int, message: str) -> JSONResponse:
    return JSONResponse(status_code=status_code, content=ErrorResponse(message=message).model_dump())


async def _read_body(request: Request) -> GenerateRequest:
    """Decode the JSON body; anything that is not a JSON object counts as empty."""
    raw = await request.body()
    try:
        data = json.loads(raw) if raw else {}
    except ValueError:
        data = {}
    if not isinstance(data, dict):
        data = {}
    try:
        return GenerateRequest.model_validate({"prompt": data.get("prompt")})
    except ValidationError:
        # a non-string prompt is treated as missing
        return GenerateRequest()


async def method_not_allowed(request: Request, exc: StarletteHTTPException):
    """405s raised by routing (TRACE, CONNECT, custom verbs) get the same body as the route's own."""
    if exc.status_code == 405 and request.url.path == GENERATE_PATH:
        return _error(405, MSG_METHOD)
    return await http_exception_handler(request, exc)


@router.api_route(
    "/generate",
    methods=ALL_METHODS,
    response_model=GenerateResponse,
    responses={400: {"model": ErrorResponse}, 405: {"model": ErrorResponse}, 500: {"model": ErrorResponse}},
)
async def generate(
    request: Request,
    settings: Settings = Depends(get_settings),
    session: requests.Session = Depends(gemini.get_http_session),
):
    """
    Relay a prompt to Gemini and return {"text": ...}.
    Steps run in order and the first failing one decides the response:
    method (405), API key (500), prompt (400), upstream call (500).
    """
    if request.method != "POST":
        return _error(405, MSG_METHOD)

    if not settings.api_key:
        logger.error("GEMINI_API_KEY is not set")
        return _error(500, MSG_NO_KEY)

    body = await _read_body(request)
    prompt = body.prompt
    if not prompt:
        return _error(400, MSG_NO_PROMPT)

    try:
        text = await run_in_threadpool(gemini.generate, prompt, settings, session)
    except gemini.GeminiError as e:
        logger.error("Error in generate handler: %s", e)
        return _error(500, MSG_INTERNAL)
    except Exception:
        logger.exception("Unexpected error in generate handler")
        return _error(500, MSG_INTERNAL)

    logger.info("Relayed prompt (%d chars) -> reply (%d chars)", len(prompt), len(text))
    return GenerateResponse(text=text)
