import logging
import os

from fastapi import FastAPI
from dotenv import load_dotenv, find_dotenv
from starlette.exceptions import HTTPException as StarletteHTTPException

# Internal imports
from app.config import LOG_DATE_FORMAT, LOG_FORMAT
from app.routers import generate

# ------------------------------------------------------------------
# 🌟 Environment + App setup
# ------------------------------------------------------------------
load_dotenv(find_dotenv())

logging.basicConfig(
    level=os.getenv("LOG_LEVEL", "INFO").upper(),
    format=LOG_FORMAT,
    datefmt=LOG_DATE_FORMAT,
)

app = FastAPI(title="Prompt Relay", version="0.1.0")

# Every non-POST request to /api/generate answers 405, CORS preflights included.
app.add_exception_handler(StarletteHTTPException, generate.method_not_allowed)

# ------------------------------------------------------------------
# 🧠 Health & Root
# ------------------------------------------------------------------
@app.get("/healthz")
def health():
    return {"ok": True}

@app.get("/")
def root():
    return {"message": "Prompt Relay API. POST {\"prompt\": ...} to /api/generate"}

# ------------------------------------------------------------------
# 🧩 Routers
# ------------------------------------------------------------------
app.include_router(generate.router)
