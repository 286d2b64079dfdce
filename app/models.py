from pydantic import BaseModel, ConfigDict
from typing import Optional, Literal


# ---------- Inbound / outbound bodies ----------
class GenerateRequest(BaseModel):
    prompt: Optional[str] = None


class GenerateResponse(BaseModel):
    text: str


class ErrorResponse(BaseModel):
    message: str


# ---------- Upstream request ----------
class Part(BaseModel):
    model_config = ConfigDict(frozen=True)

    text: str


class Content(BaseModel):
    model_config = ConfigDict(frozen=True)

    role: Literal["user"] = "user"
    parts: tuple[Part, ...]


class UpstreamPayload(BaseModel):
    model_config = ConfigDict(frozen=True)

    contents: tuple[Content, ...]

    @classmethod
    def from_prompt(cls, prompt: str) -> "UpstreamPayload":
        return cls(contents=(Content(parts=(Part(text=prompt),)),))
