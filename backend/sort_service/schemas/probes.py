"""Probe Schemas: constant response bodies for the greeting and health routes."""

from typing import Literal

from pydantic import BaseModel


class GreetingResponse(BaseModel):
    message: str = "Hello, World!"


class HealthResponse(BaseModel):
    """Liveness payload. Only one state exists: the process answered."""
    status: Literal["ok"] = "ok"
