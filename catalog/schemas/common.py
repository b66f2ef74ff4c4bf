"""Shared response shapes."""

from typing import Literal

from pydantic import BaseModel


class ResultResponse(BaseModel):
    """Acknowledgement body for DELETE endpoints."""
    result: Literal["success"] = "success"


class ErrorResponse(BaseModel):
    """Error envelope returned with every 4xx/5xx status."""
    error: str


class LivenessResponse(BaseModel):
    status: Literal["healthy"] = "healthy"
    service: str
    version: str


class ReadinessResponse(BaseModel):
    status: Literal["ready", "not_ready"]
    checks: dict[str, str]
    error: str | None = None
