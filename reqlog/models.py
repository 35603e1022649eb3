"""Pydantic models for the demo service's responses."""

from __future__ import annotations

from pydantic import BaseModel


class HealthResponse(BaseModel):
    status: str
    uptime_seconds: float


class ServiceInfo(BaseModel):
    service: str
    version: str
    docs: str
