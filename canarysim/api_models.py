from __future__ import annotations

from pydantic import BaseModel, Field


class VersionResponse(BaseModel):
    version: str = Field(..., description="Deployed version label, e.g. v1.2.0")
    status: str = Field("healthy", description="Always 'healthy'")


class WorkResponse(BaseModel):
    version: str
    processed: bool = True
    latency_ms: int = Field(..., ge=0, description="Configured delay, not the measured one")
