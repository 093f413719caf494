"""Health check API schemas."""

from pydantic import BaseModel, Field


class HealthResponse(BaseModel):
    """Response for GET /health (liveness)."""

    status: str = Field(default="ok", description="Service status")


class ReadinessResponse(BaseModel):
    """Response for GET /health/ready."""

    status: str = Field(default="ok", description="ok | not_ready")
    checks: dict[str, str] = Field(
        default_factory=dict,
        description="Per-dependency state: ok | unavailable | disabled",
    )
