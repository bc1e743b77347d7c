"""
Mission API Schemas - Request/response models for mission endpoints

Create requests are accepted as any JSON object (see routers.missions);
only the status update has a fixed shape.
"""

from typing import Any, Dict
from pydantic import BaseModel, Field


class StatusUpdateRequest(BaseModel):
    """New status for an existing mission"""

    status: str = Field(..., description="New mission status (e.g. 'pending', 'done')")


class MissionResponse(BaseModel):
    """Response carrying the stored copy of a mission"""

    success: bool = Field(True, description="Operation succeeded")
    mission: Dict[str, Any] = Field(
        ...,
        description="Mission as persisted, including generated id/timestamp"
    )
