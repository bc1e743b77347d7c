"""
Common API Schemas - Shared acknowledgement payloads
"""

from pydantic import BaseModel, Field


class SuccessResponse(BaseModel):
    """Bare acknowledgement for operations with nothing to return"""

    success: bool = Field(True, description="Always true; failures use HTTP error codes")
