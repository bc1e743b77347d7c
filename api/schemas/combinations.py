"""
Used Combinations API Schemas
"""

from typing import Any, Dict
from pydantic import BaseModel, Field


class CombinationsRequest(BaseModel):
    """Combinations to merge into the stored mapping"""

    combinations: Dict[str, Any] = Field(
        default_factory=dict,
        description="Combination key -> value; existing keys are overwritten, none removed"
    )
