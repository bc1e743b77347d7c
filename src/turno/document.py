"""
Document Schema - The single persisted JSON object

    {"missions": [...], "usedCombinations": {...}}

Missions are schema-free JSON objects; only ``id``, ``timestamp`` and
``status`` get special treatment (see ``turno.missions``). Field order of
every mission is kept as written by the caller.
"""

from typing import Any, Dict, List

from pydantic import BaseModel, ConfigDict, Field

MISSIONS_KEY = "missions"
USED_COMBINATIONS_KEY = "usedCombinations"


class Document(BaseModel):
    """Whole persisted state: ordered missions plus used value combinations."""

    model_config = ConfigDict(populate_by_name=True)

    missions: List[Dict[str, Any]] = Field(
        default_factory=list,
        description="Missions in creation order"
    )
    used_combinations: Dict[str, Any] = Field(
        default_factory=dict,
        alias=USED_COMBINATIONS_KEY,
        description="Combination key -> opaque value"
    )

    def to_json(self) -> Dict[str, Any]:
        """Plain JSON-ready dict using the on-disk field names."""
        return self.model_dump(by_alias=True)


def empty_document() -> Document:
    return Document()
