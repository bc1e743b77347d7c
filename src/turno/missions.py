"""
Mission helpers - id/timestamp defaulting, lookup and combination merging.

All functions operate on plain dicts so arbitrary caller fields pass
through untouched.
"""

import random
import string
import time
from datetime import datetime, timezone
from typing import Any, Dict, List, Mapping, Optional

ID_PREFIX = "mission"
ID_SUFFIX_LENGTH = 9
_ID_ALPHABET = string.ascii_lowercase + string.digits


class MissionNotFoundError(LookupError):
    """Raised when no mission carries the requested id."""

    def __init__(self, mission_id: str):
        super().__init__(f"Mission not found: {mission_id}")
        self.mission_id = mission_id


def new_mission_id(now_ms: Optional[int] = None) -> str:
    """
    Generate ``mission_<epoch ms>_<random base36 suffix>``.

    The millisecond component never decreases; the suffix keeps ids created
    within the same millisecond apart.
    """
    if now_ms is None:
        now_ms = time.time_ns() // 1_000_000
    suffix = "".join(random.choices(_ID_ALPHABET, k=ID_SUFFIX_LENGTH))
    return f"{ID_PREFIX}_{now_ms}_{suffix}"


def iso_timestamp(moment: Optional[datetime] = None) -> str:
    """UTC ISO-8601 with millisecond precision and a trailing ``Z``."""
    moment = moment or datetime.now(timezone.utc)
    return moment.astimezone(timezone.utc).isoformat(timespec="milliseconds").replace("+00:00", "Z")


def finalize_mission(payload: Mapping[str, Any]) -> Dict[str, Any]:
    """Copy the payload, filling in ``id`` and ``timestamp`` when absent or empty."""
    mission = dict(payload)
    if not mission.get("id"):
        mission["id"] = new_mission_id()
    if not mission.get("timestamp"):
        mission["timestamp"] = iso_timestamp()
    return mission


def find_mission_index(missions: List[Dict[str, Any]], mission_id: str) -> int:
    """Index of the first mission whose id equals ``mission_id``."""
    for index, mission in enumerate(missions):
        if mission.get("id") == mission_id:
            return index
    raise MissionNotFoundError(mission_id)


def merge_combinations(existing: Mapping[str, Any], incoming: Mapping[str, Any]) -> Dict[str, Any]:
    """Shallow merge: incoming keys overwrite, nothing is ever removed."""
    merged = dict(existing)
    merged.update(incoming)
    return merged
