"""
Mission Service - Read-modify-write operations on the stored Document

Every operation loads the whole Document, applies one transformation and,
when it mutates, saves the whole Document back. Mutations run under
``AppState.write_lock``; file I/O runs in the threadpool so the event loop
is never blocked.
"""

import logging
from typing import Any, Dict, List, Mapping

from fastapi.concurrency import run_in_threadpool

from turno.document import Document, empty_document
from turno.missions import finalize_mission, find_mission_index, merge_combinations

from api.dependencies import AppState

logger = logging.getLogger(__name__)


async def _load(state: AppState) -> Document:
    return await run_in_threadpool(state.repository.load)


async def _save(state: AppState, document: Document) -> None:
    await run_in_threadpool(state.repository.save, document)


async def list_missions(state: AppState) -> List[Dict[str, Any]]:
    document = await _load(state)
    return document.missions


async def list_used_combinations(state: AppState) -> Dict[str, Any]:
    document = await _load(state)
    return document.used_combinations


async def create_mission(state: AppState, payload: Mapping[str, Any]) -> Dict[str, Any]:
    """
    Append a mission, generating ``id``/``timestamp`` when missing.

    Caller-supplied ids are not checked for collisions; a duplicate id
    produces a second entry and later updates/deletes hit the first one.
    """
    mission = finalize_mission(payload)
    async with state.write_lock:
        document = await _load(state)
        document.missions.append(mission)
        await _save(state, document)
    logger.info(f"Mission created: {mission['id']}")
    return mission


async def update_mission_status(state: AppState, mission_id: str, status: Any) -> Dict[str, Any]:
    """Set ``status`` on the first mission with ``mission_id``. Raises MissionNotFoundError."""
    async with state.write_lock:
        document = await _load(state)
        index = find_mission_index(document.missions, mission_id)
        mission = document.missions[index]
        mission["status"] = status
        await _save(state, document)
    logger.info(f"Mission {mission_id} status updated to {status!r}")
    return mission


async def delete_mission(state: AppState, mission_id: str) -> None:
    """Remove the first mission with ``mission_id``. Raises MissionNotFoundError."""
    async with state.write_lock:
        document = await _load(state)
        index = find_mission_index(document.missions, mission_id)
        del document.missions[index]
        await _save(state, document)
    logger.info(f"Mission deleted: {mission_id}")


async def merge_used_combinations(state: AppState, combinations: Mapping[str, Any]) -> None:
    async with state.write_lock:
        document = await _load(state)
        document.used_combinations = merge_combinations(document.used_combinations, combinations)
        await _save(state, document)
    logger.info(f"Merged {len(combinations)} used combinations")


async def clear_all(state: AppState) -> None:
    """Reset storage to the empty Document. No load needed."""
    async with state.write_lock:
        await _save(state, empty_document())
    logger.warning("All data cleared")
