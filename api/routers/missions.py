"""
Missions Router - CRUD endpoints for mission records
"""

import logging
from typing import Any, Dict, List
from fastapi import APIRouter, Body, Depends, HTTPException

from turno.missions import MissionNotFoundError
from api.schemas.common import SuccessResponse
from api.schemas.missions import MissionResponse, StatusUpdateRequest
from api.services import mission_service
from api.dependencies import get_app_state, AppState

router = APIRouter()
logger = logging.getLogger(__name__)


@router.get("/missions", response_model=List[Dict[str, Any]])
async def get_missions(state: AppState = Depends(get_app_state)) -> List[Dict[str, Any]]:
    """Return every stored mission in creation order."""
    logger.info("GET /missions")
    try:
        return await mission_service.list_missions(state)
    except Exception as e:
        logger.error(f"Error fetching missions: {e}", exc_info=True)
        raise HTTPException(status_code=500, detail="Failed to fetch missions")


@router.post("/missions", response_model=MissionResponse)
async def create_mission(
    payload: Dict[str, Any] = Body(..., description="Mission fields; id and timestamp are optional"),
    state: AppState = Depends(get_app_state)
) -> MissionResponse:
    """
    Store a new mission.

    Any JSON object is accepted. Missing ``id``/``timestamp`` are generated
    and the finalized mission is echoed back so the caller can reconcile
    its local copy.
    """
    logger.info("POST /missions")
    logger.debug(f"Request body: {payload}")
    try:
        mission = await mission_service.create_mission(state, payload)
    except Exception as e:
        logger.error(f"Error saving mission: {e}", exc_info=True)
        raise HTTPException(status_code=500, detail="Failed to save mission")
    return MissionResponse(mission=mission)


@router.put("/missions/{mission_id}", response_model=MissionResponse)
async def update_mission_status(
    mission_id: str,
    request: StatusUpdateRequest,
    state: AppState = Depends(get_app_state)
) -> MissionResponse:
    """Change the status of a mission; nothing else about it is touched."""
    logger.info(f"PUT /missions/{mission_id}")
    try:
        mission = await mission_service.update_mission_status(state, mission_id, request.status)
    except MissionNotFoundError:
        logger.info(f"Mission not found: {mission_id}")
        raise HTTPException(status_code=404, detail="Mission not found")
    except Exception as e:
        logger.error(f"Error updating mission: {e}", exc_info=True)
        raise HTTPException(status_code=500, detail="Failed to update mission")
    return MissionResponse(mission=mission)


@router.delete("/missions/{mission_id}", response_model=SuccessResponse)
async def delete_mission(
    mission_id: str,
    state: AppState = Depends(get_app_state)
) -> SuccessResponse:
    logger.info(f"DELETE /missions/{mission_id}")
    try:
        await mission_service.delete_mission(state, mission_id)
    except MissionNotFoundError:
        logger.info(f"Mission not found: {mission_id}")
        raise HTTPException(status_code=404, detail="Mission not found")
    except Exception as e:
        logger.error(f"Error deleting mission: {e}", exc_info=True)
        raise HTTPException(status_code=500, detail="Failed to delete mission")
    return SuccessResponse()
