"""
Used Combinations Router - Track value combinations that were already used
"""

import logging
from typing import Any, Dict
from fastapi import APIRouter, Depends, HTTPException

from api.schemas.combinations import CombinationsRequest
from api.schemas.common import SuccessResponse
from api.services import mission_service
from api.dependencies import get_app_state, AppState

router = APIRouter()
logger = logging.getLogger(__name__)


@router.get("/used-combinations", response_model=Dict[str, Any])
async def get_used_combinations(state: AppState = Depends(get_app_state)) -> Dict[str, Any]:
    logger.info("GET /used-combinations")
    try:
        return await mission_service.list_used_combinations(state)
    except Exception as e:
        logger.error(f"Error fetching used combinations: {e}", exc_info=True)
        raise HTTPException(status_code=500, detail="Failed to fetch used combinations")


@router.post("/used-combinations", response_model=SuccessResponse)
async def save_used_combinations(
    request: CombinationsRequest,
    state: AppState = Depends(get_app_state)
) -> SuccessResponse:
    """Shallow-merge the given combinations into the stored mapping."""
    logger.info("POST /used-combinations")
    try:
        await mission_service.merge_used_combinations(state, request.combinations)
    except Exception as e:
        logger.error(f"Error saving used combinations: {e}", exc_info=True)
        raise HTTPException(status_code=500, detail="Failed to save used combinations")
    return SuccessResponse()
