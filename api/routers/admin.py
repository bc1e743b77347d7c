"""
Admin Router - Destructive maintenance endpoints
"""

import logging
from fastapi import APIRouter, Depends, HTTPException

from api.schemas.common import SuccessResponse
from api.services import mission_service
from api.dependencies import get_app_state, AppState

router = APIRouter()
logger = logging.getLogger(__name__)


@router.delete("/clear-all", response_model=SuccessResponse)
async def clear_all_data(state: AppState = Depends(get_app_state)) -> SuccessResponse:
    """
    Reset storage to an empty Document.

    Immediate and unconditional: no confirmation, no backup.
    """
    logger.info("DELETE /clear-all")
    try:
        await mission_service.clear_all(state)
    except Exception as e:
        logger.error(f"Error clearing data: {e}", exc_info=True)
        raise HTTPException(status_code=500, detail="Failed to clear data")
    return SuccessResponse()
