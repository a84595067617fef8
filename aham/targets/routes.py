from typing import List
import logging

from fastapi import APIRouter, Depends, HTTPException
from sqlalchemy.orm import Session

from aham.core.database import get_db
from aham.core.schemas import CompletionUpdate, CreatedResponse, SuccessResponse
from aham.targets.schemas import TargetBase, TargetCreate
from aham.targets.db import (
    create_target,
    delete_target,
    get_targets_by_period,
    set_target_completed,
)

router = APIRouter(prefix="/targets", tags=["Targets"])
logger = logging.getLogger(__name__)


@router.get(
    "/{period_key}",
    response_model=List[TargetBase],
    summary="Get targets of a period",
    description="Retrieve the daily, weekly and monthly targets stored under a period key.",
    responses={
        200: {"description": "Targets retrieved successfully."},
        500: {"description": "Failed to retrieve targets."},
    },
)
def read_targets_route(period_key: str, db: Session = Depends(get_db)) -> List[TargetBase]:
    try:
        return get_targets_by_period(db, period_key)
    except Exception as e:
        logger.error(f"Failed to fetch targets for period {period_key}: {e}")
        raise HTTPException(status_code=500, detail="Failed to retrieve targets")


@router.post(
    "",
    response_model=CreatedResponse,
    summary="Create a target",
    responses={
        200: {"description": "Target created successfully."},
        500: {"description": "Target creation failed."},
    },
)
def create_target_route(target: TargetCreate, db: Session = Depends(get_db)) -> CreatedResponse:
    try:
        created = create_target(db, target)
    except Exception as e:
        db.rollback()
        logger.error(f"Failed to create {target.type} target for period {target.period_key}: {e}")
        raise HTTPException(status_code=500, detail="Failed to create target")
    return CreatedResponse(id=created.id)


@router.patch(
    "/{target_id}",
    response_model=SuccessResponse,
    summary="Mark a target completed or not",
    responses={
        200: {"description": "Target updated (no-op for unknown ids)."},
        500: {"description": "Failed to update target."},
    },
)
def update_target_route(
    target_id: int,
    update: CompletionUpdate,
    db: Session = Depends(get_db),
) -> SuccessResponse:
    try:
        set_target_completed(db, target_id, update.completed)
    except Exception as e:
        db.rollback()
        logger.error(f"Failed to update target {target_id}: {e}")
        raise HTTPException(status_code=500, detail="Failed to update target")
    return SuccessResponse()


@router.delete(
    "/{target_id}",
    response_model=SuccessResponse,
    summary="Delete a target",
    responses={
        200: {"description": "Target deleted (no-op for unknown ids)."},
        500: {"description": "Failed to delete target."},
    },
)
def delete_target_route(target_id: int, db: Session = Depends(get_db)) -> SuccessResponse:
    try:
        delete_target(db, target_id)
    except Exception as e:
        db.rollback()
        logger.error(f"Failed to delete target {target_id}: {e}")
        raise HTTPException(status_code=500, detail="Failed to delete target")
    return SuccessResponse()
