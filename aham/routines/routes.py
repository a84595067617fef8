from typing import List
import logging

from fastapi import APIRouter, Depends, HTTPException
from sqlalchemy.orm import Session

from aham.core.database import get_db
from aham.core.schemas import CreatedResponse, SuccessResponse
from aham.routines.schemas import (
    ApplyTemplateRequest,
    RoutineTemplateBase,
    RoutineTemplateCreate,
)
from aham.routines.db import (
    apply_template,
    create_template,
    delete_template,
    get_all_templates,
)

router = APIRouter(tags=["Routines"])
logger = logging.getLogger(__name__)


@router.get(
    "/routine-templates",
    response_model=List[RoutineTemplateBase],
    summary="Get all routine templates",
    description="Retrieve every routine template with its nested task titles.",
    responses={
        200: {"description": "Templates retrieved successfully."},
        500: {"description": "Failed to retrieve templates."},
    },
)
def read_templates_route(db: Session = Depends(get_db)) -> List[RoutineTemplateBase]:
    try:
        return get_all_templates(db)
    except Exception as e:
        logger.error(f"Failed to fetch routine templates: {e}")
        raise HTTPException(status_code=500, detail="Failed to retrieve routine templates")


@router.post(
    "/routine-templates",
    response_model=CreatedResponse,
    summary="Create a routine template",
    description="Create a named template from an ordered list of task titles. Names are unique.",
    responses={
        200: {"description": "Template created successfully."},
        500: {"description": "Template creation failed (e.g. the name is taken)."},
    },
)
def create_template_route(
    template: RoutineTemplateCreate,
    db: Session = Depends(get_db),
) -> CreatedResponse:
    try:
        created = create_template(db, template)
    except Exception as e:
        db.rollback()
        logger.error(f"Failed to create routine template '{template.name}': {e}")
        raise HTTPException(status_code=500, detail="Failed to create routine template")
    return CreatedResponse(id=created.id)


@router.delete(
    "/routine-templates/{template_id}",
    response_model=SuccessResponse,
    summary="Delete a routine template",
    description="Delete a template together with all of its tasks.",
    responses={
        200: {"description": "Template deleted (no-op for unknown ids)."},
        500: {"description": "Failed to delete template."},
    },
)
def delete_template_route(template_id: int, db: Session = Depends(get_db)) -> SuccessResponse:
    try:
        delete_template(db, template_id)
    except Exception as e:
        db.rollback()
        logger.error(f"Failed to delete routine template {template_id}: {e}")
        raise HTTPException(status_code=500, detail="Failed to delete routine template")
    return SuccessResponse()


@router.post(
    "/apply-template",
    response_model=SuccessResponse,
    summary="Apply a routine template to a day",
    description="""
                Copy the template's task titles onto `date` as new tasks. Tasks already
                on that day are not deduplicated.
                """,
    responses={
        200: {"description": "Template applied successfully."},
        500: {"description": "Failed to apply template."},
    },
)
def apply_template_route(
    payload: ApplyTemplateRequest,
    db: Session = Depends(get_db),
) -> SuccessResponse:
    try:
        created = apply_template(db, payload.date, payload.template_id)
    except Exception as e:
        db.rollback()
        logger.error(f"Failed to apply routine template {payload.template_id} to {payload.date}: {e}")
        raise HTTPException(status_code=500, detail="Failed to apply routine template")
    logger.info(f"Applied routine template {payload.template_id} to {payload.date}: {len(created)} tasks")
    return SuccessResponse()
