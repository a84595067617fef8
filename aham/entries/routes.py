from typing import List, Optional
import logging

from fastapi import APIRouter, Depends, HTTPException
from sqlalchemy.orm import Session

from aham.core.database import get_db
from aham.core.dependency import get_ai_service
from aham.analysis.ai_providers.base import AIService
from aham.analysis.service import generate_entry_image
from aham.core.schemas import SuccessResponse
from aham.entries.schemas import EntryBase, EntryImageResponse, EntryUpsert
from aham.entries.db import get_all_entries, get_entry_by_date, upsert_entry

router = APIRouter(prefix="/entries", tags=["Entries"])
logger = logging.getLogger(__name__)


@router.get(
    "",
    response_model=List[EntryBase],
    summary="Get all entries",
    description="Retrieve every journal entry, newest date first.",
    responses={
        200: {"description": "Entries retrieved successfully."},
        500: {"description": "Failed to retrieve entries."},
    },
)
def get_entries_route(db: Session = Depends(get_db)) -> List[EntryBase]:
    try:
        return get_all_entries(db)
    except Exception as e:
        logger.error(f"Error fetching entries: {e}")
        raise HTTPException(status_code=500, detail="Failed to fetch entries")


@router.get(
    "/{entry_date}",
    response_model=Optional[EntryBase],
    summary="Get the entry for a day",
    description="Retrieve the journal entry saved for a calendar day, or null if there is none.",
    responses={
        200: {"description": "Entry (or null) returned successfully."},
        500: {"description": "Failed to retrieve entry."},
    },
)
def read_entry_route(entry_date: str, db: Session = Depends(get_db)) -> Optional[EntryBase]:
    try:
        return get_entry_by_date(db, entry_date)
    except Exception as e:
        logger.error(f"Error retrieving entry for {entry_date}: {e}")
        raise HTTPException(status_code=500, detail="Failed to retrieve entry")


@router.post(
    "",
    response_model=SuccessResponse,
    summary="Save the entry for a day",
    description="""
                Insert or update the entry for `date`. Every field is replaced by the
                submitted value; `image_data` is kept when the payload leaves it out.
                """,
    responses={
        200: {"description": "Entry saved successfully."},
        500: {"description": "Failed to save entry."},
    },
)
def save_entry_route(entry: EntryUpsert, db: Session = Depends(get_db)) -> SuccessResponse:
    try:
        upsert_entry(db, entry)
    except Exception as e:
        db.rollback()
        logger.error(f"Error saving entry for {entry.date}: {e}")
        raise HTTPException(status_code=500, detail="Failed to save entry")
    logger.info(f"Saved entry for {entry.date}")
    return SuccessResponse()


@router.post(
    "/{entry_date}/image",
    response_model=EntryImageResponse,
    summary="Generate the image for a day",
    description="""
                Generate an image from the day's journal text, mood and completed tasks,
                and store it on the entry. Generation failures are reported with
                `success: false` rather than an error.
                """,
    responses={
        200: {"description": "Generation attempted."},
        500: {"description": "Failed to store the generated image."},
    },
)
def generate_entry_image_route(
    entry_date: str,
    db: Session = Depends(get_db),
    ai_service: AIService = Depends(get_ai_service),
) -> EntryImageResponse:
    try:
        image_data = generate_entry_image(db, entry_date, ai_service)
    except Exception as e:
        db.rollback()
        logger.error(f"Error storing generated image for {entry_date}: {e}")
        raise HTTPException(status_code=500, detail="Failed to store generated image")
    return EntryImageResponse(success=image_data is not None, image_data=image_data)
