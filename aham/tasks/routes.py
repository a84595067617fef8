from typing import List
import logging

from fastapi import APIRouter, Depends, HTTPException
from sqlalchemy.orm import Session

from aham.core.database import get_db
from aham.core.schemas import CompletionUpdate, CreatedResponse, SuccessResponse
from aham.tasks.schemas import TaskBase, TaskCreate
from aham.tasks.db import (
    create_task,
    delete_task,
    get_tasks_by_date,
    set_task_completed,
)

router = APIRouter(prefix="/tasks", tags=["Tasks"])
logger = logging.getLogger(__name__)


@router.get(
    "/{task_date}",
    response_model=List[TaskBase],
    summary="Get the tasks of a day",
    responses={
        200: {"description": "Tasks retrieved successfully."},
        500: {"description": "Failed to retrieve tasks."},
    },
)
def read_tasks_route(task_date: str, db: Session = Depends(get_db)) -> List[TaskBase]:
    try:
        return get_tasks_by_date(db, task_date)
    except Exception as e:
        logger.error(f"Failed to fetch tasks for {task_date}: {e}")
        raise HTTPException(status_code=500, detail="Failed to retrieve tasks")


@router.post(
    "",
    response_model=CreatedResponse,
    summary="Add a task to a day",
    responses={
        200: {"description": "Task created successfully."},
        500: {"description": "Task creation failed."},
    },
)
def create_task_route(task: TaskCreate, db: Session = Depends(get_db)) -> CreatedResponse:
    try:
        created = create_task(db, task)
    except Exception as e:
        db.rollback()
        logger.error(f"Failed to create task for {task.date}: {e}")
        raise HTTPException(status_code=500, detail="Failed to create task")
    return CreatedResponse(id=created.id)


@router.patch(
    "/{task_id}",
    response_model=SuccessResponse,
    summary="Mark a task completed or not",
    responses={
        200: {"description": "Task updated (no-op for unknown ids)."},
        500: {"description": "Failed to update task."},
    },
)
def update_task_route(
    task_id: int,
    update: CompletionUpdate,
    db: Session = Depends(get_db),
) -> SuccessResponse:
    try:
        set_task_completed(db, task_id, update.completed)
    except Exception as e:
        db.rollback()
        logger.error(f"Failed to update task {task_id}: {e}")
        raise HTTPException(status_code=500, detail="Failed to update task")
    return SuccessResponse()


@router.delete(
    "/{task_id}",
    response_model=SuccessResponse,
    summary="Delete a task",
    responses={
        200: {"description": "Task deleted (no-op for unknown ids)."},
        500: {"description": "Failed to delete task."},
    },
)
def delete_task_route(task_id: int, db: Session = Depends(get_db)) -> SuccessResponse:
    try:
        delete_task(db, task_id)
    except Exception as e:
        db.rollback()
        logger.error(f"Failed to delete task {task_id}: {e}")
        raise HTTPException(status_code=500, detail="Failed to delete task")
    return SuccessResponse()
