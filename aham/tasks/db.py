from typing import Iterable, List

from sqlalchemy.orm import Session
from aham.tasks.models import Task
from aham.tasks.schemas import TaskCreate


def get_tasks_by_date(db: Session, task_date: str) -> List[Task]:
    """
    Retrieves the checklist of a calendar day in insertion order.

    Args:
        db (Session): SQLAlchemy session.
        task_date (str): ISO date (YYYY-MM-DD).

    Returns:
        List[Task]: Tasks of that day.
    """
    return (
        db.query(Task)
        .filter(Task.date == task_date)
        .order_by(Task.id)
        .all()
    )


def get_completed_task_titles(db: Session, task_date: str) -> List[str]:
    return [t.title for t in get_tasks_by_date(db, task_date) if t.completed and t.title]


def create_task(db: Session, task: TaskCreate) -> Task:
    """
    Creates a new, uncompleted task.

    Args:
        db (Session): SQLAlchemy session.
        task (TaskCreate): Date and title of the task.

    Returns:
        Task: The created task.
    """
    new_task = Task(date=task.date, title=task.title, completed=False)
    db.add(new_task)
    db.commit()
    db.refresh(new_task)
    return new_task


def add_tasks(db: Session, task_date: str, titles: Iterable[str]) -> List[Task]:
    """
    Stages one new task per title without committing, so callers can make the
    whole batch part of their own transaction.
    """
    new_tasks = [Task(date=task_date, title=title, completed=False) for title in titles]
    db.add_all(new_tasks)
    return new_tasks


def set_task_completed(db: Session, task_id: int, completed: bool) -> int:
    """
    Sets the completion flag of a task, leaving every other field alone.

    Returns:
        int: Number of rows affected (0 for an unknown id).
    """
    updated = (
        db.query(Task)
        .filter(Task.id == task_id)
        .update({Task.completed: bool(completed)}, synchronize_session=False)
    )
    db.commit()
    return updated


def delete_task(db: Session, task_id: int) -> int:
    """
    Deletes a task by ID.

    Returns:
        int: Number of rows deleted (0 for an unknown id).
    """
    deleted = (
        db.query(Task)
        .filter(Task.id == task_id)
        .delete(synchronize_session=False)
    )
    db.commit()
    return deleted
