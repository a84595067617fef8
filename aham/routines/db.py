from typing import List

from sqlalchemy.orm import Session, selectinload
from aham.routines.models import RoutineTemplate, RoutineTemplateTask
from aham.routines.schemas import RoutineTemplateCreate
from aham.tasks.db import add_tasks
from aham.tasks.models import Task


def get_all_templates(db: Session) -> List[RoutineTemplate]:
    """
    Retrieves every routine template together with its tasks.

    Args:
        db (Session): SQLAlchemy session.

    Returns:
        List[RoutineTemplate]: Templates in insertion order, tasks loaded.
    """
    return (
        db.query(RoutineTemplate)
        .options(selectinload(RoutineTemplate.tasks))
        .order_by(RoutineTemplate.id)
        .all()
    )


def get_template_task_titles(db: Session, template_id: int) -> List[str]:
    rows = (
        db.query(RoutineTemplateTask.title)
        .filter(RoutineTemplateTask.template_id == template_id)
        .order_by(RoutineTemplateTask.id)
        .all()
    )
    return [title for (title,) in rows]


def create_template(db: Session, template: RoutineTemplateCreate) -> RoutineTemplate:
    """
    Creates a template and its task titles in a single transaction.

    A duplicate name raises an IntegrityError and nothing is written.

    Args:
        db (Session): SQLAlchemy session.
        template (RoutineTemplateCreate): Name and ordered task titles.

    Returns:
        RoutineTemplate: The created template.
    """
    new_template = RoutineTemplate(
        name=template.name,
        tasks=[RoutineTemplateTask(title=title) for title in template.tasks],
    )
    db.add(new_template)
    db.commit()
    db.refresh(new_template)
    return new_template


def delete_template(db: Session, template_id: int) -> bool:
    """
    Deletes a template and, in the same transaction, all of its tasks.

    Returns:
        bool: True if a template was deleted.
    """
    template = db.get(RoutineTemplate, template_id)
    if template is None:
        return False
    db.delete(template)
    db.commit()
    return True


def apply_template(db: Session, task_date: str, template_id: int) -> List[Task]:
    """
    Copies the template's task titles onto a day as new, uncompleted tasks.

    Existing tasks of that day are not checked, so applying the same template
    twice yields duplicates. The template itself is left untouched.

    Args:
        db (Session): SQLAlchemy session.
        task_date (str): ISO date (YYYY-MM-DD) receiving the tasks.
        template_id (int): Template to copy from. Unknown ids copy nothing.

    Returns:
        List[Task]: The tasks created.
    """
    titles = get_template_task_titles(db, template_id)
    new_tasks = add_tasks(db, task_date, titles)
    db.commit()
    return new_tasks
