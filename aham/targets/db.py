from typing import List

from sqlalchemy.orm import Session
from aham.targets.models import Target
from aham.targets.schemas import TargetCreate


def get_targets_by_period(db: Session, period_key: str) -> List[Target]:
    """
    Retrieves every target of a period, whatever its type.

    Args:
        db (Session): SQLAlchemy session.
        period_key (str): Opaque period key supplied by the caller.

    Returns:
        List[Target]: Targets in insertion order.
    """
    return (
        db.query(Target)
        .filter(Target.period_key == period_key)
        .order_by(Target.id)
        .all()
    )


def create_target(db: Session, target: TargetCreate) -> Target:
    """
    Creates a new, uncompleted target.

    Args:
        db (Session): SQLAlchemy session.
        target (TargetCreate): Input data for the target.

    Returns:
        Target: The created target.
    """
    new_target = Target(
        type=target.type,
        title=target.title,
        period_key=target.period_key,
        completed=False,
    )
    db.add(new_target)
    db.commit()
    db.refresh(new_target)
    return new_target


def set_target_completed(db: Session, target_id: int, completed: bool) -> int:
    """
    Sets the completion flag of a target, leaving every other field alone.

    Returns:
        int: Number of rows affected (0 for an unknown id).
    """
    updated = (
        db.query(Target)
        .filter(Target.id == target_id)
        .update({Target.completed: bool(completed)}, synchronize_session=False)
    )
    db.commit()
    return updated


def delete_target(db: Session, target_id: int) -> int:
    """
    Deletes a target by ID.

    Returns:
        int: Number of rows deleted (0 for an unknown id).
    """
    deleted = (
        db.query(Target)
        .filter(Target.id == target_id)
        .delete(synchronize_session=False)
    )
    db.commit()
    return deleted
