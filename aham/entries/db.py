from typing import List, Optional

from sqlalchemy.orm import Session
from aham.entries.models import Entry
from aham.entries.schemas import EntryUpsert, ReflectionAnswers


# Helper
def normalize_reflection(blob: Optional[str]) -> Optional[str]:
    """
    Re-encodes a reflection blob through the typed record before it is stored.

    Args:
        blob (Optional[str]): Serialized reflection answers from the client.

    Returns:
        Optional[str]: Canonical JSON, or None when no blob was supplied.
    """
    if blob is None:
        return None
    return ReflectionAnswers.from_blob(blob).to_blob()


# Entry CRUD
def get_entry_by_date(db: Session, entry_date: str) -> Optional[Entry]:
    """
    Retrieves the entry for a calendar day.

    Args:
        db (Session): SQLAlchemy session.
        entry_date (str): ISO date (YYYY-MM-DD).

    Returns:
        Optional[Entry]: The entry if one was saved for that day, else None.
    """
    return db.query(Entry).filter(Entry.date == entry_date).first()


def get_all_entries(db: Session) -> List[Entry]:
    """
    Retrieves every entry, newest date first.
    """
    return db.query(Entry).order_by(Entry.date.desc()).all()


def get_recent_entries(db: Session, limit: int) -> List[Entry]:
    return db.query(Entry).order_by(Entry.date.desc()).limit(limit).all()


def upsert_entry(db: Session, data: EntryUpsert) -> Entry:
    """
    Inserts or updates the entry for `data.date`.

    Every field is overwritten with the incoming value, absent fields included.
    The image is the exception: it is only replaced when a new one is supplied.

    Args:
        db (Session): SQLAlchemy session.
        data (EntryUpsert): Incoming entry payload.

    Returns:
        Entry: The persisted entry.
    """
    existing = get_entry_by_date(db, data.date)
    if existing is None:
        existing = Entry(date=data.date)
        db.add(existing)

    existing.journal_text = data.journal_text
    existing.mood = data.mood
    existing.sleep_start = data.sleep_start
    existing.sleep_end = data.sleep_end
    existing.reflection_json = normalize_reflection(data.reflection_json)
    if data.image_data is not None:
        existing.image_data = data.image_data

    db.commit()
    db.refresh(existing)
    return existing


def set_entry_image(db: Session, entry_date: str, image_data: str) -> Entry:
    """
    Stores a generated image on the entry of a day through the regular upsert,
    keeping every other field as it is currently stored.
    """
    entry = get_entry_by_date(db, entry_date)
    if entry is None:
        return upsert_entry(db, EntryUpsert(date=entry_date, image_data=image_data))
    payload = EntryUpsert(
        date=entry.date,
        journal_text=entry.journal_text,
        mood=entry.mood,
        sleep_start=entry.sleep_start,
        sleep_end=entry.sleep_end,
        reflection_json=entry.reflection_json,
        image_data=image_data,
    )
    return upsert_entry(db, payload)
