import datetime
import logging
import math
from typing import List, Optional

from sqlalchemy.orm import Session

from aham.analysis.ai_providers.base import AIService
from aham.analysis.schemas import HistoryItem, PatternAnalysis, TrendPoint
from aham.entries.db import get_all_entries, get_entry_by_date, get_recent_entries, set_entry_image
from aham.entries.models import Entry
from aham.entries.schemas import ReflectionAnswers
from aham.tasks.db import get_completed_task_titles

logger = logging.getLogger(__name__)

# Order defines the chart score: Peaceful = 1 ... Productive = 6, unknown = 0
MOOD_SCALE = ["Peaceful", "Joyful", "Anxious", "Sad", "Angry", "Productive"]
MIN_ENTRIES_FOR_ANALYSIS = 3
DEFAULT_TREND_LIMIT = 7

_TIME_FORMATS = ("%H:%M", "%H:%M:%S")


def mood_score(mood: Optional[str]) -> int:
    """
    Maps a mood label to its position on the mood scale (1-based, 0 when unknown).
    """
    try:
        return MOOD_SCALE.index(mood) + 1
    except ValueError:
        return 0


def _parse_time(value: Optional[str]) -> Optional[datetime.datetime]:
    if not value:
        return None
    for fmt in _TIME_FORMATS:
        try:
            return datetime.datetime.strptime(value.strip(), fmt)
        except ValueError:
            continue
    return None


def sleep_hours(sleep_start: Optional[str], sleep_end: Optional[str]) -> Optional[float]:
    """
    Computes the length of a sleep window in hours, rounded half up to one decimal.

    A window whose end is earlier than its start crosses midnight.

    Args:
        sleep_start (Optional[str]): Bedtime as HH:MM.
        sleep_end (Optional[str]): Wake-up time as HH:MM.

    Returns:
        Optional[float]: Hours slept, or None if either time is missing or unparseable.
    """
    start = _parse_time(sleep_start)
    end = _parse_time(sleep_end)
    if start is None or end is None:
        return None
    if end < start:
        end += datetime.timedelta(days=1)
    seconds = (end - start).total_seconds()
    return math.floor(seconds / 360 + 0.5) / 10


def build_trends(entries: List[Entry]) -> List[TrendPoint]:
    """
    Converts entries (newest first) into chart points, oldest first.
    """
    return [
        TrendPoint(
            date=e.date,
            mood=e.mood,
            mood_score=mood_score(e.mood),
            sleep_hours=sleep_hours(e.sleep_start, e.sleep_end),
        )
        for e in reversed(entries)
    ]


def get_trends(db: Session, limit: int = DEFAULT_TREND_LIMIT) -> List[TrendPoint]:
    return build_trends(get_recent_entries(db, limit))


def build_history(entries: List[Entry]) -> List[HistoryItem]:
    return [
        HistoryItem(
            date=e.date,
            mood=e.mood,
            journal=e.journal_text,
            reflections=ReflectionAnswers.from_blob(e.reflection_json),
        )
        for e in entries
    ]


def run_pattern_analysis(db: Session, ai_service: AIService) -> PatternAnalysis:
    """
    Runs the pattern analysis over the whole entry history.

    Args:
        db (Session): SQLAlchemy session.
        ai_service (AIService): AI engine in use.

    Returns:
        PatternAnalysis: The narrative and inquiry questions, or an empty analysis
        when there is too little history or the AI call produced nothing.
    """
    entries = get_all_entries(db)
    if len(entries) < MIN_ENTRIES_FOR_ANALYSIS:
        logger.info(
            f"Skipping pattern analysis: {len(entries)} entries, {MIN_ENTRIES_FOR_ANALYSIS} required"
        )
        return PatternAnalysis()

    result = ai_service.analyze_patterns(build_history(entries))
    if result is None:
        logger.info("Pattern analysis produced no result")
        return PatternAnalysis()
    return result


def generate_entry_image(db: Session, entry_date: str, ai_service: AIService) -> Optional[str]:
    """
    Generates and stores the image of a day.

    The prompt is built from the entry's journal text and mood and the titles of
    the day's completed tasks. Days without an entry or with empty journal text
    are skipped. The session is closed before the provider is called, so no
    connection is held during generation; the image is then written through the
    entry upsert against the current row, so a failed generation never clears an
    existing image.

    Args:
        db (Session): SQLAlchemy session.
        entry_date (str): ISO date (YYYY-MM-DD).
        ai_service (AIService): AI engine in use.

    Returns:
        Optional[str]: The stored image data URL, or None if nothing was generated.
    """
    entry = get_entry_by_date(db, entry_date)
    if entry is None or not entry.journal_text:
        logger.info(f"Skipping image generation for {entry_date}: no journal text")
        return None

    summary, mood = entry.journal_text, entry.mood
    completed_tasks = get_completed_task_titles(db, entry_date)
    db.close()

    image_data = ai_service.generate_image(summary, mood, completed_tasks)
    if image_data is None:
        return None

    set_entry_image(db, entry_date, image_data)
    logger.info(f"Stored generated image for {entry_date}")
    return image_data
