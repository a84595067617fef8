from sqlalchemy import inspect

from aham.core.database import init_db
from aham.entries.models import Entry


def test_init_db_is_idempotent(engine, session_factory):
    with session_factory() as db:
        db.add(Entry(date="2024-01-01", journal_text="kept"))
        db.commit()

    init_db(engine)
    init_db(engine)

    with session_factory() as db:
        assert db.query(Entry).one().journal_text == "kept"


def test_schema_tables(engine):
    tables = set(inspect(engine).get_table_names())
    assert {
        "entries",
        "targets",
        "tasks",
        "routine_templates",
        "routine_template_tasks",
    } <= tables


def test_foreign_keys_enabled(engine):
    with engine.connect() as conn:
        assert conn.exec_driver_sql("PRAGMA foreign_keys").scalar() == 1
