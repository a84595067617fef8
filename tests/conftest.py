from typing import Callable, List, Optional

import pytest
from fastapi.testclient import TestClient
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool

from aham.analysis.ai_providers.base import AIService
from aham.analysis.schemas import HistoryItem, PatternAnalysis
from aham.core.database import Base, create_db_engine, get_db, init_db
from aham.core.dependency import get_ai_service
from main import app


class FakeAIService(AIService):
    """Records calls and returns canned results."""

    model_tag = "fake"

    def __init__(self):
        self.image_result: Optional[str] = "data:image/png;base64,ZmFrZQ=="
        self.analysis_result: Optional[PatternAnalysis] = PatternAnalysis(
            analysis="You write about rest when you are tired.",
            inquiry_questions=["What does rest mean to you?", "Who taught you to keep going?"],
        )
        self.image_calls: List[dict] = []
        self.on_generate_image: Optional[Callable[[], None]] = None
        self.analysis_calls: List[List[HistoryItem]] = []

    def generate_image(self, summary, mood, completed_tasks):
        self.image_calls.append(
            {"summary": summary, "mood": mood, "completed_tasks": list(completed_tasks)}
        )
        if self.on_generate_image is not None:
            self.on_generate_image()
        return self.image_result

    def analyze_patterns(self, history):
        self.analysis_calls.append(list(history))
        return self.analysis_result


@pytest.fixture()
def engine():
    test_engine = create_db_engine("sqlite://", poolclass=StaticPool)
    init_db(test_engine)
    yield test_engine
    Base.metadata.drop_all(bind=test_engine)
    test_engine.dispose()


@pytest.fixture()
def session_factory(engine):
    return sessionmaker(autocommit=False, autoflush=False, expire_on_commit=False, bind=engine)


@pytest.fixture()
def fake_ai():
    return FakeAIService()


@pytest.fixture()
def client(session_factory, fake_ai):
    def _get_test_db():
        db = session_factory()
        try:
            yield db
        finally:
            db.close()

    app.dependency_overrides[get_db] = _get_test_db
    app.dependency_overrides[get_ai_service] = lambda: fake_ai
    yield TestClient(app)
    app.dependency_overrides.clear()
