"""Tests for `aham.analysis.ai_providers.openai` with a stubbed OpenAI client."""

import json
from types import SimpleNamespace

import pytest

from aham.analysis.ai_providers.openai import OpenAIAIService, _parse_json_content
from aham.analysis.schemas import HistoryItem
from aham.entries.schemas import ReflectionAnswers


class _StubImages:
    def __init__(self, result=None, error=None):
        self.result = result
        self.error = error
        self.calls = []

    def generate(self, **kwargs):
        self.calls.append(kwargs)
        if self.error:
            raise self.error
        return self.result


class _StubCompletions:
    def __init__(self, content=None, error=None):
        self.content = content
        self.error = error
        self.calls = []

    def create(self, **kwargs):
        self.calls.append(kwargs)
        if self.error:
            raise self.error
        message = SimpleNamespace(content=self.content)
        return SimpleNamespace(choices=[SimpleNamespace(message=message)])


def _client(images=None, completions=None):
    return SimpleNamespace(
        images=images or _StubImages(),
        chat=SimpleNamespace(completions=completions or _StubCompletions()),
    )


def _service(client, **kwargs):
    return OpenAIAIService(client, chat_model="test-chat", image_model=kwargs.get("image_model", "gpt-image-1"))


def test_generate_image_returns_data_url():
    images = _StubImages(result=SimpleNamespace(data=[SimpleNamespace(b64_json="QUJD")]))
    service = _service(_client(images=images))

    result = service.generate_image("A calm day", "Peaceful", ["Walk", "Read"])

    assert result == "data:image/png;base64,QUJD"
    call = images.calls[0]
    assert call["model"] == "gpt-image-1"
    assert "response_format" not in call
    assert "A calm day" in call["prompt"]
    assert "The overall mood was Peaceful." in call["prompt"]
    assert "Completed tasks: Walk, Read." in call["prompt"]


def test_generate_image_requests_base64_from_dall_e():
    images = _StubImages(result=SimpleNamespace(data=[SimpleNamespace(b64_json="QUJD")]))
    service = _service(_client(images=images), image_model="dall-e-3")

    service.generate_image("A day", None, [])

    assert images.calls[0]["response_format"] == "b64_json"
    assert "overall mood" not in images.calls[0]["prompt"]
    assert "Completed tasks" not in images.calls[0]["prompt"]


def test_generate_image_failure_returns_none_after_one_attempt():
    images = _StubImages(error=RuntimeError("provider down"))
    service = _service(_client(images=images))

    assert service.generate_image("A day", "Sad", []) is None
    assert len(images.calls) == 1


def test_generate_image_without_payload_returns_none():
    images = _StubImages(result=SimpleNamespace(data=[SimpleNamespace(b64_json=None)]))
    assert _service(_client(images=images)).generate_image("A day", "Sad", []) is None


def _history():
    return [
        HistoryItem(
            date="2024-01-01",
            mood="Anxious",
            journal="Deadlines again.",
            reflections=ReflectionAnswers(worries="work", body_needs="rest"),
        )
    ]


def test_analyze_patterns_parses_response():
    content = json.dumps(
        {"analysis": " Work stress repeats. ", "inquiryQuestions": ["Why now?", " ", "What is enough?"]}
    )
    completions = _StubCompletions(content=content)
    service = _service(_client(completions=completions))

    result = service.analyze_patterns(_history())

    assert result.analysis == "Work stress repeats."
    assert result.inquiry_questions == ["Why now?", "What is enough?"]
    call = completions.calls[0]
    assert call["model"] == "test-chat"
    assert call["response_format"]["type"] == "json_schema"
    assert '"bodyNeeds": "rest"' in call["messages"][1]["content"]


def test_analyze_patterns_accepts_fenced_json():
    content = '```json\n{"analysis": "ok", "inquiryQuestions": ["Q?"]}\n```'
    service = _service(_client(completions=_StubCompletions(content=content)))

    assert service.analyze_patterns(_history()).inquiry_questions == ["Q?"]


@pytest.mark.parametrize(
    "content, error",
    [
        ("not json at all", None),
        ('{"analysis": "missing questions"}', None),
        (None, None),
        (None, RuntimeError("timeout")),
    ],
)
def test_analyze_patterns_failures_return_none(content, error):
    completions = _StubCompletions(content=content, error=error)
    service = _service(_client(completions=completions))

    assert service.analyze_patterns(_history()) is None
    assert len(completions.calls) == 1


def test_parse_json_content_rejects_empty():
    with pytest.raises(ValueError):
        _parse_json_content("")


def test_missing_api_key_returns_no_result(monkeypatch):
    monkeypatch.setattr("aham.analysis.ai_providers.openai.OPENAI_API_KEY", None)
    service = OpenAIAIService()

    assert service.client is None
    assert service.generate_image("A day", "Sad", []) is None
    assert service.analyze_patterns(_history()) is None
