from __future__ import annotations

import json
import logging
from typing import Any, List, Optional

from openai import OpenAI

from aham.analysis.ai_providers.base import AIService
from aham.analysis.schemas import HistoryItem, PatternAnalysis, PatternLLMResponse
from aham.core.config import OPENAI_API_KEY, OPENAI_CHAT_MODEL, OPENAI_IMAGE_MODEL
import aham.analysis.prompts.openai_prompts_templates as prompts

logger = logging.getLogger(__name__)

IMAGE_SIZE = "1024x1024"

PATTERN_JSON_SCHEMA: dict[str, Any] = {
    "name": "pattern_analysis",
    "schema": {
        "type": "object",
        "properties": {
            "analysis": {"type": "string"},
            "inquiryQuestions": {
                "type": "array",
                "items": {"type": "string"}
            }
        },
        "required": ["analysis", "inquiryQuestions"],
        "additionalProperties": False
    }
}


def _parse_json_content(raw: Optional[str]) -> Any:
    """Parse JSON from a completion, tolerating code fences and surrounding prose."""
    if not raw:
        raise ValueError("Empty content")
    s = raw.strip()
    try:
        return json.loads(s)
    except json.JSONDecodeError:
        pass
    if s.startswith("```"):
        s = s.strip("`\n ")
    start = s.find("{")
    end = s.rfind("}")
    if start != -1 and end != -1 and end > start:
        return json.loads(s[start : end + 1])
    return json.loads(s)


class OpenAIAIService(AIService):
    """Facade around OpenAI endpoints that speaks Pydantic schemas."""

    model_tag = "chatgpt"

    def __init__(
        self,
        client: Optional[OpenAI] = None,
        *,
        chat_model: str = OPENAI_CHAT_MODEL,
        image_model: str = OPENAI_IMAGE_MODEL,
    ):
        if client is None and OPENAI_API_KEY:
            client = OpenAI(api_key=OPENAI_API_KEY)
        if client is None:
            logger.warning("Missing OPENAI_API_KEY in environment; AI features will return no result")
        self.client = client
        self.chat_model = chat_model
        self.image_model = image_model

    def _chat_json(
        self, messages: List[dict[str, Any]], *, max_tokens: int = 1024, response_format_schema: Optional[dict[str, Any]] = None
    ) -> Any:
        """Run a single chat completion and parse JSON from the first choice."""
        kwargs: dict[str, Any] = {
            "model": self.chat_model,
            "messages": messages,
            "max_tokens": max_tokens,
            "temperature": 0.7,
        }
        if response_format_schema is not None:
            kwargs["response_format"] = {"type": "json_schema", "json_schema": response_format_schema}
        else:
            kwargs["response_format"] = {"type": "json_object"}

        resp = self.client.chat.completions.create(**kwargs)
        return _parse_json_content(resp.choices[0].message.content)

    # 1. Daily image
    def generate_image(self, summary: str, mood: Optional[str], completed_tasks: List[str]) -> Optional[str]:
        if self.client is None:
            return None

        prompt = prompts.IMAGE_PROMPT.format(
            summary=summary,
            mood_context=f"The overall mood was {mood}." if mood else "",
            task_context=f"Completed tasks: {', '.join(completed_tasks)}." if completed_tasks else "",
        )
        kwargs: dict[str, Any] = {
            "model": self.image_model,
            "prompt": prompt,
            "size": IMAGE_SIZE,
            "n": 1,
        }
        if self.image_model.startswith("dall-e"):
            kwargs["response_format"] = "b64_json"

        try:
            resp = self.client.images.generate(**kwargs)
        except Exception as e:
            logger.warning(f"Image generation failed: {e}")
            return None

        for image in resp.data or []:
            if image.b64_json:
                return f"data:image/png;base64,{image.b64_json}"

        logger.warning("Image generation returned no image payload")
        return None

    # 2. Pattern analysis
    def analyze_patterns(self, history: List[HistoryItem]) -> Optional[PatternAnalysis]:
        if self.client is None:
            return None

        history_json = json.dumps(
            [h.model_dump(by_alias=True) for h in history], ensure_ascii=False
        )
        messages = [
            {"role": "system", "content": prompts.PATTERN_SYSTEM_PROMPT},
            {"role": "user", "content": prompts.PATTERN_PROMPT.format(history=history_json)},
        ]

        try:
            raw_obj = self._chat_json(messages, response_format_schema=PATTERN_JSON_SCHEMA)
            raw = PatternLLMResponse(**raw_obj)
        except Exception as e:
            logger.warning(f"Pattern analysis failed: {e}")
            return None

        return PatternAnalysis(
            analysis=raw.analysis.strip(),
            inquiry_questions=[q.strip() for q in raw.inquiryQuestions if q and q.strip()],
        )
