"""HTTP client for the Gemini generateContent endpoint."""

from __future__ import annotations

import json
import logging
from typing import Any, Optional, Sequence

import httpx

from ...config import settings
from ...models.domain import School

logger = logging.getLogger(__name__)

MISSING_KEY_MESSAGE = "عذراً، خدمة المساعد الذكي غير متوفرة حالياً (API Key missing)."
EMPTY_ANSWER_MESSAGE = "عذراً، لم أستطع تحليل البيانات في الوقت الحالي."
ERROR_MESSAGE = "حدث خطأ أثناء الاتصال بالمساعد الذكي."

PROMPT_TEMPLATE = """
أنت مساعد ذكي لتطبيق "دليل مدارس ظفار".
لديك قائمة بالمدارس التالية (بيانات JSON):
{context}

المستخدم يسأل: "{question}"

بناءً على البيانات أعلاه، أجب على المستخدم باللغة العربية.
- كن مفيداً ومختصراً.
- إذا سأل عن مدرسة غير موجودة، قل أنك لا تملك معلومات عنها في قاعدة البيانات الحالية.
"""


def build_context(schools: Sequence[School]) -> list[dict]:
    """Compact per-school attributes sent to the model."""

    return [
        {
            "name": school.name,
            "type": school.category.value,
            "region": school.region.value,
            "wilayat": school.wilayat.value,
            "grades": school.grades,
            "gender": school.gender.value,
            "hasContact": school.has_contact,
        }
        for school in schools
    ]


def build_prompt(question: str, schools: Sequence[School]) -> str:
    context = json.dumps(build_context(schools), ensure_ascii=False)
    return PROMPT_TEMPLATE.format(context=context, question=question)


def extract_text(payload: Any) -> str:
    """Join the text parts of the first candidate; empty when there is none.

    Raises ValueError when the payload does not have the generateContent shape.
    """

    if not isinstance(payload, dict):
        raise ValueError("Gemini response is not a JSON object.")
    candidates = payload.get("candidates")
    if not candidates:
        return ""
    if not isinstance(candidates, list) or not isinstance(candidates[0], dict):
        raise ValueError("Gemini response has malformed candidates.")

    content = candidates[0].get("content")
    if content is None:
        return ""
    if not isinstance(content, dict):
        raise ValueError("Gemini candidate content is not an object.")
    parts = content.get("parts") or []
    if not isinstance(parts, list):
        raise ValueError("Gemini candidate parts is not a list.")

    texts = []
    for part in parts:
        text = part.get("text", "") if isinstance(part, dict) else None
        if not isinstance(text, str):
            raise ValueError("Gemini candidate part has no text.")
        texts.append(text)
    return "".join(texts).strip()


class GeminiClient:
    def __init__(
        self,
        api_key: str | None = None,
        model: str | None = None,
        base_url: str | None = None,
        timeout: float | None = None,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        self.api_key = api_key or settings.gemini_api_key
        if not self.api_key:
            raise ValueError("Gemini API key is not configured.")
        self.model = model or settings.gemini_model
        self.base_url = (base_url or settings.gemini_base_url).rstrip("/")
        self.timeout = timeout if timeout is not None else settings.advisor_timeout_seconds
        self._transport = transport

    def _get_client(self) -> httpx.AsyncClient:
        return httpx.AsyncClient(timeout=httpx.Timeout(self.timeout), transport=self._transport)

    async def generate(self, prompt: str) -> str:
        url = f"{self.base_url}/models/{self.model}:generateContent"
        body = {"contents": [{"parts": [{"text": prompt}]}]}
        async with self._get_client() as client:
            response = await client.post(url, json=body, headers={"x-goog-api-key": self.api_key})
            response.raise_for_status()
            return extract_text(response.json())


async def ask_advisor(
    question: str,
    schools: Sequence[School],
    client: Optional[GeminiClient] = None,
) -> str:
    """Answer a free-text question about ``schools``; falls back to a fixed message on failure."""

    if client is None:
        if not settings.gemini_api_key:
            logger.warning("Advisor requested but no Gemini API key is configured")
            return MISSING_KEY_MESSAGE
        client = GeminiClient()

    try:
        answer = await client.generate(build_prompt(question, schools))
    except (httpx.HTTPError, ValueError) as exc:
        logger.error(f"Gemini request failed: {exc}")
        return ERROR_MESSAGE

    return answer or EMPTY_ANSWER_MESSAGE


def is_configured() -> bool:
    return bool(settings.gemini_api_key)
