from __future__ import annotations

import logging
from typing import Any, Dict, Optional

from openai import OpenAI, OpenAIError

from settings import Settings

logger = logging.getLogger(__name__)

PLACEHOLDER_KEY_TEXT = "Your Groq API Key"


class CompletionError(RuntimeError):
    """Completion 서비스 호출 실패 (키 누락, SDK/네트워크 오류 포함)"""


# ──────────────────────────────────────────────────────────────
# 응답 텍스트 추출 유틸
# ──────────────────────────────────────────────────────────────
def to_text(resp: Any, default: str = "{}") -> str:
    """chat.completions 응답에서 첫 번째 message.content를 꺼냅니다."""
    try:
        content = resp.choices[0].message.content
    except (AttributeError, IndexError, TypeError):
        return default
    return content or default


class CompletionClient:
    """
    Groq의 OpenAI 호환 엔드포인트를 openai SDK로 호출하는 얇은 래퍼.
    SDK 클라이언트는 첫 호출 시점에 생성하므로 키 없이도 앱은 기동됩니다.
    """

    def __init__(
        self,
        api_key: Optional[str],
        *,
        base_url: str,
        model: str,
        temperature: float = 0.8,
        max_tokens: int = 600,
    ) -> None:
        self.api_key = api_key
        self.base_url = base_url
        self.model = model
        self.temperature = temperature
        self.max_tokens = max_tokens
        self._client: Optional[OpenAI] = None

    @classmethod
    def from_settings(cls, app_settings: Settings) -> "CompletionClient":
        if not app_settings.GROQ_API_KEY:
            logger.error("[CompletionClient] GROQ_API_KEY is not defined in the environment.")
        return cls(
            app_settings.GROQ_API_KEY,
            base_url=app_settings.GROQ_BASE_URL,
            model=app_settings.GROQ_MODEL,
            temperature=app_settings.AI_TEMPERATURE,
            max_tokens=app_settings.AI_MAX_TOKENS,
        )

    @property
    def client(self) -> OpenAI:
        if not self.api_key:
            raise CompletionError("GROQ_API_KEY is not configured")
        if self._client is None:
            self._client = OpenAI(base_url=self.base_url, api_key=self.api_key)
        return self._client

    def complete(self, prompt: str, *, json_mode: bool = True) -> str:
        """단일 user 메시지로 completion 요청 후 텍스트 반환 (재시도 없음)"""
        kwargs: Dict[str, Any] = {
            "model": self.model,
            "messages": [{"role": "user", "content": prompt}],
            "temperature": self.temperature,
            "max_tokens": self.max_tokens,
        }
        if json_mode:
            kwargs["response_format"] = {"type": "json_object"}

        try:
            resp = self.client.chat.completions.create(**kwargs)
        except OpenAIError as e:
            logger.error(f"[CompletionClient] Groq API error: {e}")
            raise CompletionError(str(e)) from e
        return to_text(resp)


def describe_api_key(key: Optional[str]) -> Dict[str, Any]:
    """키 값 자체는 노출하지 않고 설정 여부/형태만 보고"""
    is_set = bool(key)
    return {
        "isSet": is_set,
        "startsWithGsk": is_set and key.startswith("gsk_"),
        "length": len(key) if is_set else 0,
        "isPlaceholder": is_set and PLACEHOLDER_KEY_TEXT in key,
    }
