from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import List

from pydantic import ValidationError

from common.text import strip_code_fences
from schemas.suggestion_schema import SuggestionOut
from utils.fallback_parser import line_fallback

logger = logging.getLogger(__name__)

SOURCE_JSON = "json"
SOURCE_FALLBACK = "fallback"


@dataclass(frozen=True)
class ParsedSuggestions:
    suggestions: List[str]
    source: str


def parse_json_suggestions(raw: str) -> List[str]:
    """
    1단계: 코드펜스 제거 후 {"suggestions": [str, ...]} 형태로 엄격 파싱.
    형태가 맞지 않으면 pydantic ValidationError 발생.
    """
    return SuggestionOut.model_validate_json(strip_code_fences(raw)).suggestions


def _is_json_syntax_error(e: ValidationError) -> bool:
    return any(err["type"] == "json_invalid" for err in e.errors())


def parse_suggestions(raw: str) -> ParsedSuggestions:
    """
    2단계 파싱: 엄격 JSON → JSON 문법 오류일 때만 줄 단위 fallback.
    JSON은 맞지만 형태가 다르면 원문을 노출하지 않고 빈 목록 반환.
    """
    try:
        return ParsedSuggestions(parse_json_suggestions(raw), SOURCE_JSON)
    except ValidationError as e:
        if not _is_json_syntax_error(e):
            logger.warning(f"[suggestion_parser] unexpected JSON shape: {e.error_count()} error(s)")
            return ParsedSuggestions([], SOURCE_JSON)
        logger.warning("[suggestion_parser] JSON parse failed, using line fallback")
        return ParsedSuggestions(line_fallback(raw), SOURCE_FALLBACK)
