# fallback_parser.py
from typing import List

MIN_LINE_LENGTH = 10
MAX_SUGGESTIONS = 5


def line_fallback(raw: str, *, min_length: int = MIN_LINE_LENGTH, limit: int = MAX_SUGGESTIONS) -> List[str]:
    """JSON 파싱 실패 시: 충분히 긴 줄 하나를 제안 하나로 취급"""
    if not raw:
        return []
    lines = [line for line in raw.split("\n") if len(line.strip()) > min_length]
    return lines[:limit]
