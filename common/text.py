from __future__ import annotations

import re

_FENCE_RE = re.compile(r"```json|```")


def strip_code_fences(text: str | None) -> str:
    """응답 어디에 있든 ```json / ``` 마커를 모두 제거"""
    if not text:
        return ""
    return _FENCE_RE.sub("", text).strip()
