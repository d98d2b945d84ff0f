from db import Base  # 같은 Base 공유

# 등록용 임포트
from .blog import Blog

__all__ = [
    "Base",
    "Blog",
]
