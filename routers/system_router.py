from fastapi import APIRouter, Request

from common.llm import describe_api_key
from schemas.suggestion_schema import ApiKeyStatus

router = APIRouter()


@router.get("/health")
def health_check():
    return {"status": "OK", "message": "Blog API running"}


# 진단용: 키 값은 노출하지 않음
@router.get("/debug-groq", response_model=ApiKeyStatus)
def debug_groq(request: Request):
    return describe_api_key(request.app.state.settings.GROQ_API_KEY)
