from typing import Optional

from fastapi import APIRouter, Depends, HTTPException, Request

from common.llm import CompletionClient, CompletionError
from schemas.suggestion_schema import SuggestionRequest, SuggestionOut
from services.suggestion_service import SuggestionService

router = APIRouter()


def get_completion_client(request: Request) -> CompletionClient:
    return request.app.state.completion_client


def get_suggestion_service(client: CompletionClient = Depends(get_completion_client)) -> SuggestionService:
    return SuggestionService(client)


# 작성 중인 글에 대한 AI 제안
@router.post("/ai-suggestions", response_model=SuggestionOut)
def get_ai_suggestions(
    body: Optional[SuggestionRequest] = None,
    suggestion_service: SuggestionService = Depends(get_suggestion_service),
):
    body = body or SuggestionRequest()
    if not body.title and not body.content:
        raise HTTPException(status_code=400, detail="Title or content is required")
    try:
        suggestions = suggestion_service.get_suggestions(body.title, body.content)
    except CompletionError as e:
        raise HTTPException(status_code=500, detail=f"AI suggestion failed: {e}")
    return SuggestionOut(suggestions=suggestions)
