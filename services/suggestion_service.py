import logging
from typing import List, Optional

from common.llm import CompletionClient
from utils.suggestion_parser import parse_suggestions

logger = logging.getLogger(__name__)

PROMPT_TEMPLATE = """You are a creative blog writing assistant. Based on the blog post below, generate exactly 5 helpful suggestions.

Title: "{title}"
Content: "{content}"

Please provide the suggestions in the following JSON format. Make sure all strings are properly escaped.
{{
  "suggestions": [
    "Related topic: [Your suggestion here]",
    "Related topic: [Your suggestion here]",
    "Intro paragraph: [Your suggestion here]",
    "SEO tip: [Your suggestion here without quotes]",
    "Content idea: [Your suggestion here]"
  ]
}}

Return ONLY valid JSON, nothing else. Do not use nested quotes inside the suggestions string values."""


def build_prompt(title: Optional[str], content: Optional[str]) -> str:
    return PROMPT_TEMPLATE.format(
        title=title or "Untitled",
        content=content or "No content yet",
    )


class SuggestionService:

    def __init__(self, client: CompletionClient):
        self.client = client

    def get_suggestions(self, title: Optional[str], content: Optional[str]) -> List[str]:
        logger.info("[SuggestionService] Method : get_suggestions")
        raw = self.client.complete(build_prompt(title, content))
        parsed = parse_suggestions(raw)
        logger.info(f"[SuggestionService] {len(parsed.suggestions)} suggestion(s) via {parsed.source}")
        return parsed.suggestions
