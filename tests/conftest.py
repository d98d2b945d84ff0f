from typing import List

import pytest
from fastapi.testclient import TestClient

from common.llm import CompletionClient, CompletionError
from main import create_app
from settings import Settings


class FakeCompletionClient(CompletionClient):
    """Records prompts and replays a canned reply instead of calling Groq."""

    def __init__(self, reply: str = '{"suggestions": []}', error: Exception = None):
        super().__init__("gsk_test", base_url="http://groq.invalid", model="test-model")
        self.reply = reply
        self.error = error
        self.prompts: List[str] = []

    def complete(self, prompt: str, *, json_mode: bool = True) -> str:
        self.prompts.append(prompt)
        if self.error is not None:
            raise self.error
        return self.reply


@pytest.fixture
def app_settings(tmp_path):
    return Settings(
        _env_file=None,
        DB_PATH=str(tmp_path / "blogs.db"),
        GROQ_API_KEY="gsk_" + "x" * 52,
        FRONTEND_URL="http://localhost:5173",
    )


@pytest.fixture
def completion():
    return FakeCompletionClient()


@pytest.fixture
def client(app_settings, completion):
    app = create_app(app_settings, completion_client=completion)
    with TestClient(app) as c:
        yield c


@pytest.fixture
def make_blog(client):
    def _make(title="Hello", content="World", author="Amy"):
        res = client.post("/api/blogs", json={"title": title, "content": content, "author": author})
        assert res.status_code == 201, res.text
        return res.json()["postId"]
    return _make


@pytest.fixture
def failing_completion():
    return FakeCompletionClient(error=CompletionError("upstream exploded"))
