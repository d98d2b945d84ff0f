import pytest

from settings import Settings, DEFAULT_FRONTEND_URL


def make(**kwargs):
    return Settings(_env_file=None, **kwargs)


@pytest.mark.parametrize(
    "frontend_url, origin",
    [
        (None, DEFAULT_FRONTEND_URL),
        (DEFAULT_FRONTEND_URL, DEFAULT_FRONTEND_URL),
        ("aiblog-frontend", "https://aiblog-frontend.onrender.com"),
        ("aiblog-frontend.onrender.com", "https://aiblog-frontend.onrender.com"),
        ("https://aiblog-frontend.onrender.com", "https://aiblog-frontend.onrender.com"),
        ("http://localhost:3000", "http://localhost:3000"),
    ],
)
def test_cors_origin_normalization(frontend_url, origin):
    assert make(FRONTEND_URL=frontend_url).cors_origin == origin


def test_database_url_for_file(tmp_path):
    path = tmp_path / "blogs.db"
    assert make(DB_PATH=str(path)).database_url == f"sqlite:///{path}"


def test_memory_database():
    s = make(DB_PATH=":memory:")
    assert s.is_memory_db
    assert s.database_url == "sqlite://"


def test_defaults(monkeypatch):
    for name in ("PORT", "GROQ_MODEL", "AI_TEMPERATURE", "AI_MAX_TOKENS"):
        monkeypatch.delenv(name, raising=False)
    s = make()
    assert s.PORT == 5000
    assert s.GROQ_MODEL == "llama-3.1-8b-instant"
    assert s.AI_TEMPERATURE == 0.8
    assert s.AI_MAX_TOKENS == 600


def test_environment_overrides(monkeypatch):
    monkeypatch.setenv("PORT", "8080")
    monkeypatch.setenv("GROQ_API_KEY", "gsk_from_env")
    s = make()
    assert s.PORT == 8080
    assert s.GROQ_API_KEY == "gsk_from_env"
