from datetime import timedelta

import pytest

from db import Base, build_engine, build_session_factory, create_tables
from schemas.blog_schema import BlogCreate, BlogUpdate
from services.blog_service import BlogService
from settings import Settings


@pytest.fixture
def db():
    engine = build_engine(Settings(_env_file=None, DB_PATH=":memory:"))
    create_tables(engine)
    session = build_session_factory(engine)()
    try:
        yield session
    finally:
        session.close()
        engine.dispose()


@pytest.fixture
def service():
    return BlogService()


def test_memory_database_keeps_rows_across_sessions(service):
    engine = build_engine(Settings(_env_file=None, DB_PATH=":memory:"))
    create_tables(engine)
    factory = build_session_factory(engine)

    with factory() as first:
        blog_id = service.create_blog(BlogCreate(title="t", content="c", author="a"), first).id
    with factory() as second:
        assert service.get_blog_by_id(blog_id, second).title == "t"
    engine.dispose()


def test_create_sets_equal_timestamps(db, service):
    blog = service.create_blog(BlogCreate(title="t", content="c", author="a"), db)
    assert blog.id == 1
    assert blog.created_at == blog.updated_at


def test_update_unknown_returns_none(db, service):
    assert service.update_blog(7, BlogUpdate(title="x"), db) is None


def test_update_never_moves_updated_at_backwards(db, service):
    blog = service.create_blog(BlogCreate(title="t", content="c", author="a"), db)
    created_at = blog.created_at
    # 시계가 앞서 있는 것처럼 updated_at을 미래로 밀어둔다
    blog.updated_at = created_at + timedelta(days=365)
    db.commit()
    future = blog.updated_at

    updated = service.update_blog(blog.id, BlogUpdate(author="b"), db)

    assert updated.updated_at > future
    assert updated.created_at == created_at
    assert updated.author == "b"


def test_delete_returns_id_then_none(db, service):
    blog = service.create_blog(BlogCreate(title="t", content="c", author="a"), db)
    assert service.delete_blog(blog.id, db) == blog.id
    assert service.delete_blog(blog.id, db) is None
    assert service.get_blogs(db) == []


def test_storage_error_is_reported_as_500(client):
    engine = client.app.state.session_factory.kw["bind"]
    Base.metadata.drop_all(bind=engine)

    res = client.get("/api/blogs")

    assert res.status_code == 500
    assert res.json()["detail"].startswith("Failed to fetch blogs:")
