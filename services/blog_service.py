import logging
from datetime import timedelta
from typing import List, Optional

from sqlalchemy import select
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from models.blog import Blog, utcnow
from schemas.blog_schema import BlogCreate, BlogUpdate

logger = logging.getLogger(__name__)


class BlogService:

    # BLOG 조회 (최신순)
    def get_blogs(self, db: Session) -> List[Blog]:
        logger.info("[BlogService] Method : get_blogs")
        stmt = select(Blog).order_by(Blog.created_at.desc(), Blog.id.desc())
        return list(db.scalars(stmt).all())

    # BLOG 단일 조회 (id 기준)
    def get_blog_by_id(self, blog_id: int, db: Session) -> Optional[Blog]:
        logger.info("[BlogService] Method : get_blog_by_id")
        return db.get(Blog, blog_id)

    # BLOG 생성
    def create_blog(self, blog: BlogCreate, db: Session) -> Blog:
        logger.info("[BlogService] Method : create_blog")
        now = utcnow()
        create_blog = Blog(
            title=blog.title,
            content=blog.content,
            author=blog.author,
            created_at=now,
            updated_at=now,
        )
        db.add(create_blog)
        self._commit(db)
        db.refresh(create_blog)
        return create_blog

    # BLOG 업데이트 (빈 값은 기존 값 유지)
    def update_blog(self, blog_id: int, blog: BlogUpdate, db: Session) -> Optional[Blog]:
        logger.info("[BlogService] Method : update_blog")
        db_blog = db.get(Blog, blog_id)
        if not db_blog:
            return None

        db_blog.title = blog.title or db_blog.title
        db_blog.content = blog.content or db_blog.content
        db_blog.author = blog.author or db_blog.author

        # 같은 시각에 두 번 수정되어도 updated_at은 항상 증가
        now = utcnow()
        if now <= db_blog.updated_at:
            now = db_blog.updated_at + timedelta(microseconds=1)
        db_blog.updated_at = now

        self._commit(db)
        db.refresh(db_blog)
        return db_blog

    # BLOG 삭제
    def delete_blog(self, blog_id: int, db: Session) -> Optional[int]:
        logger.info("[BlogService] Method : delete_blog")
        db_blog = db.get(Blog, blog_id)
        if not db_blog:
            return None
        delete_blog_id = db_blog.id
        db.delete(db_blog)
        self._commit(db)
        return delete_blog_id

    def _commit(self, db: Session) -> None:
        try:
            db.commit()
        except SQLAlchemyError as e:
            db.rollback()
            logger.error(f"[BlogService] commit failed: {e}")
            raise
