import logging
from fastapi import APIRouter, Depends, HTTPException, status
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session
from typing import List, Optional

from db import get_db
from schemas.blog_schema import BlogCreate, BlogUpdate, BlogOut, BlogCreated, MessageOut
from services.blog_service import BlogService

logger = logging.getLogger(__name__)

router = APIRouter()
blog_service = BlogService()

NOT_FOUND = "Blog post not found"


def _storage_error(action: str, e: SQLAlchemyError) -> HTTPException:
    logger.error(f"[blog_router] {action} failed: {e}")
    return HTTPException(status_code=500, detail=f"Failed to {action}: {e}")


# BLOG 목록 조회
@router.get("", response_model=List[BlogOut])
def get_blogs(db: Session = Depends(get_db)):
    try:
        return blog_service.get_blogs(db)
    except SQLAlchemyError as e:
        raise _storage_error("fetch blogs", e)


# BLOG 조회 By ID
@router.get("/{blog_id}", response_model=BlogOut)
def get_blog_by_id(blog_id: int, db: Session = Depends(get_db)):
    try:
        blog = blog_service.get_blog_by_id(blog_id, db)
    except SQLAlchemyError as e:
        raise _storage_error("fetch blog", e)
    if not blog:
        raise HTTPException(status_code=404, detail=NOT_FOUND)
    return blog


# BLOG 생성
@router.post("", response_model=BlogCreated, status_code=status.HTTP_201_CREATED)
def create_blog(blog: Optional[BlogCreate] = None, db: Session = Depends(get_db)):
    blog = blog or BlogCreate()
    if not blog.is_complete():
        raise HTTPException(status_code=400, detail="Title, content, and author are required")
    try:
        created = blog_service.create_blog(blog, db)
    except SQLAlchemyError as e:
        raise _storage_error("create blog", e)
    return BlogCreated(message="Blog post created successfully", post_id=created.id)


# BLOG 업데이트
@router.put("/{blog_id}", response_model=MessageOut)
def update_blog(blog_id: int, blog: Optional[BlogUpdate] = None, db: Session = Depends(get_db)):
    blog = blog or BlogUpdate()
    try:
        updated = blog_service.update_blog(blog_id, blog, db)
    except SQLAlchemyError as e:
        raise _storage_error("update blog", e)
    if not updated:
        raise HTTPException(status_code=404, detail=NOT_FOUND)
    return MessageOut(message="Blog post updated successfully")


# BLOG 삭제
@router.delete("/{blog_id}", response_model=MessageOut)
def delete_blog(blog_id: int, db: Session = Depends(get_db)):
    try:
        deleted_id = blog_service.delete_blog(blog_id, db)
    except SQLAlchemyError as e:
        raise _storage_error("delete blog", e)
    if deleted_id is None:
        raise HTTPException(status_code=404, detail=NOT_FOUND)
    logger.info(f"Blog deleted - Blog ID {deleted_id}")
    return MessageOut(message="Blog post deleted successfully")
