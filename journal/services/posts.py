"""Post storage: list, fetch, create, update and delete."""

import logging
from datetime import datetime, timezone

from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from journal.models.post import Post
from journal.services.errors import PostNotFound, StoreFailure

logger = logging.getLogger(__name__)

POST_NOT_FOUND_MESSAGE = "Post not found"


def list_posts(db: Session, newest_first: bool = False) -> list[Post]:
    """All posts; newest first for moderation, otherwise in the store's own order."""
    query = db.query(Post)
    if newest_first:
        query = query.order_by(Post.created_at.desc())
    return query.all()


def get_post(db: Session, post_id: str) -> Post:
    """Fetch one post. Malformed and unknown ids both raise PostNotFound."""
    if not post_id:
        raise PostNotFound(POST_NOT_FOUND_MESSAGE)
    try:
        post = db.get(Post, post_id)
    except SQLAlchemyError as e:
        raise StoreFailure("Error finding post", cause=e) from e
    if post is None:
        raise PostNotFound(POST_NOT_FOUND_MESSAGE)
    return post


def _commit(db: Session, action: str) -> None:
    try:
        db.commit()
    except SQLAlchemyError as e:
        db.rollback()
        raise StoreFailure(f"Error {action} post", cause=e) from e


def create_post(db: Session, title: str, content: str) -> Post:
    """Insert a post stamped with the current time. Empty title/content are accepted."""
    post = Post(title=title, content=content, created_at=datetime.now(timezone.utc))
    db.add(post)
    _commit(db, "creating")
    db.refresh(post)
    logger.info("Post %s created", post.id)
    return post


def update_post(db: Session, post_id: str, title: str, content: str) -> Post:
    """Replace title and content; created_at is kept. Last writer wins."""
    post = get_post(db, post_id)
    post.title = title
    post.content = content
    _commit(db, "updating")
    db.refresh(post)
    logger.info("Post %s updated", post_id)
    return post


def delete_post(db: Session, post_id: str) -> None:
    """Permanently remove a post."""
    post = get_post(db, post_id)
    db.delete(post)
    _commit(db, "deleting")
    logger.info("Post %s deleted", post_id)
