"""Tests for journal.services.posts: create, read, update, delete and listing order."""

import unittest
from datetime import datetime, timedelta, timezone
from unittest.mock import MagicMock

from sqlalchemy import create_engine
from sqlalchemy.exc import OperationalError
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool

from journal.models import Base, Post
from journal.services.errors import PostNotFound, StoreFailure
from journal.services.posts import (
    create_post,
    delete_post,
    get_post,
    list_posts,
    update_post,
)


def _memory_db():
    """Fresh in-memory SQLite session with all tables created."""
    engine = create_engine(
        "sqlite://",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    Base.metadata.create_all(engine)
    return sessionmaker(bind=engine, autoflush=False)()


def _utc(value: datetime) -> datetime:
    """SQLite returns naive datetimes; they were stored as UTC."""
    return value if value.tzinfo else value.replace(tzinfo=timezone.utc)


class TestCreateAndGet(unittest.TestCase):
    def setUp(self) -> None:
        self.db = _memory_db()

    def tearDown(self) -> None:
        self.db.close()

    def test_created_post_reads_back(self) -> None:
        before = datetime.now(timezone.utc)
        post = create_post(self.db, "T", "B")
        after = datetime.now(timezone.utc)

        fetched = get_post(self.db, post.id)
        self.assertEqual(fetched.title, "T")
        self.assertEqual(fetched.content, "B")
        self.assertLessEqual(before, _utc(fetched.created_at))
        self.assertLessEqual(_utc(fetched.created_at), after)

    def test_empty_title_and_content_accepted(self) -> None:
        post = create_post(self.db, "", "")
        fetched = get_post(self.db, post.id)
        self.assertEqual(fetched.title, "")
        self.assertEqual(fetched.content, "")

    def test_ids_are_opaque_and_unique(self) -> None:
        first = create_post(self.db, "a", "a")
        second = create_post(self.db, "b", "b")
        self.assertNotEqual(first.id, second.id)
        self.assertEqual(len(first.id), 32)

    def test_unknown_and_malformed_ids_not_found(self) -> None:
        for post_id in ("0" * 32, "not-an-id", "", "../etc/passwd"):
            with self.subTest(post_id=post_id):
                with self.assertRaises(PostNotFound):
                    get_post(self.db, post_id)


class TestUpdate(unittest.TestCase):
    def setUp(self) -> None:
        self.db = _memory_db()

    def tearDown(self) -> None:
        self.db.close()

    def test_replaces_fields_and_keeps_created_at(self) -> None:
        post = create_post(self.db, "T", "B")
        created_at = _utc(post.created_at)

        update_post(self.db, post.id, "T2", "B2")

        fetched = get_post(self.db, post.id)
        self.assertEqual(fetched.title, "T2")
        self.assertEqual(fetched.content, "B2")
        self.assertEqual(_utc(fetched.created_at), created_at)

    def test_unknown_id_not_found(self) -> None:
        with self.assertRaises(PostNotFound):
            update_post(self.db, "0" * 32, "T", "B")

    def test_store_error_becomes_store_failure(self) -> None:
        db = MagicMock()
        db.get.return_value = Post(id="a" * 32, title="T", content="B")
        db.commit.side_effect = OperationalError("UPDATE", {}, Exception("disk I/O error"))
        with self.assertRaises(StoreFailure) as ctx:
            update_post(db, "a" * 32, "T2", "B2")
        self.assertEqual(ctx.exception.message, "Error updating post")
        db.rollback.assert_called_once()


class TestDelete(unittest.TestCase):
    def setUp(self) -> None:
        self.db = _memory_db()

    def tearDown(self) -> None:
        self.db.close()

    def test_deleted_post_is_gone(self) -> None:
        post = create_post(self.db, "T", "B")
        post_id = post.id
        delete_post(self.db, post_id)
        with self.assertRaises(PostNotFound):
            get_post(self.db, post_id)

    def test_delete_leaves_other_posts(self) -> None:
        keep = create_post(self.db, "keep", "")
        drop = create_post(self.db, "drop", "")
        delete_post(self.db, drop.id)
        self.assertEqual([p.id for p in list_posts(self.db)], [keep.id])

    def test_unknown_id_not_found(self) -> None:
        with self.assertRaises(PostNotFound):
            delete_post(self.db, "0" * 32)

    def test_store_error_becomes_store_failure(self) -> None:
        db = MagicMock()
        db.get.return_value = Post(id="a" * 32, title="T", content="B")
        db.commit.side_effect = OperationalError("DELETE", {}, Exception("database is locked"))
        with self.assertRaises(StoreFailure) as ctx:
            delete_post(db, "a" * 32)
        self.assertEqual(ctx.exception.message, "Error deleting post")


class TestListPosts(unittest.TestCase):
    def setUp(self) -> None:
        self.db = _memory_db()

    def tearDown(self) -> None:
        self.db.close()

    def test_empty_store(self) -> None:
        self.assertEqual(list_posts(self.db), [])

    def test_newest_first_orders_by_created_at_desc(self) -> None:
        base = datetime(2026, 1, 1, tzinfo=timezone.utc)
        for i, title in enumerate(["oldest", "middle", "newest"]):
            post = create_post(self.db, title, "")
            post.created_at = base + timedelta(days=i)
        self.db.commit()

        titles = [p.title for p in list_posts(self.db, newest_first=True)]
        self.assertEqual(titles, ["newest", "middle", "oldest"])
        self.assertEqual(len(list_posts(self.db)), 3)


if __name__ == "__main__":
    unittest.main()
