"""Tests for the Redis, MongoDB and filesystem adapters."""

import json
import logging
import os
import threading
import time
from unittest.mock import MagicMock

import pytest
import redis
from pymongo.errors import PyMongoError

from files_manager.database import init_database
from files_manager.stores import (
    BackgroundJobQueue,
    LocalBlobStore,
    MongoCollection,
    RedisJobQueue,
    RedisKeyValueStore,
)
from fakes import BlockingJobQueue, FakeDocumentCollection, FakeJobQueue


class TestRedisKeyValueStore:
    def test_requires_client(self):
        with pytest.raises(ValueError):
            RedisKeyValueStore(None)

    def test_set_uses_expiry(self):
        client = MagicMock()
        RedisKeyValueStore(client).set("auth_x", "user", 86400)
        client.set.assert_called_once_with("auth_x", "user", ex=86400)

    def test_rejects_non_positive_ttl(self):
        with pytest.raises(ValueError):
            RedisKeyValueStore(MagicMock()).set("k", "v", 0)

    def test_get_decodes_bytes(self):
        client = MagicMock()
        client.get.return_value = b"user"
        assert RedisKeyValueStore(client).get("k") == "user"

    def test_get_missing(self):
        client = MagicMock()
        client.get.return_value = None
        assert RedisKeyValueStore(client).get("k") is None

    def test_delete(self):
        client = MagicMock()
        client.delete.return_value = 1
        assert RedisKeyValueStore(client).delete("k") is True
        client.delete.return_value = 0
        assert RedisKeyValueStore(client).delete("k") is False

    def test_is_alive(self):
        client = MagicMock()
        client.ping.return_value = True
        assert RedisKeyValueStore(client).is_alive()
        client.ping.side_effect = redis.ConnectionError("down")
        assert not RedisKeyValueStore(client).is_alive()

    def test_from_url_bounds_socket_waits(self, monkeypatch):
        from_url = MagicMock()
        monkeypatch.setattr(redis.Redis, "from_url", from_url)

        RedisKeyValueStore.from_url("redis://localhost:6379", socket_timeout=2.0)

        kwargs = from_url.call_args[1]
        assert kwargs["socket_timeout"] == 2.0
        assert kwargs["socket_connect_timeout"] == 2.0


class TestRedisJobQueue:
    def test_pushes_json(self):
        client = MagicMock()
        RedisJobQueue(client, "fileQueue").enqueue({"userId": "u", "fileId": "f"})
        name, payload = client.rpush.call_args[0]
        assert name == "fileQueue"
        assert json.loads(payload) == {"userId": "u", "fileId": "f"}

    def test_requires_client(self):
        with pytest.raises(ValueError):
            RedisJobQueue(None, "fileQueue")

    def test_from_url_bounds_socket_waits(self, monkeypatch):
        from_url = MagicMock()
        monkeypatch.setattr(redis.Redis, "from_url", from_url)

        RedisJobQueue.from_url("redis://localhost:6379", "fileQueue", socket_timeout=2.0)

        kwargs = from_url.call_args[1]
        assert kwargs["socket_timeout"] == 2.0
        assert kwargs["socket_connect_timeout"] == 2.0


class TestBackgroundJobQueue:
    def test_enqueue_returns_before_push_completes(self):
        release = threading.Event()
        inner = BlockingJobQueue(release)
        queue = BackgroundJobQueue(inner, max_workers=1)

        start = time.perf_counter()
        future = queue.enqueue({"userId": "u", "fileId": "f"})
        assert time.perf_counter() - start < 0.5
        assert not future.done()

        release.set()
        queue.close()
        assert inner.payloads == [{"userId": "u", "fileId": "f"}]

    def test_push_failure_is_logged_not_raised(self, caplog, monkeypatch):
        inner = FakeJobQueue()
        inner.fail = True
        queue = BackgroundJobQueue(inner, max_workers=1)
        queue_logger = logging.getLogger("files_manager.stores.job_queue")
        monkeypatch.setattr(queue_logger, "handlers", [caplog.handler])
        monkeypatch.setattr(queue_logger, "level", logging.WARNING)

        future = queue.enqueue({"userId": "u", "fileId": "f"})
        queue.close()

        assert isinstance(future.exception(), ConnectionError)
        assert any("Failed to enqueue derivative job" in r.getMessage() for r in caplog.records)


class TestMongoCollection:
    def test_insert_returns_copy_with_id(self):
        collection = MagicMock()
        collection.insert_one.return_value.inserted_id = "new-id"
        original = {"email": "a@b.c"}
        doc = MongoCollection(collection).insert_one(original)
        assert doc == {"email": "a@b.c", "_id": "new-id"}
        assert "_id" not in original

    def test_update_uses_set(self):
        collection = MagicMock()
        collection.update_one.return_value.matched_count = 1
        assert MongoCollection(collection).update_one({"_id": 1}, {"isPublic": True}) == 1
        collection.update_one.assert_called_once_with({"_id": 1}, {"$set": {"isPublic": True}})

    def test_aggregate_materializes(self):
        collection = MagicMock()
        collection.aggregate.return_value = iter([{"_id": 1}])
        assert MongoCollection(collection).aggregate([{"$limit": 1}]) == [{"_id": 1}]

    def test_count(self):
        collection = MagicMock()
        collection.count_documents.return_value = 3
        assert MongoCollection(collection).count() == 3
        collection.count_documents.assert_called_once_with({})

    def test_is_alive(self):
        collection = MagicMock()
        assert MongoCollection(collection).is_alive()
        collection.database.client.admin.command.side_effect = PyMongoError("down")
        assert not MongoCollection(collection).is_alive()


def test_init_database_creates_indexes():
    users, files = FakeDocumentCollection(), FakeDocumentCollection()
    init_database(users, files)
    assert users.indexes == [([("email", 1)], True)]
    assert ([("userId", 1), ("parentId", 1)], False) in files.indexes


class TestLocalBlobStore:
    def test_durable_write_and_read(self, tmp_path):
        store = LocalBlobStore()
        path = str(tmp_path / "blob")
        store.write_durable(path, b"content")
        assert store.read_all(path) == b"content"
        assert os.listdir(tmp_path) == ["blob"]

    def test_read_missing(self, tmp_path):
        with pytest.raises(FileNotFoundError):
            LocalBlobStore().read_all(str(tmp_path / "nope"))

    def test_write_into_missing_directory_fails_cleanly(self, tmp_path):
        with pytest.raises(OSError):
            LocalBlobStore().write_durable(str(tmp_path / "missing" / "blob"), b"x")

    def test_list_skips_temporary_files(self, tmp_path):
        (tmp_path / "a").write_bytes(b"1")
        (tmp_path / ".b.tmp").write_bytes(b"2")
        (tmp_path / "sub").mkdir()
        assert LocalBlobStore().list_files(str(tmp_path)) == [os.path.join(str(tmp_path), "a")]

    def test_delete(self, tmp_path):
        store = LocalBlobStore()
        path = str(tmp_path / "blob")
        store.write_durable(path, b"x")
        assert store.delete(path) is True
        assert store.delete(path) is False
