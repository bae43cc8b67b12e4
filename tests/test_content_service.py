"""Tests for blob retrieval."""

import pytest

from fakes import b64
from files_manager.exceptions import NotAFileError, NotFoundError, StorageError
from files_manager.services.content_service import content_type_for


@pytest.fixture
def private_file(container, user):
    return container.upload_service.upload(user.user_id, "a.txt", "file", b64("hi"))


@pytest.fixture
def image(container, user):
    return container.upload_service.upload(user.user_id, "cat.png", "image", b64("png-bytes"), is_public=True)


class TestGetContent:
    def test_owner_reads_private(self, container, user, private_file):
        content = container.content_service.get_content(private_file.id, user.user_id)
        assert content.data == b"hi"
        assert content.content_type == "text/plain; charset=utf-8"

    @pytest.mark.parametrize("caller", ["other", None])
    def test_private_hidden_from_others(self, container, other_user, private_file, caller):
        caller_id = other_user.user_id if caller == "other" else None
        with pytest.raises(NotFoundError):
            container.content_service.get_content(private_file.id, caller_id)

    def test_public_readable_anonymously(self, container, image):
        content = container.content_service.get_content(image.id, None)
        assert content.data == b"png-bytes"
        assert content.content_type == "image/png"

    def test_folder_has_no_content(self, container, user):
        folder = container.upload_service.upload(user.user_id, "docs", "folder")
        with pytest.raises(NotAFileError):
            container.content_service.get_content(folder.id, user.user_id)

    def test_private_folder_of_other_user_is_not_found(self, container, user, other_user):
        folder = container.upload_service.upload(user.user_id, "docs", "folder")
        with pytest.raises(NotFoundError):
            container.content_service.get_content(folder.id, other_user.user_id)

    @pytest.mark.parametrize("file_id", ["bogus", "0" * 24])
    def test_unknown_id(self, container, user, file_id):
        with pytest.raises(NotFoundError):
            container.content_service.get_content(file_id, user.user_id)

    def test_missing_blob_is_not_found(self, container, user, private_file):
        container.blob_store.delete(private_file.local_path)
        with pytest.raises(NotFoundError):
            container.content_service.get_content(private_file.id, user.user_id)

    def test_read_failure_is_storage_error(self, container, user, private_file):
        container.blob_store.fail_reads = True
        with pytest.raises(StorageError):
            container.content_service.get_content(private_file.id, user.user_id)


class TestDerivatives:
    @pytest.mark.parametrize("size", [500, 250, 100])
    def test_reads_generated_derivative(self, container, image, size):
        container.blob_store.write_durable(f"{image.local_path}_{size}", b"small")
        assert container.content_service.get_content(image.id, None, size).data == b"small"

    def test_not_yet_generated(self, container, image):
        with pytest.raises(NotFoundError):
            container.content_service.get_content(image.id, None, 500)

    @pytest.mark.parametrize("size", [1, 200, -100])
    def test_unknown_width(self, container, image, size):
        container.blob_store.write_durable(f"{image.local_path}_{size}", b"x")
        with pytest.raises(NotFoundError):
            container.content_service.get_content(image.id, None, size)


@pytest.mark.parametrize("name,expected", [
    ("notes.txt", "text/plain; charset=utf-8"),
    ("page.html", "text/html; charset=utf-8"),
    ("cat.png", "image/png"),
    ("data.json", "application/json"),
    ("no-extension", "application/octet-stream"),
])
def test_content_type_for(name, expected):
    assert content_type_for(name) == expected
