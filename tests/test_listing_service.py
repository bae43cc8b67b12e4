"""Tests for paginated listing."""

import pytest
from bson import ObjectId

from fakes import b64


@pytest.fixture
def folder(container, user):
    return container.upload_service.upload(user.user_id, "docs", "folder")


@pytest.fixture
def children(container, user, folder):
    return [
        container.upload_service.upload(user.user_id, f"f{i:02d}", "file", b64(str(i)), parent_id=folder.id)
        for i in range(45)
    ]


class TestPagination:
    @pytest.mark.parametrize("page,start,end", [(0, 0, 20), (1, 20, 40), (2, 40, 45)])
    def test_pages_in_insertion_order(self, container, user, folder, children, page, start, end):
        listed = container.listing_service.list(user.user_id, folder.id, page)
        assert [n.id for n in listed] == [n.id for n in children[start:end]]

    def test_page_past_end_is_empty(self, container, user, folder, children):
        assert container.listing_service.list(user.user_id, folder.id, 3) == []

    def test_negative_page_is_empty(self, container, user, folder, children):
        assert container.listing_service.list(user.user_id, folder.id, -1) == []

    def test_root_listing_excludes_nested(self, container, user, folder, children):
        listed = container.listing_service.list(user.user_id, None, 0)
        assert [n.id for n in listed] == [folder.id]

    @pytest.mark.parametrize("parent_id", [None, "0", 0, ""])
    def test_root_forms(self, container, user, folder, parent_id):
        assert [n.id for n in container.listing_service.list(user.user_id, parent_id)] == [folder.id]


class TestBadParent:
    def test_missing_parent(self, container, user, folder):
        assert container.listing_service.list(user.user_id, str(ObjectId())) == []

    def test_malformed_parent(self, container, user, folder):
        assert container.listing_service.list(user.user_id, "not-an-id") == []

    def test_parent_that_is_a_file(self, container, user):
        node = container.upload_service.upload(user.user_id, "a", "file", b64("a"))
        assert container.listing_service.list(user.user_id, node.id) == []


class TestScoping:
    def test_only_callers_nodes(self, container, user, other_user, folder):
        container.upload_service.upload(other_user.user_id, "theirs", "folder", is_public=True)
        assert [n.name for n in container.listing_service.list(user.user_id)] == ["docs"]
        assert [n.name for n in container.listing_service.list(other_user.user_id)] == ["theirs"]

    def test_other_users_folder_lists_nothing(self, container, user, other_user, folder, children):
        assert container.listing_service.list(other_user.user_id, folder.id) == []
