"""Tests for parent references and node views."""

import pytest
from bson import ObjectId

from files_manager.types import ROOT, DerivativeJob, FileNode, FileType, ParentRef


class TestParentRef:
    @pytest.mark.parametrize("raw", [None, 0, "0", ""])
    def test_root_forms(self, raw):
        assert ParentRef.parse(raw) == ROOT

    def test_node_reference(self):
        oid = ObjectId()
        ref = ParentRef.parse(str(oid))
        assert not ref.is_root
        assert ref.to_document() == oid
        assert ref.to_public() == str(oid)

    @pytest.mark.parametrize("raw", ["abc", 7, True, False, "0" * 23, [str(ObjectId())]])
    def test_malformed(self, raw):
        with pytest.raises(ValueError):
            ParentRef.parse(raw)

    def test_root_storage_forms(self):
        assert ROOT.to_document() == 0
        assert ROOT.to_public() == 0
        assert ParentRef.from_document(0) == ROOT

    def test_stored_and_parsed_refs_compare_equal(self):
        oid = ObjectId()
        assert ParentRef.from_document(oid) == ParentRef.parse(str(oid))


class TestFileType:
    @pytest.mark.parametrize("value", ["folder", "file", "image"])
    def test_known(self, value):
        assert FileType.parse(value).value == value

    @pytest.mark.parametrize("value", [None, "", "video", "FILE"])
    def test_unknown(self, value):
        assert FileType.parse(value) is None


def test_public_view_hides_local_path():
    owner = ObjectId()
    doc = {
        "_id": ObjectId(),
        "userId": owner,
        "name": "a.txt",
        "type": "file",
        "isPublic": False,
        "parentId": 0,
        "localPath": "/srv/files/blob",
    }
    node = FileNode.from_document(doc)
    assert node.local_path == "/srv/files/blob"
    assert node.to_public_view() == {
        "id": str(doc["_id"]),
        "userId": str(owner),
        "name": "a.txt",
        "type": "file",
        "isPublic": False,
        "parentId": 0,
    }


def test_derivative_job_payload():
    assert DerivativeJob(user_id="u", file_id="f").to_payload() == {"userId": "u", "fileId": "f"}
