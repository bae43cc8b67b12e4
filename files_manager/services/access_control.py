"""Read/write permission checks on file nodes.

Callers translate a failed read check into NotFound rather than a forbidden
error, so the existence of private nodes is never disclosed to non-owners.
"""

from typing import Optional

from files_manager.types import FileNode


def can_read(node: FileNode, caller_user_id: Optional[str]) -> bool:
    if node.is_public:
        return True
    return caller_user_id is not None and caller_user_id == node.user_id


def can_write(node: FileNode, caller_user_id: Optional[str]) -> bool:
    return caller_user_id is not None and caller_user_id == node.user_id
