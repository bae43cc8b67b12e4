"""Manages blob files on disk: durable write, read and directory scans."""

import os
from pathlib import Path
from typing import List


class BlobStore:
    """Contract for the filesystem holding blob content."""

    def ensure_directory(self, path: str) -> None:
        raise NotImplementedError

    def write_durable(self, path: str, data: bytes) -> None:
        raise NotImplementedError

    def read_all(self, path: str) -> bytes:
        raise NotImplementedError

    def list_files(self, directory: str) -> List[str]:
        raise NotImplementedError

    def modified_at(self, path: str) -> float:
        raise NotImplementedError

    def delete(self, path: str) -> bool:
        raise NotImplementedError


class LocalBlobStore(BlobStore):
    """Blob store on the local filesystem."""

    def ensure_directory(self, path: str) -> None:
        Path(path).mkdir(parents=True, exist_ok=True)

    def write_durable(self, path: str, data: bytes) -> None:
        """
        Write ``data`` to ``path`` and fsync it before returning.

        The bytes go to a temporary sibling first and are renamed into place,
        so ``path`` either does not exist or holds the complete content.

        Raises:
            OSError: If the write, sync or rename fails
        """
        target = Path(path)
        tmp_path = target.with_name(f".{target.name}.tmp")
        try:
            with open(tmp_path, "wb") as f:
                f.write(data)
                f.flush()
                os.fsync(f.fileno())
            os.replace(tmp_path, target)
        except OSError:
            if tmp_path.exists():
                tmp_path.unlink()
            raise

    def read_all(self, path: str) -> bytes:
        """
        Raises:
            FileNotFoundError: If nothing exists at ``path``
            OSError: If read operation fails
        """
        return Path(path).read_bytes()

    def list_files(self, directory: str) -> List[str]:
        """
        Paths of the regular files in ``directory``, joined the same way
        uploads build their ``localPath``. Temporary dotfiles are skipped.
        """
        root = Path(directory)
        if not root.exists():
            return []
        return [
            os.path.join(directory, p.name) for p in root.iterdir()
            if p.is_file() and not p.name.startswith(".")
        ]

    def modified_at(self, path: str) -> float:
        return Path(path).stat().st_mtime

    def delete(self, path: str) -> bool:
        filepath = Path(path)
        if filepath.exists():
            filepath.unlink()
            return True
        return False
