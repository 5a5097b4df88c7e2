import logging
import mimetypes
from pathlib import Path, PurePosixPath

from filecdn.config import get_settings
from filecdn.errors import BadRequest, Internal, NotFound

logger = logging.getLogger(__name__)

DEFAULT_MEDIA_TYPE = "application/octet-stream"
# NAME_MAX on common filesystems
MAX_FILENAME_BYTES = 255


def sanitize_filename(filename: str | None) -> str:
    """Keep only the last path component of a user supplied file name."""
    if not filename or "\x00" in filename:
        raise BadRequest("Invalid filename")

    name = PurePosixPath(filename.replace("\\", "/")).name
    if name in ("", ".", "..") or len(name.encode("utf-8")) > MAX_FILENAME_BYTES:
        raise BadRequest("Invalid filename")
    return name


def guess_media_type(path: str | Path) -> str:
    media_type, _ = mimetypes.guess_type(str(path))
    return media_type or DEFAULT_MEDIA_TYPE


class FileStorage:
    """Local filesystem storage; paths are ``<user_id>/<file_id>/<filename>`` relative to ``root``."""

    def __init__(self, root: str | Path):
        self.root = Path(root)

    @staticmethod
    def build_path(user_id: str, file_id: str, filename: str) -> str:
        return f"{user_id}/{file_id}/{filename}"

    def _resolve(self, storage_path: str) -> Path:
        root = self.root.resolve()
        full_path = (root / storage_path).resolve()
        if not full_path.is_relative_to(root):
            raise NotFound()
        return full_path

    def write(self, storage_path: str, data: bytes) -> Path:
        full_path = self._resolve(storage_path)
        try:
            full_path.parent.mkdir(parents=True, exist_ok=True)
            full_path.write_bytes(data)
        except OSError as error:
            logger.exception("Failed to write %s", storage_path)
            raise Internal("Failed to store file") from error
        return full_path

    def remove(self, storage_path: str):
        full_path = self._resolve(storage_path)
        try:
            full_path.unlink(missing_ok=True)
        except OSError:
            logger.exception("Failed to remove orphaned bytes at %s", storage_path)

    def retrieve(self, storage_path: str) -> Path:
        full_path = self._resolve(storage_path)
        if not full_path.is_file():
            logger.warning("Catalog references missing bytes at %s", storage_path)
            raise NotFound()
        return full_path


def get_storage() -> FileStorage:
    return FileStorage(get_settings().storage_dir)
