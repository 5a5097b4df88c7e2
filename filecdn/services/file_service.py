import logging
import uuid

from filecdn.config import get_settings
from filecdn.database import Catalog
from filecdn.errors import FileHostError, NotFound
from filecdn.models.file_model import FileRecord, Visibility
from filecdn.services.file_storage import FileStorage, sanitize_filename

logger = logging.getLogger(__name__)


def public_url_for(file_id: str) -> str:
    return f"{get_settings().public_url_prefix.rstrip('/')}/{file_id}"


def store(catalog: Catalog, storage: FileStorage, user_id: str, filename: str | None, data: bytes) -> FileRecord:
    filename = sanitize_filename(filename)
    file_id = str(uuid.uuid4())
    storage_path = storage.build_path(user_id, file_id, filename)

    # bytes go first so a catalog row never points at bytes that failed to persist
    storage.write(storage_path, data)

    try:
        with catalog.session() as db:
            record = FileRecord(
                id=file_id,
                user_id=user_id,
                filename=filename,
                storage_path=storage_path,
                visibility=Visibility.PRIVATE,
                public_url=None,
            )
            db.add(record)
    except FileHostError:
        storage.remove(storage_path)
        raise

    logger.info("User %s uploaded file %s (%d bytes)", user_id, file_id, len(data))
    return record


def list_files(catalog: Catalog, user_id: str) -> list[FileRecord]:
    with catalog.session() as db:
        return (
            db.query(FileRecord)
            .filter(FileRecord.user_id == user_id)
            .order_by(FileRecord.created_at, FileRecord.id)
            .all()
        )


def get_owned_file(catalog: Catalog, file_id: str, user_id: str) -> FileRecord:
    with catalog.session() as db:
        record = db.query(FileRecord).filter(FileRecord.id == file_id, FileRecord.user_id == user_id).first()
    if record is None:
        raise NotFound()
    return record


def publish(catalog: Catalog, file_id: str, user_id: str) -> FileRecord:
    # wrong owner and unknown id are indistinguishable
    with catalog.session() as db:
        record = db.query(FileRecord).filter(FileRecord.id == file_id, FileRecord.user_id == user_id).first()
        if record is None:
            raise NotFound()
        record.publish(public_url_for(file_id))

    logger.info("User %s published file %s", user_id, file_id)
    return record


def resolve_public(catalog: Catalog, file_id: str) -> str:
    """Return the storage path of a public file."""
    with catalog.session() as db:
        storage_path = (
            db.query(FileRecord.storage_path)
            .filter(FileRecord.id == file_id, FileRecord.visibility == Visibility.PUBLIC)
            .scalar()
        )
    if storage_path is None:
        raise NotFound()
    return storage_path
