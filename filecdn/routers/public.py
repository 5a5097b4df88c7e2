from fastapi import APIRouter, Depends
from starlette.responses import FileResponse

from filecdn.database import Catalog, get_catalog
from filecdn.services import file_service
from filecdn.services.file_storage import FileStorage, get_storage, guess_media_type

router = APIRouter()

PUBLIC_CACHE_CONTROL = "public, max-age=31536000"


@router.get("/{file_id}",
            summary="Serve a published file",
            description="""
                          Streams the content of a public file. No authentication is required.
                          Private and unknown files are both reported as not found.
                        """,
            responses={
                404: {"description": "File not found"},
                200: {"description": "File content with a long-lived cache directive"},
            })
def serve_public_file(file_id: str,
                      catalog: Catalog = Depends(get_catalog),
                      storage: FileStorage = Depends(get_storage)):
    storage_path = file_service.resolve_public(catalog, file_id)
    path = storage.retrieve(storage_path)

    return FileResponse(
        path=path,
        media_type=guess_media_type(path),
        headers={"Cache-Control": PUBLIC_CACHE_CONTROL},
    )
