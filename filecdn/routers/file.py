from typing import Optional

from fastapi import APIRouter, Depends, File, UploadFile, status
from starlette.responses import FileResponse

from filecdn.database import Catalog, get_catalog
from filecdn.dependencies import get_current_user_id
from filecdn.errors import BadRequest
from filecdn.schemas.file_schema import ReturnFile, UploadResponse
from filecdn.services import file_service
from filecdn.services.file_storage import FileStorage, get_storage, guess_media_type

router = APIRouter()


@router.post("/upload", response_model=UploadResponse, response_model_exclude_none=True,
             status_code=status.HTTP_201_CREATED,
             summary="Upload a file to the user's account",
             description="""
                            Stores the uploaded file under the account of the logged-in user.
                            New files are private until they are published.
                          """,
             responses={
                 400: {"description": "No file uploaded or invalid filename"},
                 401: {"description": "Missing or invalid token"},
                 201: {"description": "File uploaded successfully"},
             })
def upload_file(file: Optional[UploadFile] = File(None),
                user_id: str = Depends(get_current_user_id),
                catalog: Catalog = Depends(get_catalog),
                storage: FileStorage = Depends(get_storage)):
    if file is None:
        raise BadRequest("No file uploaded")

    data = file.file.read()
    record = file_service.store(catalog, storage, user_id, file.filename, data)
    return {"detail": "File uploaded successfully", "file": ReturnFile.model_validate(record)}


@router.get("/files", response_model=list[ReturnFile], response_model_exclude_none=True,
            summary="Displays the user's files",
            description="""
                            All files uploaded by the logged-in user, oldest first.
                            The public URL is only present for published files.
                        """,
            responses={
                401: {"description": "Missing or invalid token"},
                200: {"description": "File list returned"},
            })
def return_files(user_id: str = Depends(get_current_user_id),
                 catalog: Catalog = Depends(get_catalog)):
    files = file_service.list_files(catalog, user_id)
    return [ReturnFile.model_validate(file) for file in files]


@router.post("/files/{file_id}/make_public", response_model=ReturnFile,
             summary="Publish a file at a stable public URL",
             description="""
                            Makes the file readable by anyone at its public URL. Publishing cannot be undone.
                          """,
             responses={
                 401: {"description": "Missing or invalid token"},
                 404: {"description": "File not found"},
                 200: {"description": "File published"},
             })
def make_file_public(file_id: str,
                     user_id: str = Depends(get_current_user_id),
                     catalog: Catalog = Depends(get_catalog)):
    record = file_service.publish(catalog, file_id, user_id)
    return ReturnFile.model_validate(record)


@router.get("/files/{file_id}/download",
            summary="Downloading a file with the provided ID",
            description="""
                          Lets the owner download one of their files, whether it is public or private.
                        """,
            responses={
                401: {"description": "Missing or invalid token"},
                404: {"description": "File not found"},
                200: {"description": "File content",
                      "content": {"application/octet-stream": {}}},
            })
def download_user_file(file_id: str,
                       user_id: str = Depends(get_current_user_id),
                       catalog: Catalog = Depends(get_catalog),
                       storage: FileStorage = Depends(get_storage)):
    record = file_service.get_owned_file(catalog, file_id, user_id)
    path = storage.retrieve(record.storage_path)

    return FileResponse(
        path=path,
        filename=record.filename,
        media_type=guess_media_type(path),
    )
