from datetime import datetime
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field

from filecdn.models.file_model import Visibility


class ReturnFile(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: str = Field(..., description="File identification number")
    user_id: str = Field(..., description="Identifier of the owning user")
    filename: str = Field(..., examples=["a.txt"], description="File name provided by the user")
    storage_path: str = Field(..., description="Location of the bytes relative to the storage root")
    visibility: Visibility = Field(..., examples=["private"], description="Whether the file is publicly readable")
    public_url: Optional[str] = Field(None, examples=["/public/3f2b..."],
                                      description="Stable public URL, present only once the file is public")
    created_at: datetime = Field(..., description="Time at which the file was uploaded")
    updated_at: datetime = Field(..., description="Time of the last change to the record")


class UploadResponse(BaseModel):
    detail: str = Field(..., examples=["File uploaded successfully"])
    file: ReturnFile
