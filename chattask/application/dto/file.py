"""File DTOs - files as the file service describes them."""

from typing import Any, Optional
from pydantic import BaseModel

from chattask.domain.ports.gateways import FileInfo


class FileDTO(BaseModel):
    id: int
    name: str
    file_type_id: Optional[int] = None
    url: str
    created_at: Optional[str] = None
    file_type: Optional[Any] = None

    @classmethod
    def from_info(cls, file: FileInfo) -> "FileDTO":
        return cls(
            id=file.id,
            name=file.name,
            file_type_id=file.file_type_id,
            url=file.url,
            created_at=file.created_at,
            file_type=file.file_type,
        )
