"""
File Gateway Port - Resolves file ids against the file service.
Implementation: chattask/infrastructure/http_clients/file_client.py

A returned FileInfo with id <= 0 means the file service has no such file;
callers raise FileReferenceNotFoundError for it.
"""

from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Any, Optional


@dataclass(frozen=True)
class FileInfo:
    id: int
    name: str = ""
    url: str = ""
    file_type_id: Optional[int] = None
    created_at: Optional[str] = None
    file_type: Optional[Any] = None


class FileGateway(ABC):
    @abstractmethod
    async def get_file(self, file_id: int) -> FileInfo:
        """
        Raises:
            FileServiceError: transport failure or non-200 answer
        """
        ...
