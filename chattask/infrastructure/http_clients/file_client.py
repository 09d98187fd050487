"""
File service gateway.

GET {FILE_SERVICE_URL}/api/v1/files/{id} answers the file object directly.
A missing or non-positive id in the answer is passed through as id 0 so the
caller can report the reference as not found.
"""

import httpx

from chattask.config.settings import Config
from chattask.domain.exceptions import FileServiceError
from chattask.domain.ports.gateways.file_gateway import FileGateway, FileInfo
from chattask.infrastructure.http_clients.base_client import (
    GatewayCallError,
    get_json,
    pick,
)


class HttpFileGateway(FileGateway):
    def __init__(self, client: httpx.AsyncClient, base_url: str = Config.FILE_SERVICE_URL):
        self._client = client
        self._base_url = base_url.rstrip("/")

    async def get_file(self, file_id: int) -> FileInfo:
        url = f"{self._base_url}/api/v1/files/{file_id}"
        try:
            data = await get_json(self._client, url, "file")
        except GatewayCallError as e:
            raise FileServiceError(file_id, str(e)) from e

        if not isinstance(data, dict):
            raise FileServiceError(file_id, "unexpected file response")

        try:
            returned_id = int(pick(data, "id", "ID", default=0))
        except (TypeError, ValueError):
            returned_id = 0

        return FileInfo(
            id=returned_id,
            name=pick(data, "name", "Name", default=""),
            url=pick(data, "url", "URL", default=""),
            file_type_id=pick(data, "file_type_id", "FileTypeID"),
            created_at=pick(data, "created_at", "CreatedAt"),
            file_type=pick(data, "file_type", "FileType"),
        )
