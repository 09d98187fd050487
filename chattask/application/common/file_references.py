"""
File reference validation shared by chats, messages and tasks.

The file service answers with id <= 0 for files it does not know; transport
and status failures surface as FileServiceError from the gateway itself.
"""

from chattask.domain.exceptions import FileReferenceNotFoundError
from chattask.domain.ports.gateways import FileGateway, FileInfo


async def resolve_file(file_gateway: FileGateway, file_id: int) -> FileInfo:
    file = await file_gateway.get_file(file_id)
    if file.id <= 0:
        raise FileReferenceNotFoundError(file_id)
    return file


async def resolve_files(file_gateway: FileGateway, file_ids) -> list[FileInfo]:
    """Resolve every id in order, failing on the first bad one."""
    return [await resolve_file(file_gateway, file_id) for file_id in file_ids]
