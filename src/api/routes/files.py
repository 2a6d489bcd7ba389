"""Download upload and rename endpoints."""

import asyncio
from typing import Annotated

from fastapi import APIRouter, Depends, File, UploadFile

from api.dependencies import get_data_paths
from api.models import FileRenameRequest, StoredFileResponse
from core.config import MAX_UPLOAD_SIZE_BYTES
from core.errors import InvalidRequestError, PayloadTooLargeError
from core.storage import DataPaths
from services import software

router = APIRouter(prefix="/api")

_CHUNK_SIZE = 1024 * 1024


@router.post("/files", response_model=StoredFileResponse)
async def upload_file(
    file: Annotated[UploadFile | None, File(description="File to publish under /downloads")] = None,
    paths: DataPaths = Depends(get_data_paths),
):
    """Store an uploaded file under a safe, collision-free name."""
    if file is None or not file.filename:
        raise InvalidRequestError("file is required")

    chunks: list[bytes] = []
    size = 0
    while chunk := await file.read(_CHUNK_SIZE):
        size += len(chunk)
        if size > MAX_UPLOAD_SIZE_BYTES:
            max_mb = MAX_UPLOAD_SIZE_BYTES // (1024 * 1024)
            raise PayloadTooLargeError(
                f"File exceeds maximum size of {max_mb} MB",
                details=[f"Received: {file.filename}"],
            )
        chunks.append(chunk)

    # Sync file I/O off the event loop
    return await asyncio.to_thread(
        software.store_file, paths, file.filename, b"".join(chunks)
    )


@router.post("/files/rename", response_model=StoredFileResponse)
def rename_file(body: FileRenameRequest, paths: DataPaths = Depends(get_data_paths)):
    return software.rename_file(paths, body.fileName, body.newFileName)
