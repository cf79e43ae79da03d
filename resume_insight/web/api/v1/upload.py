"""Bounded reads for uploaded resume files."""

from __future__ import annotations

from fastapi import UploadFile

from ....service import decode_document
from ...errors import APIError

_CHUNK_BYTES = 64 * 1024


async def read_upload_text(file: UploadFile, max_bytes: int) -> str:
    """Read *file* as text, never buffering more than ``max_bytes + 1`` bytes."""
    if file.size is not None and file.size > max_bytes:
        raise _too_large(max_bytes)

    buffer = bytearray()
    while len(buffer) <= max_bytes:
        chunk = await file.read(min(_CHUNK_BYTES, max_bytes + 1 - len(buffer)))
        if not chunk:
            return decode_document(bytes(buffer))
        buffer.extend(chunk)
    raise _too_large(max_bytes)


def _too_large(max_bytes: int) -> APIError:
    return APIError(
        400,
        "INPUT_TOO_LARGE",
        "Uploaded file exceeds size limit",
        {"max_upload_bytes": max_bytes},
    )
