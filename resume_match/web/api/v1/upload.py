"""Size-limited reads of uploaded resume documents."""

from __future__ import annotations

from fastapi import UploadFile

from ....errors import DocumentError


async def read_resume_upload(file: UploadFile, max_bytes: int) -> bytes:
    """Read at most ``max_bytes`` of ``file``.

    One extra byte is requested so an oversize upload is detected without
    buffering the rest of it.
    """
    data = await file.read(max_bytes + 1)
    if len(data) > max_bytes:
        raise DocumentError(
            f"File size exceeds {_describe_limit(max_bytes)} limit. Please upload a smaller file.",
            {"filename": file.filename or "", "max_upload_bytes": max_bytes},
        )
    return data


def _describe_limit(max_bytes: int) -> str:
    megabytes = max_bytes / (1024 * 1024)
    if megabytes >= 1:
        return f"{megabytes:g}MB"
    return f"{max_bytes} bytes"
