"""Pydantic schema for stored file metadata."""

from datetime import datetime

from pydantic import BaseModel


class FileStats(BaseModel):
    """Size and timestamps of a stored file.

    createdAt is best-effort: filesystems without a birth time report the
    metadata-change time instead.
    """

    size: int
    createdAt: datetime
    modifiedAt: datetime

    model_config = {"from_attributes": True}
