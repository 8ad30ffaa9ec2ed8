"""Config store location and access configuration."""

from pathlib import Path

from pydantic import BaseModel, Field


class StorageConfig(BaseModel):
    """Where the issue database lives and how it is opened."""

    path: Path | None = Field(
        default=None,
        description="Explicit database path; skips directory discovery when set",
    )
    dirname: str = Field(
        default=".beads",
        min_length=1,
        description="Directory holding the database, searched upward from cwd",
    )
    filename: str = Field(
        default="beads.db",
        min_length=1,
        description="Database file name inside dirname",
    )
    busy_timeout: float = Field(
        default=5.0,
        gt=0,
        description="Seconds to wait on a locked database",
    )
    search_depth: int = Field(
        default=5,
        gt=0,
        description="Parent directories to search for dirname",
    )
