"""Pydantic models for audio work listings."""

from typing import Optional

from pydantic import BaseModel, Field


class Track(BaseModel):
    """A playable file inside a work folder.

    Tracks are rebuilt on every listing and never persisted. The hash is
    the track's position in the sorted listing, so it changes whenever
    files are added, removed or renamed.
    """

    title: str = Field(description="File base name")
    subtitle: Optional[str] = Field(
        default=None,
        description="Parent folder relative to the work directory, None at top level",
    )
    hash: str = Field(description="'{work_id}/{index}'")
