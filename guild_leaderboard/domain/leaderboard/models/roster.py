"""
Roster Models

Guild members as returned by the guild roster query.
"""

from typing import Optional

from pydantic import BaseModel, Field


class Region(BaseModel):
    """Region model."""
    slug: str


class Server(BaseModel):
    """Home server of a guild member."""
    slug: str
    name: str
    region: Optional[Region] = None


class GuildMember(BaseModel):
    """Guild member model."""
    id: int
    name: str
    class_id: int = Field(alias="classID")
    hidden: bool = False
    server: Server

    class Config:
        populate_by_name = True
        frozen = True

    def region_slug(self, default: str) -> str:
        """Member's own region, falling back to the guild's."""
        if self.server.region and self.server.region.slug:
            return self.server.region.slug
        return default
