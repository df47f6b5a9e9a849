"""Group Schemas — response shapes for the /groups endpoints."""

from typing import Literal

from pydantic import BaseModel, ConfigDict


class GroupSummary(BaseModel):
    """One entry of GET /groups."""
    model_config = ConfigDict(from_attributes=True)

    id: int
    name: str
    created_by: int


class GroupCreated(BaseModel):
    """POST /groups response — id and name only."""
    model_config = ConfigDict(from_attributes=True)

    id: int
    name: str


class JoinResult(BaseModel):
    status: Literal["joined"] = "joined"
