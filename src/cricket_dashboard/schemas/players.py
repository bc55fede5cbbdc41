"""Pydantic schemas for player data validation."""

from datetime import datetime
from typing import Optional

from pydantic import Field

from ..models.players import PlayerRole
from .base import MAX_DB_INT, CamelModel, FieldErrors, ResponseModel, UpdateModel

VALID_ROLES = ", ".join(role.value for role in PlayerRole)

PLAYER_ERRORS = {
    "name": FieldErrors("MISSING_NAME", "INVALID_NAME", "Name must be a non-empty string"),
    "teamId": FieldErrors("MISSING_TEAM_ID", "INVALID_TEAM_ID", "Valid team ID is required"),
    "role": FieldErrors("MISSING_ROLE", "INVALID_ROLE", f"Invalid role. Must be one of: {VALID_ROLES}"),
}


class PlayerCreate(CamelModel):
    """Schema for creating a new player."""

    error_codes = PLAYER_ERRORS

    name: str = Field(..., min_length=1, max_length=100, description="Player name")
    team_id: int = Field(..., gt=0, le=MAX_DB_INT, description="Team ID")
    role: PlayerRole = Field(..., description="Playing role")


class PlayerUpdate(UpdateModel):
    """Schema for updating player information."""

    error_codes = PLAYER_ERRORS

    name: Optional[str] = Field(None, min_length=1, max_length=100)
    team_id: Optional[int] = Field(None, gt=0, le=MAX_DB_INT)
    role: Optional[PlayerRole] = None


class PlayerResponse(ResponseModel):
    """Schema for player response data."""

    id: int
    name: str
    team_id: Optional[int]
    role: PlayerRole
    created_at: datetime
