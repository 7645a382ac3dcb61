# backend/teesheet/schemas/teetimes.py
"""
Pydantic schemas for the tee-times API.

Wire format is camelCase (userId, maxPlayers, bookedBy, ...); booked players
are serialized as the five index-aligned lists the client expects.
"""

from datetime import date
from decimal import Decimal
from typing import Literal, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator
from pydantic.alias_generators import to_camel

PlayerType = Literal["member", "guest"]
TransportMode = Literal["riding", "walking"]
HolesPlaying = Literal["9", "18"]


class CamelModel(BaseModel):
    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        from_attributes=True,
    )


class PlayerSpec(CamelModel):
    """One player in a booking request. Blank fields fall back to defaults."""
    name: Optional[str] = None
    type: Optional[PlayerType] = None
    transport_mode: Optional[TransportMode] = None
    holes_playing: Optional[HolesPlaying] = None

    @field_validator("name", "type", "transport_mode", "holes_playing", mode="before")
    @classmethod
    def blank_to_none(cls, v):
        if isinstance(v, str):
            v = v.strip()
        if not v:
            return None
        if isinstance(v, int) and not isinstance(v, bool):
            return str(v)
        return v


class BookRequest(CamelModel):
    user_id: str = Field(min_length=1)
    players: list[PlayerSpec] = Field(min_length=1)


class CancelRequest(CamelModel):
    user_id: str = Field(min_length=1)


class TeeSlotCreate(CamelModel):
    date: date
    time: str
    course: Optional[str] = None
    holes: int = Field(18, gt=0)
    max_players: Optional[int] = Field(None, ge=1)
    price: Optional[Decimal] = Field(None, ge=0)
    is_premium: bool = False


class TeeSlotUpdate(CamelModel):
    """
    Admin override. Player lists are changed only through book/cancel, so
    unknown keys (bookedBy, playerNames, ...) are rejected, not ignored.
    """
    model_config = ConfigDict(extra="forbid")

    time: Optional[str] = None
    course: Optional[str] = None
    holes: Optional[int] = Field(None, gt=0)
    max_players: Optional[int] = Field(None, ge=1)
    price: Optional[Decimal] = Field(None, ge=0)
    is_premium: Optional[bool] = None


class TeeSlotRead(CamelModel):
    id: str
    date: date
    time: str
    course: str
    holes: int
    max_players: int
    price: Decimal
    is_premium: bool

    booked_by: list[str] = []
    player_names: list[str] = []
    player_types: list[str] = []
    transport_modes: list[str] = []
    holes_playing: list[str] = []

    occupancy: int
    spots_available: int
    status: Literal["available", "partial", "full"]


class ResetResponse(CamelModel):
    target_date: Optional[date] = Field(None, alias="date")
    players_removed: int
