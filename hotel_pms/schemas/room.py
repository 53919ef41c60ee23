from __future__ import annotations

from typing import Literal

from pydantic import BaseModel, Field, computed_field

from hotel_pms.domain.currency import NonNegativeMoney

BoardType = Literal["Room only", "Bed & breakfast", "Half board", "Full board"]
RoomStatus = Literal["available", "occupied", "maintenance"]


class RoomCreate(BaseModel):
    type: str = Field(..., min_length=1, max_length=200)
    board_type: BoardType = "Room only"
    description: str = ""
    rate: NonNegativeMoney
    available: bool = True
    status: RoomStatus = "available"
    available_count: int = Field(0, ge=0)


class RoomUpdate(BaseModel):
    type: str | None = Field(None, min_length=1, max_length=200)
    board_type: BoardType | None = None
    description: str | None = None
    rate: NonNegativeMoney | None = None
    available: bool | None = None
    status: RoomStatus | None = None
    available_count: int | None = Field(None, ge=0)


class RoomSnapshot(BaseModel):
    """A room as it looked when it was picked in the wizard."""

    id: str
    hotel_id: str
    type: str
    board_type: BoardType = "Room only"
    description: str = ""
    rate: NonNegativeMoney
    available: bool = True
    status: RoomStatus = "available"
    available_count: int = Field(0, ge=0)

    @computed_field
    @property
    def selectable(self) -> bool:
        return self.available and self.status == "available" and self.available_count > 0


class RoomResponse(RoomSnapshot):
    pass


class RoomListResponse(BaseModel):
    items: list[RoomResponse]
