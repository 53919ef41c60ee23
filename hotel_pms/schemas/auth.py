from __future__ import annotations

from typing import Literal

from pydantic import BaseModel, Field

Language = Literal["en", "ar"]


class LoginRequest(BaseModel):
    username: str = Field(..., min_length=1, max_length=150)
    password: str = Field(..., min_length=1)
    language: Language = "en"
    remember_me: bool = False


class TokenResponse(BaseModel):
    access_token: str
    token_type: str = "bearer"
    expires_in: int
    language: Language = "en"


class UserResponse(BaseModel):
    id: str
    username: str
    full_name: str | None = None
    language: Language = "en"
