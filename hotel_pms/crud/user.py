from __future__ import annotations

from hotel_pms.core.security import verify_password
from hotel_pms.db.store import JsonStore


async def get_user_by_username(store: JsonStore, username: str) -> dict | None:
    normalized = username.strip().lower()
    for user in store.all("users"):
        if (user.get("username") or "").lower() == normalized:
            return user
    return None


async def authenticate_user(store: JsonStore, username: str, password: str) -> dict | None:
    user = await get_user_by_username(store, username)
    if not user or not user.get("is_active", True):
        return None
    if not verify_password(password, user.get("password_hash")):
        return None
    return user
