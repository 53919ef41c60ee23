from fastapi import Depends, HTTPException, status
from fastapi.security import OAuth2PasswordBearer
from jose import JWTError

from hotel_pms.core.security import decode_access_token
from hotel_pms.crud.user import get_user_by_username
from hotel_pms.db.store import JsonStore, get_store

oauth2_scheme = OAuth2PasswordBearer(tokenUrl="/auth/token")


async def get_current_user(
    token: str = Depends(oauth2_scheme),
    store: JsonStore = Depends(get_store),
) -> dict:
    """Get current user from the bearer JWT."""
    credentials_exception = HTTPException(
        status_code=status.HTTP_401_UNAUTHORIZED,
        detail="Could not validate credentials",
        headers={"WWW-Authenticate": "Bearer"},
    )

    try:
        payload = decode_access_token(token)
        username: str | None = payload.get("sub")
        if username is None:
            raise credentials_exception
    except (JWTError, ValueError):
        raise credentials_exception

    user = await get_user_by_username(store, username)
    if user is None or not user.get("is_active", True):
        raise credentials_exception

    return {**user, "language": payload.get("lang", "en")}
