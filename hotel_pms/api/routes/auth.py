import logging

from fastapi import APIRouter, Depends, HTTPException, status
from fastapi.security import OAuth2PasswordRequestForm

from hotel_pms.api import deps
from hotel_pms.core.security import access_token_lifetime, create_access_token
from hotel_pms.crud.user import authenticate_user
from hotel_pms.db.store import JsonStore, get_store
from hotel_pms.schemas.auth import LoginRequest, TokenResponse, UserResponse

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/auth", tags=["auth"])


def _issue_token(user: dict, language: str = "en", remember_me: bool = False) -> TokenResponse:
    lifetime = access_token_lifetime(remember_me)
    token = create_access_token(
        user["username"], expires_delta=lifetime, extra_claims={"lang": language}
    )
    return TokenResponse(
        access_token=token,
        expires_in=int(lifetime.total_seconds()),
        language=language,
    )


async def _authenticate_or_401(store: JsonStore, username: str, password: str) -> dict:
    user = await authenticate_user(store, username, password)
    if not user:
        logger.warning("Failed login attempt for %s", username)
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Incorrect username or password",
            headers={"WWW-Authenticate": "Bearer"},
        )
    logger.info("User %s signed in", user["username"])
    return user


@router.post("/login", response_model=TokenResponse)
async def login(payload: LoginRequest, store: JsonStore = Depends(get_store)):
    """Sign in from the login screen."""
    user = await _authenticate_or_401(store, payload.username, payload.password)
    return _issue_token(user, payload.language, payload.remember_me)


@router.post("/token", response_model=TokenResponse)
async def login_for_access_token(
    form_data: OAuth2PasswordRequestForm = Depends(),
    store: JsonStore = Depends(get_store),
):
    """OAuth2 password flow, used by the interactive docs."""
    user = await _authenticate_or_401(store, form_data.username, form_data.password)
    return _issue_token(user)


@router.get("/me", response_model=UserResponse)
async def read_current_user(current_user: dict = Depends(deps.get_current_user)):
    return current_user
