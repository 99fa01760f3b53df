from typing import Optional
from uuid import UUID

from fastapi import APIRouter, Body, Cookie, Depends, HTTPException, Response, status
from sqlalchemy.ext.asyncio import AsyncSession

from healthsync.config.constants import Role
from healthsync.config.settings import env, settings
from healthsync.core.auth import create_tokens_for_user
from healthsync.core.middleware import get_current_user, get_db
from healthsync.db.crud.auth import authenticate_user, create_user, refresh_user_token
from healthsync.db.crud.user import get_user, profile_for
from healthsync.db.models.user import UserModel
from healthsync.schemas.auth_response import AuthTokens, LoginResponse, MeResponse
from healthsync.schemas.login_request import LoginRequest, RefreshRequest
from healthsync.schemas.register_request import RegisterRequest, RegisterResponse
from healthsync.schemas.shared import CaretakerOut, DoctorOut, PatientOut, UserOut, UserSummary

router = APIRouter(
    prefix="/auth",
    tags=["auth"],
)

# determine secure flag
secure_cookie = env == "production"

_PROFILE_SCHEMAS = {
    Role.PATIENT: PatientOut,
    Role.DOCTOR: DoctorOut,
    Role.CARETAKER: CaretakerOut,
}


def _set_auth_cookies(response: Response, tokens: AuthTokens) -> None:
    cookies = (
        ("session", tokens.access_token, settings.access_token_expire_minutes * 60),
        ("refresh", tokens.refresh_token, settings.refresh_token_expire_days * 86400),
    )
    for key, value, max_age in cookies:
        response.set_cookie(
            key=key,
            value=value,
            httponly=True,
            secure=secure_cookie,
            samesite="lax",
            max_age=max_age,
        )


def _profile_payload(user: UserModel) -> Optional[dict]:
    profile = profile_for(user)
    if profile is None:
        return None
    schema = _PROFILE_SCHEMAS[Role(user.role)]
    return schema.model_validate(profile).model_dump(by_alias=True, mode="json")


@router.post("/register", response_model=RegisterResponse, status_code=status.HTTP_201_CREATED)
async def register(
    user_data: RegisterRequest,
    db: AsyncSession = Depends(get_db)
):
    new_user = await create_user(db, user_data)
    return RegisterResponse(user=UserSummary.model_validate(new_user))

@router.post("/login", response_model=LoginResponse)
async def login(
    login_data: LoginRequest,
    response: Response,
    db: AsyncSession = Depends(get_db)
):
    user = await authenticate_user(db, login_data)
    if not user:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Invalid credentials",
            headers={"WWW-Authenticate": "Bearer"},
        )
    tokens = create_tokens_for_user(user)
    _set_auth_cookies(response, tokens)
    return LoginResponse(
        user=UserSummary.model_validate(user),
        profile=_profile_payload(user),
        token=tokens.access_token,
        refresh_token=tokens.refresh_token,
        expires_in=tokens.expires_in,
    )

@router.post("/refresh", response_model=AuthTokens)
async def refresh(
    response: Response,
    payload: Optional[RefreshRequest] = Body(None),
    refresh_cookie: Optional[str] = Cookie(None, alias="refresh"),
    db: AsyncSession = Depends(get_db)
):
    refresh_token = (payload.refresh_token if payload else None) or refresh_cookie
    tokens = await refresh_user_token(db, refresh_token)
    _set_auth_cookies(response, tokens)
    return tokens

@router.post("/logout", status_code=status.HTTP_204_NO_CONTENT)
async def logout():
    # cookies must be cleared on the response actually returned
    response = Response(status_code=status.HTTP_204_NO_CONTENT)
    for cookie in ("session", "refresh"):
        response.delete_cookie(key=cookie, httponly=True, secure=secure_cookie, samesite="lax")
    return response

@router.get("/me", response_model=MeResponse)
async def me(
    current_user: dict = Depends(get_current_user),
    db: AsyncSession = Depends(get_db)
):
    user = await get_user(db, UUID(current_user["user_id"]))
    if not user:
        raise HTTPException(status_code=status.HTTP_401_UNAUTHORIZED, detail="User not found")
    return MeResponse(data=UserOut.model_validate(user))
