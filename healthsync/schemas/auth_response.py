from __future__ import annotations
from enum import Enum
from typing import Any, Dict, Optional

from healthsync.schemas.shared import CamelModel, SuccessResponse, UserOut, UserSummary


class TokenType(Enum):
    bearer = 'bearer'


class AuthTokens(CamelModel):
    status: str = "success"
    access_token: str
    refresh_token: str
    token_type: TokenType
    expires_in: int


class LoginResponse(CamelModel):
    status: str = "success"
    message: str = "Login successful"
    user: UserSummary
    profile: Optional[Dict[str, Any]] = None
    token: str
    refresh_token: str
    token_type: TokenType = TokenType.bearer
    expires_in: int


class MeResponse(SuccessResponse):
    data: UserOut
