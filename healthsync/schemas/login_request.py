from __future__ import annotations
from typing import Annotated, Optional

from pydantic import ConfigDict, EmailStr, Field

from healthsync.schemas.shared import CamelModel


class LoginRequest(CamelModel):
    model_config = ConfigDict(extra='forbid')

    email: EmailStr
    password: Annotated[str, Field(min_length=1, max_length=128)]


class RefreshRequest(CamelModel):
    refresh_token: Optional[str] = None
