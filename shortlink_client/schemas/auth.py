from pydantic import BaseModel, ConfigDict, Field
from typing import Optional, Union


class User(BaseModel):
    """Cached profile of the signed-in user (server may send extra fields)"""
    email: str
    id: Optional[Union[int, str]] = None

    model_config = ConfigDict(extra="allow")


class Credentials(BaseModel):
    email: str = Field(..., description="Account email address")
    password: str = Field(..., description="Account password")


class AuthResponse(BaseModel):
    """Body returned by /auth/login and /auth/register"""
    access_token: Optional[str] = None
    user: Optional[User] = None

    model_config = ConfigDict(extra="allow")


class Session(BaseModel):
    """Persisted credential plus cached user profile"""
    token: str
    user: Optional[User] = None
