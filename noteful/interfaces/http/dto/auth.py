from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field, StrictStr


class LoginRequestDTO(BaseModel):
    username: StrictStr = Field(min_length=1)
    password: StrictStr = Field(min_length=1)  # no strength rules on login


class AuthTokenDTO(BaseModel):
    model_config = ConfigDict(validate_by_name=True)

    auth_token: str = Field(alias="authToken")


class UserDTO(BaseModel):
    id: str
    username: str
    fullname: str = ""
