"""
Pydantic schemas for session authentication
"""

from typing import Annotated

from pydantic import BaseModel, ConfigDict, Field, StringConstraints

# Usernames are compared after trimming; passwords are taken verbatim.
Username = Annotated[str, StringConstraints(strip_whitespace=True, min_length=1)]


class LoginRequest(BaseModel):
    """Body of POST /api/login"""

    username: Username
    password: str = Field(..., min_length=1)


class RegisterRequest(BaseModel):
    """Body of POST /api/register"""
    model_config = ConfigDict(populate_by_name=True)

    username: Annotated[str, StringConstraints(strip_whitespace=True, min_length=3, max_length=80)]
    password: str = Field(..., min_length=6)
    display_name: Annotated[
        str, StringConstraints(strip_whitespace=True, min_length=1, max_length=120)
    ] = Field(..., alias="displayName")
