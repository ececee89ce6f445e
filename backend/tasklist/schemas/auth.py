"""Auth Schemas: sign-up and sign-in payloads.

Invariants:
    - username stripped and non-empty; password non-empty
    - SignInResponse carries the bearer token and its lifetime in seconds
"""

from pydantic import BaseModel, Field, field_validator


class SignUpInput(BaseModel):
    """Account registration."""
    name: str = Field("", max_length=255)
    username: str = Field(min_length=1, max_length=255)
    password: str = Field(min_length=1, max_length=1024)

    @field_validator("username")
    @classmethod
    def strip_username(cls, v: str) -> str:
        v = v.strip()
        if not v:
            raise ValueError("username cannot be empty or whitespace")
        return v


class SignInInput(BaseModel):
    """Credentials for token exchange."""
    username: str = Field(min_length=1, max_length=255)
    password: str = Field(min_length=1, max_length=1024)


class SignUpResponse(BaseModel):
    id: int


class SignInResponse(BaseModel):
    token: str
    token_type: str = "bearer"
    expires_in: int
