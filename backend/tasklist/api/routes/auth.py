"""Auth Routes: sign-up and sign-in.

Invariants:
    - sign-up returns the new user id only; no token is issued
    - sign-in failures are 401 INVALID_CREDENTIALS regardless of cause
"""

from fastapi import APIRouter, Depends, status

from tasklist.api.dependencies import get_auth_service
from tasklist.schemas.auth import (
    SignUpInput, SignUpResponse, SignInInput, SignInResponse,
)
from tasklist.services.auth_service import AuthService

router = APIRouter(prefix="/auth", tags=["auth"])


@router.post(
    "/sign-up", response_model=SignUpResponse,
    status_code=status.HTTP_201_CREATED,
)
async def sign_up(
    body: SignUpInput, auth: AuthService = Depends(get_auth_service),
):
    """Register a new account."""
    user_id = await auth.register(body.username, body.password, name=body.name)
    return SignUpResponse(id=user_id)


@router.post("/sign-in", response_model=SignInResponse)
async def sign_in(
    body: SignInInput, auth: AuthService = Depends(get_auth_service),
):
    """Exchange credentials for a bearer token."""
    token = await auth.login(body.username, body.password)
    return SignInResponse(
        token=token, expires_in=int(auth.tokens.ttl.total_seconds()),
    )
