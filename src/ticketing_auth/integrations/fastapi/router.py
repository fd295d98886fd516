"""FastAPI auth router — factory that creates the signup endpoint bound to a config."""

from collections.abc import Callable
from typing import Annotated

from fastapi import APIRouter, Depends, HTTPException
from sqlalchemy.ext.asyncio import AsyncSession

from ticketing_auth.config import TicketingAuthConfig
from ticketing_auth.core.auth import AuthError, signup
from ticketing_auth.core.schemas import ErrorResponse, SignupRequest, UserResponse
from ticketing_auth.events import get_collector


def _auth_error_detail(e: AuthError) -> dict:
    """Build HTTPException detail dict from an AuthError."""
    detail = {"error": e.code, "message": e.message}
    if e.extra:
        detail.update(e.extra)
    return detail


def create_auth_router(config: TicketingAuthConfig, get_db: Callable) -> APIRouter:
    """Create a FastAPI router with the signup endpoint.

    Args:
        config: The TicketingAuthConfig instance.
        get_db: An async generator dependency that yields AsyncSession.
    """
    router = APIRouter(tags=["auth"], responses={400: {"model": ErrorResponse}})

    @router.post("/signup", response_model=UserResponse, status_code=201)
    async def signup_endpoint(
        data: SignupRequest,
        session: Annotated[AsyncSession, Depends(get_db)],
    ):
        """Register a new user with email and password."""
        if not config.allow_signup:
            raise HTTPException(
                status_code=403,
                detail={"error": "signup_disabled", "message": "Registration is currently disabled"},
            )
        try:
            return await signup(
                session,
                config=config,
                email=data.email,
                password=data.password,
                events=get_collector(),
            )
        except AuthError as e:
            raise HTTPException(status_code=e.status_code, detail=_auth_error_detail(e))

    return router
