"""User account routes."""

from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter, Depends, HTTPException, status
from fastapi.security import HTTPAuthorizationCredentials
from pydantic import BaseModel, Field

from board.application.usecase.auth import (
    AuthResponse,
    GetCurrentUserRequest,
    GetCurrentUserUseCase,
    LoginRequest,
    LoginUseCase,
    RegisterRequest,
    RegisterUseCase,
)
from board.interface.api.auth import bearer_scheme
from board.interface.error import to_http_exception

router = APIRouter(prefix="/users", tags=["users"], route_class=DishkaRoute)


class RegisterAPIRequest(BaseModel):
    """API request for registering an account."""

    username: str
    email: str
    password: str = Field(min_length=6, max_length=128)


class LoginAPIRequest(BaseModel):
    """API request for logging in."""

    email: str
    password: str


@router.post(
    "/register", response_model=AuthResponse, status_code=status.HTTP_201_CREATED
)
async def register(
    request: RegisterAPIRequest,
    register_use_case: FromDishka[RegisterUseCase],
) -> AuthResponse:
    """Create an account and return a bearer token for it."""
    try:
        return await register_use_case.execute(
            RegisterRequest(
                username=request.username,
                email=request.email,
                password=request.password,
            )
        )
    except Exception as e:
        raise to_http_exception(e, "registering user") from e


@router.post("/login", response_model=AuthResponse)
async def login(
    request: LoginAPIRequest,
    login_use_case: FromDishka[LoginUseCase],
) -> AuthResponse:
    """Exchange email and password for a bearer token."""
    try:
        return await login_use_case.execute(
            LoginRequest(email=request.email, password=request.password)
        )
    except Exception as e:
        raise to_http_exception(e, "logging in") from e


@router.get("/profile", response_model=AuthResponse)
async def get_profile(
    get_current_user_use_case: FromDishka[GetCurrentUserUseCase],
    credentials: HTTPAuthorizationCredentials | None = Depends(bearer_scheme),
) -> AuthResponse:
    """Get the authenticated user's profile.

    Raises:
        HTTPException: 401 if the token is missing or invalid
    """
    if credentials is None:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Authentication required",
            headers={"WWW-Authenticate": "Bearer"},
        )

    try:
        return await get_current_user_use_case.execute(
            GetCurrentUserRequest(token=credentials.credentials)
        )
    except Exception as e:
        raise to_http_exception(e, "fetching profile") from e
