"""Get current user use case."""

from pydantic import BaseModel

from board.application.usecase.auth.user_view import AuthResponse, UserView
from board.application.usecase.base import BaseUseCase, parse_id
from board.domain.service import JWTService, UserService
from board.domain.value import UserId


class GetCurrentUserRequest(BaseModel):
    """Get current user request."""

    token: str  # JWT token


class GetCurrentUserUseCase(BaseUseCase):
    """Use case for reading the authenticated user's profile."""

    def __init__(self, jwt_service: JWTService, user_service: UserService) -> None:
        """Initialize get current user use case.

        Args:
            jwt_service: JWT token domain service
            user_service: User domain service
        """
        self.jwt_service = jwt_service
        self.user_service = user_service

    async def execute(self, request: GetCurrentUserRequest) -> AuthResponse:
        """Execute get current user flow.

        The token is echoed back so clients can restore a session from one
        response, as on login.

        Raises:
            JWTError: If the token is invalid or expired
            NotFoundError: If the user no longer exists
        """
        payload = self.jwt_service.verify_token(request.token)
        user = await self.user_service.get_by_id(
            parse_id(payload.user_id, UserId, "User")
        )
        return AuthResponse(token=request.token, user=UserView.from_user(user))
