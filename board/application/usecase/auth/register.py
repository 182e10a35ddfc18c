"""Register use case."""

import logfire
from pydantic import BaseModel

from board.application.usecase.auth.user_view import AuthResponse, UserView
from board.application.usecase.base import BaseUseCase
from board.domain.service import JWTService, UserService
from board.domain.value import Email, Username


class RegisterRequest(BaseModel):
    """Register request."""

    username: str
    email: str
    password: str


class RegisterUseCase(BaseUseCase):
    """Use case for creating an account and signing it in."""

    def __init__(self, user_service: UserService, jwt_service: JWTService) -> None:
        """Initialize register use case.

        Args:
            user_service: User domain service
            jwt_service: JWT token domain service
        """
        self.user_service = user_service
        self.jwt_service = jwt_service

    async def execute(self, request: RegisterRequest) -> AuthResponse:
        """Execute register flow.

        Args:
            request: Register request

        Returns:
            Token and profile of the new user

        Raises:
            pydantic.ValidationError: If username or email is malformed
            UserAlreadyExistsError: If username or email is taken
        """
        username = Username(request.username)
        email = Email(request.email)

        user = await self.user_service.register(username, email, request.password)
        token = self.jwt_service.create_token(str(user.id), user.username.root)

        logfire.info("Registration completed", user_id=str(user.id))
        return AuthResponse(token=token, user=UserView.from_user(user))
