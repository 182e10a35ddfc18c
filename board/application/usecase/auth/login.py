"""Login use case."""

from pydantic import BaseModel

from board.application.usecase.auth.user_view import AuthResponse, UserView
from board.application.usecase.base import BaseUseCase
from board.domain.error import InvalidCredentialsError
from board.domain.service import JWTService, UserService
from board.domain.value import Email


class LoginRequest(BaseModel):
    """Login request."""

    email: str
    password: str


class LoginUseCase(BaseUseCase):
    """Use case for password login."""

    def __init__(self, user_service: UserService, jwt_service: JWTService) -> None:
        """Initialize login use case.

        Args:
            user_service: User domain service
            jwt_service: JWT token domain service
        """
        self.user_service = user_service
        self.jwt_service = jwt_service

    async def execute(self, request: LoginRequest) -> AuthResponse:
        """Execute login flow.

        Raises:
            InvalidCredentialsError: If the email or password is wrong
        """
        try:
            email = Email(request.email)
        except ValueError:
            # Same answer as an unknown email
            raise InvalidCredentialsError()

        user = await self.user_service.authenticate(email, request.password)
        token = self.jwt_service.create_token(str(user.id), user.username.root)
        return AuthResponse(token=token, user=UserView.from_user(user))
