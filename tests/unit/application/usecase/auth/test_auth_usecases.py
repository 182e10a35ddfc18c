"""Unit tests for register, login and profile use cases."""

import pydantic
import pytest

from board.application.usecase.auth import (
    GetCurrentUserRequest,
    GetCurrentUserUseCase,
    LoginRequest,
    LoginUseCase,
    RegisterRequest,
    RegisterUseCase,
)
from board.config import AuthSettings
from board.domain.error import InvalidCredentialsError, UserAlreadyExistsError
from board.domain.service import JWTService
from board.util.jwt import JWTError, create_token
from tests.harness import create_env_fixture

# Unit test fixture
unit_env = create_env_fixture()


async def _register(unit_env, username="alice", email="alice@example.com"):
    register = await unit_env.get(RegisterUseCase)
    return await register.execute(
        RegisterRequest(username=username, email=email, password="secret123")
    )


class TestRegister:
    """Tests for RegisterUseCase."""

    @pytest.mark.asyncio
    async def test_register_returns_token_for_new_user(self, unit_env):
        """The token identifies the newly registered user."""
        result = await _register(unit_env)
        jwt_service = await unit_env.get(JWTService)

        payload = jwt_service.verify_token(result.token)

        assert payload.user_id == result.user.id
        assert payload.username == "alice"
        assert result.user.email == "alice@example.com"
        assert result.user.last_login_at is None

    @pytest.mark.asyncio
    async def test_invalid_username_is_rejected(self, unit_env):
        """Usernames must match the allowed pattern."""
        register = await unit_env.get(RegisterUseCase)

        with pytest.raises(pydantic.ValidationError):
            await register.execute(
                RegisterRequest(username="a b", email="x@example.com", password="pw")
            )

    @pytest.mark.asyncio
    async def test_taken_email_is_rejected(self, unit_env):
        """Registering an email twice fails."""
        await _register(unit_env)

        with pytest.raises(UserAlreadyExistsError):
            await _register(unit_env, username="alice2")


class TestLogin:
    """Tests for LoginUseCase."""

    @pytest.mark.asyncio
    async def test_login_with_correct_password(self, unit_env):
        """Correct credentials return a token and record the login."""
        registered = await _register(unit_env)
        login = await unit_env.get(LoginUseCase)

        result = await login.execute(
            LoginRequest(email="ALICE@example.com", password="secret123")
        )

        assert result.user.id == registered.user.id
        assert result.user.last_login_at is not None
        assert result.token

    @pytest.mark.asyncio
    async def test_malformed_email_is_invalid_credentials(self, unit_env):
        """A malformed email is answered like an unknown one."""
        login = await unit_env.get(LoginUseCase)

        with pytest.raises(InvalidCredentialsError):
            await login.execute(LoginRequest(email="not-an-email", password="x"))


class TestGetCurrentUser:
    """Tests for GetCurrentUserUseCase."""

    @pytest.mark.asyncio
    async def test_profile_for_valid_token(self, unit_env):
        """A valid token resolves to its user."""
        registered = await _register(unit_env)
        get_current_user = await unit_env.get(GetCurrentUserUseCase)

        result = await get_current_user.execute(
            GetCurrentUserRequest(token=registered.token)
        )

        assert result.user.username == "alice"
        assert result.token == registered.token

    @pytest.mark.asyncio
    async def test_foreign_token_is_rejected(self, unit_env):
        """A token signed with another secret raises JWTError."""
        registered = await _register(unit_env)
        forged = create_token(
            registered.user.id, "alice", AuthSettings(jwt_secret="someone-else")
        )
        get_current_user = await unit_env.get(GetCurrentUserUseCase)

        with pytest.raises(JWTError):
            await get_current_user.execute(GetCurrentUserRequest(token=forged))
