"""Bearer token authentication for routes."""

from fastapi import HTTPException, status
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer

from board.domain.service import JWTService

bearer_scheme = HTTPBearer(auto_error=False)


def require_user_id(
    jwt_service: JWTService, credentials: HTTPAuthorizationCredentials | None
) -> str:
    """Return the user ID carried by the bearer token.

    Args:
        jwt_service: JWT service for token verification
        credentials: Parsed Authorization header, if any

    Raises:
        HTTPException: 401 if the token is missing, invalid or expired
    """
    token = credentials.credentials if credentials else None
    user_id = jwt_service.get_user_id_from_token(token)
    if not user_id:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Authentication required",
            headers={"WWW-Authenticate": "Bearer"},
        )
    return user_id
