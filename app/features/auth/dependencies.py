from fastapi import Depends
from fastapi.security import HTTPBearer, HTTPAuthorizationCredentials
from app.features.auth.models import User, UserSession
from app.features.auth.service import AuthService, SessionService
from app.core.security import decode_token
from app.core.logging import logger
from app.shared.exceptions import CredentialsException


# HTTP Bearer security scheme
security = HTTPBearer()


async def get_current_session(
    credentials: HTTPAuthorizationCredentials = Depends(security)
) -> UserSession:
    """
    Dependency to get the live session behind the bearer token.

    Counts the request as activity, resetting the inactivity timer.

    Raises:
        CredentialsException: If the token or session is invalid
    """
    payload = decode_token(credentials.credentials)
    if payload is None:
        raise CredentialsException("Invalid authentication credentials")

    user_id = payload.get("sub")
    session_id = payload.get("sid")
    if user_id is None or session_id is None:
        logger.warning("Token missing 'sub' or 'sid' claim")
        raise CredentialsException("Invalid authentication credentials")

    return await SessionService.validate_session(session_id, user_id)


async def get_current_user(
    session: UserSession = Depends(get_current_session)
) -> User:
    """
    Dependency to get current authenticated user.

    Raises:
        CredentialsException: If the user is missing or inactive
    """
    user = await AuthService.get_user_by_id(session.user_id)
    if user is None:
        raise CredentialsException("User not found")

    if not user.is_active:
        raise CredentialsException("Inactive user")

    return user
