from datetime import datetime, timedelta
from typing import Optional
from beanie import PydanticObjectId
from app.features.auth.models import User, UserSession
from app.features.auth.schemas import (
    SignupRequest,
    LoginRequest,
    UpdateProfileRequest,
    UserResponse,
    PreferencesResponse,
    SessionResponse,
)
from app.core.security import (
    verify_password,
    get_password_hash,
    create_access_token,
    generate_session_id,
)
from app.shared.exceptions import ConflictException, CredentialsException
from app.core.logging import logger


class SessionService:
    """Sign-in sessions and their inactivity timeout."""

    @staticmethod
    async def start_session(user: User) -> UserSession:
        """Open a new session using the user's timeout preference."""
        session = UserSession(
            session_id=generate_session_id(),
            user_id=str(user.id),
            timeout_minutes=user.preferences.session_timeout_minutes,
        )
        await session.insert()

        logger.info(f"Started session for user {user.id} ({session.timeout_minutes} min idle timeout)")
        return session

    @staticmethod
    async def validate_session(session_id: str, user_id: str) -> UserSession:
        """
        Check a session is live and record activity on it.

        Raises:
            CredentialsException: If the session is unknown, ended, or idle
                past its timeout. Idle sessions are ended here.
        """
        session = await UserSession.find_one(UserSession.session_id == session_id)

        if not session or session.user_id != user_id or session.is_ended:
            raise CredentialsException("Session has ended. Please sign in again.")

        now = datetime.utcnow()
        if session.is_idle(now):
            await SessionService.end_session(session, reason="inactivity")
            raise CredentialsException("Session expired due to inactivity")

        session.last_activity_at = now
        await session.save()
        return session

    @staticmethod
    async def end_session(session: UserSession, reason: str = "logout") -> None:
        """End a session. Ending an already ended session is a no-op."""
        if session.is_ended:
            return

        session.ended_at = datetime.utcnow()
        session.end_reason = reason
        await session.save()

        logger.info(f"Ended session for user {session.user_id} (reason: {reason})")

    @staticmethod
    def session_to_response(session: UserSession) -> SessionResponse:
        return SessionResponse(
            session_id=session.session_id,
            timeout_minutes=session.timeout_minutes,
            last_activity_at=session.last_activity_at,
            expires_at=session.last_activity_at + timedelta(minutes=session.timeout_minutes),
        )


class AuthService:
    """Authentication service for handling auth business logic."""

    @staticmethod
    def _issue_token(user: User, session: UserSession) -> str:
        return create_access_token(data={"sub": str(user.id), "sid": session.session_id})

    @staticmethod
    async def signup(signup_data: SignupRequest) -> tuple[User, str, UserSession]:
        """
        Register a new user and sign them in.

        Returns:
            tuple: (user, access_token, session)
        """
        existing_user = await User.find_one(User.email == signup_data.email)
        if existing_user:
            raise ConflictException("Email already registered")

        user = User(
            email=signup_data.email,
            password_hash=get_password_hash(signup_data.password),
            display_name=signup_data.display_name.strip(),
            clinic=signup_data.clinic,
            role=signup_data.role,
            last_login=datetime.utcnow(),
        )
        await user.insert()
        logger.info(f"Created user {user.id} ({user.role.value}, {user.clinic.value})")

        session = await SessionService.start_session(user)
        return user, AuthService._issue_token(user, session), session

    @staticmethod
    async def login(login_data: LoginRequest) -> tuple[User, str, UserSession]:
        """
        Authenticate user, record the login and open a session.

        Returns:
            tuple: (user, access_token, session)
        """
        user = await User.find_one(User.email == login_data.email)
        if not user:
            raise CredentialsException("Invalid email or password")

        if not verify_password(login_data.password, user.password_hash):
            raise CredentialsException("Invalid email or password")

        if not user.is_active:
            raise CredentialsException("Account is inactive")

        user.last_login = datetime.utcnow()
        await user.save()

        session = await SessionService.start_session(user)
        return user, AuthService._issue_token(user, session), session

    @staticmethod
    async def update_profile(user: User, request: UpdateProfileRequest) -> User:
        """
        Update user profile information.

        Only fields present in the request are changed. A new session
        timeout applies to sessions started after the change.
        """
        if request.display_name is not None:
            user.display_name = request.display_name.strip()
        if request.clinic is not None:
            user.clinic = request.clinic
        if request.role is not None:
            user.role = request.role

        if request.preferences is not None:
            changes = request.preferences.model_dump(exclude_none=True)
            user.preferences = user.preferences.model_copy(update=changes)

        user.update_timestamp()
        await user.save()

        logger.info(f"Updated profile for user {user.id}")
        return user

    @staticmethod
    async def get_user_by_id(user_id: str) -> Optional[User]:
        """Get user by ID."""
        try:
            return await User.get(PydanticObjectId(user_id))
        except Exception:
            return None

    @staticmethod
    def user_to_response(user: User) -> UserResponse:
        """Convert User model to response schema."""
        return UserResponse(
            id=str(user.id),
            email=user.email,
            display_name=user.display_name,
            clinic=user.clinic,
            role=user.role,
            is_active=user.is_active,
            preferences=PreferencesResponse(**user.preferences.model_dump()),
            created_at=user.created_at,
            last_login=user.last_login,
        )
