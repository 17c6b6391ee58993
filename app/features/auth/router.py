from fastapi import APIRouter, Depends, status
from app.features.auth.schemas import (
    SignupRequest,
    LoginRequest,
    LoginResponse,
    UpdateProfileRequest,
    UserResponse,
    SessionResponse,
)
from app.features.auth.service import AuthService, SessionService
from app.features.auth.dependencies import get_current_user, get_current_session
from app.features.auth.models import User, UserSession
from app.shared.schemas import MessageResponse


router = APIRouter(prefix="/auth", tags=["Authentication"])


@router.post("/signup", response_model=LoginResponse, status_code=status.HTTP_201_CREATED)
async def signup(signup_data: SignupRequest):
    """
    Register a new user and sign them in.

    - **display_name**: User's display name
    - **email**: User's email address
    - **password**: Strong password (min 8 chars, 1 uppercase, 1 lowercase, 1 digit)
    - **clinic**: Clinic affiliation
    - **role**: resident, attending, nurse or admin
    """
    user, access_token, session = await AuthService.signup(signup_data)

    return LoginResponse(
        access_token=access_token,
        user=AuthService.user_to_response(user),
        session=SessionService.session_to_response(session),
    )


@router.post("/login", response_model=LoginResponse)
async def login(login_data: LoginRequest):
    """
    Authenticate user and return access token.

    Each login starts a new session with the user's inactivity timeout.
    """
    user, access_token, session = await AuthService.login(login_data)

    return LoginResponse(
        access_token=access_token,
        user=AuthService.user_to_response(user),
        session=SessionService.session_to_response(session),
    )


@router.get("/me", response_model=UserResponse)
async def get_me(current_user: User = Depends(get_current_user)):
    """Get the current user's profile."""
    return AuthService.user_to_response(current_user)


@router.patch("/me", response_model=UserResponse)
async def update_me(
    request: UpdateProfileRequest,
    current_user: User = Depends(get_current_user)
):
    """Update display name, clinic, role or preferences."""
    user = await AuthService.update_profile(current_user, request)
    return AuthService.user_to_response(user)


@router.post("/session/ping", response_model=SessionResponse)
async def ping_session(
    session: UserSession = Depends(get_current_session),
    current_user: User = Depends(get_current_user)
):
    """
    Record user activity.

    Clients call this on keyboard, pointer, scroll and touch activity to
    keep the session alive.
    """
    return SessionService.session_to_response(session)


@router.post("/logout", response_model=MessageResponse)
async def logout(
    session: UserSession = Depends(get_current_session),
    current_user: User = Depends(get_current_user)
):
    """Sign out and end the current session."""
    await SessionService.end_session(session, reason="logout")
    return MessageResponse(message="Logged out successfully")
