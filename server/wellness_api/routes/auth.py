"""Account and session API routes."""
import logging

from fastapi import APIRouter, Depends, HTTPException

from ..dependencies import get_profile_store
from ..models.profile import Profile, SessionResponse, SignInRequest, SignUpRequest
from ..services.auth import AuthError, AuthService, Session, get_auth_service, require_session
from ..stores import ProfileStore

log = logging.getLogger(__name__)

router = APIRouter(prefix="/api/auth", tags=["Auth"])


def _session_response(session: Session, profiles: ProfileStore) -> SessionResponse:
    profile = profiles.get(session.user_id)
    if not profile:
        raise HTTPException(status_code=404, detail="Profile not found")
    return SessionResponse(
        access_token=session.token,
        expires_at=session.expires_at,
        profile=profile,
    )


@router.post("/signup", response_model=SessionResponse, status_code=201)
async def sign_up(
    body: SignUpRequest,
    auth: AuthService = Depends(get_auth_service),
    profiles: ProfileStore = Depends(get_profile_store),
):
    """Create an account and its profile, and sign the user in."""
    try:
        session = auth.sign_up(
            email=body.email,
            password=body.password,
            name=body.name.strip(),
            bio=body.bio,
            location=body.location,
        )
    except AuthError as e:
        raise HTTPException(status_code=409, detail=str(e))
    return _session_response(session, profiles)


@router.post("/signin", response_model=SessionResponse)
async def sign_in(
    body: SignInRequest,
    auth: AuthService = Depends(get_auth_service),
    profiles: ProfileStore = Depends(get_profile_store),
):
    try:
        session = auth.sign_in(body.email, body.password)
    except AuthError as e:
        raise HTTPException(status_code=401, detail=str(e))
    return _session_response(session, profiles)


@router.get("/session", response_model=Profile)
async def current_session(
    session: Session = Depends(require_session),
    profiles: ProfileStore = Depends(get_profile_store),
):
    """Return the profile behind the current bearer token."""
    profile = profiles.get(session.user_id)
    if not profile:
        raise HTTPException(status_code=404, detail="Profile not found")
    return profile


@router.post("/signout", status_code=204)
async def sign_out(
    session: Session = Depends(require_session),
    auth: AuthService = Depends(get_auth_service),
):
    auth.sign_out(session.token)
    log.info("User %s signed out", session.user_id)
