"""
Authentication for the wellness API.

Accounts are an email/password pair attached to a profile row. Signing up
or signing in issues an opaque bearer token; the resulting ``Session`` is
passed explicitly to every handler that reads or writes user data.

Security notes:
- Passwords are hashed with Passlib (pbkdf2_sha256) and never stored in plain text.
- Tokens expire after ``session_ttl_hours`` and are deleted on sign-out.
"""
import logging
import secrets
import sqlite3
import uuid
from dataclasses import dataclass
from datetime import datetime, timedelta, timezone
from typing import Optional

from fastapi import Depends, Header, HTTPException
from passlib.context import CryptContext

from ..config import get_settings
from ..database import DatabaseManager, PersistenceError, get_db

log = logging.getLogger(__name__)

pwd_context = CryptContext(schemes=["pbkdf2_sha256"], deprecated="auto")


class AuthError(Exception):
    """Sign-up or sign-in was refused."""


@dataclass(frozen=True)
class Session:
    """An authenticated user session."""

    token: str
    user_id: str
    email: str
    expires_at: datetime

    @property
    def expired(self) -> bool:
        return datetime.now(timezone.utc) >= self.expires_at


def hash_password(password: str) -> str:
    return pwd_context.hash(password)


def verify_password(plain_password: str, hashed_password: str) -> bool:
    return pwd_context.verify(plain_password, hashed_password)


class AuthService:
    """Sign-up, sign-in, session lookup and sign-out."""

    def __init__(self, db: DatabaseManager, settings=None):
        self.db = db
        self.settings = settings or get_settings()

    def sign_up(
        self,
        email: str,
        password: str,
        name: str,
        bio: Optional[str] = None,
        location: Optional[str] = None,
    ) -> Session:
        """
        Create a profile plus credentials and open a session for it.

        Raises:
            AuthError: If the email is already registered.
        """
        user_id = str(uuid.uuid4())
        now = datetime.now(timezone.utc).isoformat()
        try:
            with self.db.connect() as conn:
                cursor = conn.cursor()
                cursor.execute(
                    """
                    INSERT INTO profiles (id, name, email, bio, location, created_at)
                    VALUES (?, ?, ?, ?, ?, ?)
                    """,
                    (user_id, name, email, bio, location, now),
                )
                cursor.execute(
                    "INSERT INTO credentials (user_id, email, password_hash) VALUES (?, ?, ?)",
                    (user_id, email, hash_password(password)),
                )
        except sqlite3.IntegrityError:
            log.warning("Signup refused for '%s': email already registered.", email)
            raise AuthError("An account with this email already exists")
        except sqlite3.Error as e:
            log.error("Signup failed for '%s': %s", email, e)
            raise PersistenceError("Failed to create account") from e

        log.info("Created account %s", user_id)
        return self._open_session(user_id, email)

    def sign_in(self, email: str, password: str) -> Session:
        """
        Verify credentials and open a new session.

        Raises:
            AuthError: If the email is unknown or the password is wrong.
        """
        try:
            with self.db.connect() as conn:
                cursor = conn.cursor()
                cursor.execute(
                    "SELECT user_id, password_hash FROM credentials WHERE email = ?",
                    (email,),
                )
                row = cursor.fetchone()
        except sqlite3.Error as e:
            log.error("Sign-in lookup failed: %s", e)
            raise PersistenceError("Failed to sign in") from e

        if not row or not verify_password(password, row["password_hash"]):
            log.warning("Sign-in failed for '%s'", email)
            raise AuthError("Invalid email or password")

        return self._open_session(row["user_id"], email)

    def get_session(self, token: str) -> Optional[Session]:
        """Look up a live session. Expired tokens are removed and yield None."""
        try:
            with self.db.connect() as conn:
                cursor = conn.cursor()
                cursor.execute(
                    """
                    SELECT s.token, s.user_id, s.expires_at, p.email
                    FROM sessions s JOIN profiles p ON p.id = s.user_id
                    WHERE s.token = ?
                    """,
                    (token,),
                )
                row = cursor.fetchone()
                if not row:
                    return None

                session = Session(
                    token=row["token"],
                    user_id=row["user_id"],
                    email=row["email"],
                    expires_at=datetime.fromisoformat(row["expires_at"]),
                )
                if session.expired:
                    cursor.execute("DELETE FROM sessions WHERE token = ?", (token,))
                    return None
        except sqlite3.Error as e:
            log.error("Session lookup failed: %s", e)
            raise PersistenceError("Failed to load session") from e

        return session

    def sign_out(self, token: str) -> None:
        try:
            with self.db.connect() as conn:
                conn.execute("DELETE FROM sessions WHERE token = ?", (token,))
        except sqlite3.Error as e:
            log.error("Sign-out failed: %s", e)
            raise PersistenceError("Failed to sign out") from e

    def _open_session(self, user_id: str, email: str) -> Session:
        now = datetime.now(timezone.utc)
        session = Session(
            token=secrets.token_urlsafe(32),
            user_id=user_id,
            email=email,
            expires_at=now + timedelta(hours=self.settings.session_ttl_hours),
        )
        try:
            with self.db.connect() as conn:
                conn.execute(
                    "INSERT INTO sessions (token, user_id, created_at, expires_at) VALUES (?, ?, ?, ?)",
                    (session.token, user_id, now.isoformat(), session.expires_at.isoformat()),
                )
        except sqlite3.Error as e:
            log.error("Could not open session for %s: %s", user_id, e)
            raise PersistenceError("Failed to open session") from e
        return session


# -------------------------
# FastAPI dependencies
# -------------------------
def get_auth_service(db: DatabaseManager = Depends(get_db)) -> AuthService:
    return AuthService(db)


def _bearer_token(authorization: Optional[str]) -> Optional[str]:
    if not authorization:
        return None
    scheme, _, token = authorization.partition(" ")
    if scheme.lower() != "bearer" or not token.strip():
        return None
    return token.strip()


def require_session(
    authorization: Optional[str] = Header(default=None),
    auth: AuthService = Depends(get_auth_service),
) -> Session:
    """
    FastAPI dependency resolving the bearer token to a Session.
    Raises HTTPException(401) if the token is missing, unknown or expired.
    """
    token = _bearer_token(authorization)
    if not token:
        raise HTTPException(status_code=401, detail="Authorization token required")

    session = auth.get_session(token)
    if not session:
        raise HTTPException(status_code=401, detail="Invalid or expired session")
    return session
