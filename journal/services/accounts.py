"""Account registration, password login and demo account seeding."""

import logging

from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from journal.core.security import hash_password, verify_password
from journal.models.user import ROLE_ADMIN, ROLE_USER, ROLES, User
from journal.schemas.auth import SessionView
from journal.services.errors import DuplicateUsername, InvalidCredentials

logger = logging.getLogger(__name__)

INVALID_CREDENTIALS_MESSAGE = "Invalid username or password"

# (username, password, role) created at startup when missing.
DEMO_ACCOUNTS = (
    ("admin", "admin123", ROLE_ADMIN),
    ("user", "user123", ROLE_USER),
)


def get_user_by_username(db: Session, username: str) -> User | None:
    return db.query(User).filter(User.username == username).first()


def register(db: Session, username: str, password: str, role: str | None = None) -> User:
    """
    Create an account with a bcrypt-hashed password.

    role falls back to 'user' when missing or unknown. Raises DuplicateUsername
    if the username is taken; the existing account is left untouched.
    """
    if role not in ROLES:
        role = ROLE_USER
    if get_user_by_username(db, username) is not None:
        raise DuplicateUsername(f"Username '{username}' already exists")

    user = User(username=username, password_hash=hash_password(password), role=role)
    db.add(user)
    try:
        db.commit()
    except IntegrityError as e:
        # Lost a race with a concurrent registration of the same name
        db.rollback()
        raise DuplicateUsername(f"Username '{username}' already exists", cause=e) from e
    db.refresh(user)
    logger.info("Registered user %s with role %s", username, role)
    return user


def authenticate(db: Session, username: str, password: str) -> SessionView:
    """
    Check a username/password pair and return the identity to store in a session.

    Unknown usernames and wrong passwords raise the same InvalidCredentials.
    """
    user = get_user_by_username(db, username)
    if user is None or not verify_password(password, user.password_hash):
        raise InvalidCredentials(INVALID_CREDENTIALS_MESSAGE)
    return SessionView(user_id=user.id, username=user.username, role=user.role)


def ensure_demo_users(db: Session) -> list[str]:
    """Create the demo accounts that do not exist yet. Returns the usernames created."""
    created: list[str] = []
    for username, password, role in DEMO_ACCOUNTS:
        if get_user_by_username(db, username) is not None:
            continue
        try:
            register(db, username, password, role)
        except DuplicateUsername:
            continue
        logger.info("Demo %s user created: %s", role, username)
        created.append(username)
    return created
