import logging
from sqlalchemy.orm import Session
from config import Settings
from crud import users
from schemas.auth import LoginUser, LoginStatus, RegistrationStatus
from schemas.user import User, UserCreate
from utils.exceptions import AppError, UnauthorizedError
from utils.security import create_access_token

logger = logging.getLogger(__name__)


def register(db: Session, user: UserCreate) -> RegistrationStatus:
    """Create the account; failures come back as a status instead of an exception."""
    try:
        users.create_user(db, user)
    except AppError as e:
        return RegistrationStatus(success=False, message=e.message or "user registration failed")
    except Exception:
        db.rollback()
        logger.exception("user registration failed for %s", user.email)
        return RegistrationStatus(success=False, message="user registration failed")
    return RegistrationStatus(success=True, message="user registered")

def login(db: Session, credentials: LoginUser, settings: Settings) -> LoginStatus:
    user = users.find_by_credentials(db, credentials.email, credentials.password)
    token = create_access_token(user.uid, settings)
    logger.info("issued token for %s", user.uid)
    return LoginStatus(access_token=token, expires_in=settings.EXPIRES_IN, uid=user.uid)

def validate(db: Session, payload: dict) -> User:
    user = users.find_by_uid(db, payload.get("uid"))
    if user is None:
        raise UnauthorizedError("Invalid token")
    return user
