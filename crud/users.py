import logging
import uuid
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session
from typing import Optional
from models.user import User
from schemas.user import User as UserDTO, UserCreate, UserUpdate, UserList
from utils.exceptions import AlreadyExistsError, InvalidInputError, NotFoundError, UnauthorizedError
from utils.mappers import normalize_cpf, to_user_dto
from utils.security import hash_password, verify_password

logger = logging.getLogger(__name__)


def _get_user_entity(db: Session, user_id: int) -> User:
    db_user = db.query(User).filter(User.id == user_id).first()
    if db_user is None:
        raise NotFoundError("User not found")
    return db_user

def _get_by_email(db: Session, email: str) -> Optional[User]:
    return db.query(User).filter(User.email == email).first()

def _commit_unique_email(db: Session, email: str) -> None:
    try:
        db.commit()
    except IntegrityError:
        db.rollback()
        logger.warning("email %s taken by a concurrent request", email)
        raise AlreadyExistsError("User already exists")

def create_user(db: Session, user: UserCreate) -> UserDTO:
    if _get_by_email(db, user.email):
        logger.warning("registration refused, email %s already in use", user.email)
        raise AlreadyExistsError("User already exists")

    db_user = User(
        uid=str(uuid.uuid4()),
        name=user.name,
        email=user.email,
        password=hash_password(user.password),
        cpf=normalize_cpf(user.cpf),
    )
    db.add(db_user)
    _commit_unique_email(db, user.email)
    db.refresh(db_user)
    logger.info("created user %s (%s)", db_user.id, db_user.uid)
    return to_user_dto(db_user)

def get_user(db: Session, user_id: int) -> UserDTO:
    return to_user_dto(_get_user_entity(db, user_id))

def get_users(db: Session) -> UserList:
    return UserList(users=[to_user_dto(u) for u in db.query(User).order_by(User.id).all()])

def update_user(db: Session, user_id: int, user_update: UserUpdate) -> UserDTO:
    db_user = _get_user_entity(db, user_id)
    update_data = user_update.model_dump(exclude_unset=True, exclude_none=True)

    if "email" in update_data and update_data["email"] != db_user.email:
        if _get_by_email(db, update_data["email"]):
            raise AlreadyExistsError("User already exists")
    if "password" in update_data:
        update_data["password"] = hash_password(update_data["password"])
    if "cpf" in update_data:
        update_data["cpf"] = normalize_cpf(update_data["cpf"])

    for field, value in update_data.items():
        setattr(db_user, field, value)
    _commit_unique_email(db, db_user.email)
    db.refresh(db_user)
    return to_user_dto(db_user)

def delete_user(db: Session, user_id: int) -> None:
    db_user = _get_user_entity(db, user_id)
    if db_user.documents:
        raise InvalidInputError("Cannot delete user with documents")
    db.delete(db_user)
    db.commit()
    logger.info("deleted user %s", user_id)

def find_by_credentials(db: Session, email: str, password: str) -> UserDTO:
    db_user = _get_by_email(db, email)
    if db_user is None:
        raise NotFoundError("User not found")
    if not verify_password(password, db_user.password):
        logger.warning("invalid credentials for %s", email)
        raise UnauthorizedError("Invalid credentials")
    return to_user_dto(db_user)

def find_by_uid(db: Session, uid: str) -> Optional[UserDTO]:
    db_user = db.query(User).filter(User.uid == uid).first()
    return to_user_dto(db_user) if db_user else None
