from fastapi import APIRouter, Depends, HTTPException
from sqlalchemy.orm import Session
from config import Settings, get_settings
from database import get_db
from schemas.auth import LoginUser, LoginStatus, RegistrationStatus
from schemas.user import User, UserCreate
from crud import auth
from crud.api.v1.deps import get_current_user

router = APIRouter()

@router.post("/register", response_model=RegistrationStatus)
def register(user: UserCreate, db: Session = Depends(get_db)):
    result = auth.register(db, user)
    if not result.success:
        raise HTTPException(status_code=400, detail=result.message)
    return result

@router.post("/login", response_model=LoginStatus)
def login(credentials: LoginUser, db: Session = Depends(get_db), settings: Settings = Depends(get_settings)):
    return auth.login(db, credentials, settings)

@router.get("/whoami", response_model=User)
def whoami(current_user: User = Depends(get_current_user)):
    return current_user
