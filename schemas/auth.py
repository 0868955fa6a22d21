from pydantic import BaseModel

class LoginUser(BaseModel):
    email: str
    password: str

class LoginStatus(BaseModel):
    access_token: str
    token_type: str = "bearer"
    expires_in: int
    uid: str

class RegistrationStatus(BaseModel):
    success: bool
    message: str
