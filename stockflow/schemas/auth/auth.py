# stockflow/schemas/auth/auth.py
from pydantic import BaseModel, Field, EmailStr, validator
import re

class RegisterRequest(BaseModel):
    username: str = Field(..., min_length=3, max_length=50)
    email: EmailStr
    password: str = Field(..., min_length=6, max_length=72)

    @validator('username')
    def validate_username(cls, v):
        v = v.strip()
        if not re.match(r'^[A-Za-z0-9_.\-]+$', v):
            raise ValueError('Username can only contain letters, digits, dots, dashes and underscores')
        return v

class RegisterResponse(BaseModel):
    message: str
    userId: int

class LoginRequest(BaseModel):
    username: str
    password: str

class LoginUser(BaseModel):
    id: int
    username: str
    email: str

class LoginResponse(BaseModel):
    token: str
    user: LoginUser
