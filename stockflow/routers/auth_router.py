from fastapi import APIRouter, Depends

from ..application.services.auth_service import AuthService
from ..dependencies import get_auth_service
from ..schemas import RegisterRequest, RegisterResponse, LoginRequest, LoginResponse

router = APIRouter(prefix="/api", tags=["Authentication"])


@router.post("/register", response_model=RegisterResponse)
def register(body: RegisterRequest, auth: AuthService = Depends(get_auth_service)):
    user = auth.register(body.username, body.email, body.password)
    return RegisterResponse(message="User registered successfully", userId=user.id)


@router.post("/login", response_model=LoginResponse)
def login(body: LoginRequest, auth: AuthService = Depends(get_auth_service)):
    return auth.login(body.username, body.password)
