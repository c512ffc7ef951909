from fastapi import APIRouter

from app.dependencies import AuthDep
from app.schemas.responses import LoginResponse, MessageResponse
from app.schemas.user import LoginRequest, SignupRequest

router = APIRouter(prefix="/api/auth", tags=["auth"])


@router.post("/signup", response_model=MessageResponse, status_code=201)
async def signup(request: SignupRequest, service: AuthDep) -> MessageResponse:
    await service.signup(request)
    return MessageResponse(message="User registered successfully")


@router.post("/login", response_model=LoginResponse)
async def login(request: LoginRequest, service: AuthDep) -> LoginResponse:
    token, user = await service.login(request)
    return LoginResponse(message="Login successful", token=token, name=user.name)
