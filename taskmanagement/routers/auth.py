"""Authentication router."""
from fastapi import APIRouter, Depends, HTTPException, status
from sqlmodel import Session

from taskmanagement.db.config import get_session
from taskmanagement.exceptions import InvalidCredentialsError, UsernameTakenError
from taskmanagement.middleware.auth import create_access_token
from taskmanagement.schemas.auth import LoginRequest, MessageResponse, RegisterRequest, TokenResponse
from taskmanagement.services.user_service import UserService

router = APIRouter(tags=["Authentication"])  # No prefix since main.py adds /auth


def get_user_service(session: Session = Depends(get_session)) -> UserService:
    """Dependency for getting UserService instance."""
    return UserService(session)


@router.post("/register", response_model=MessageResponse)
async def register(request: RegisterRequest, service: UserService = Depends(get_user_service)):
    try:
        service.register(request.username, request.password, str(request.email))
    except UsernameTakenError as e:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=e.message)
    return MessageResponse(message="User registered successfully")


@router.post("/login", response_model=TokenResponse)
async def login(request: LoginRequest, service: UserService = Depends(get_user_service)):
    try:
        user = service.authenticate(request.username, request.password)
    except InvalidCredentialsError as e:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail=e.message,
            headers={"WWW-Authenticate": "Bearer"},
        )
    return TokenResponse(token=create_access_token(user.username))
